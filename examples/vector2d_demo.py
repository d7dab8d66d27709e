from __future__ import annotations

import logging

from coordinate_vector.vector_2d import Vector2D


logger = logging.getLogger("coordinate_vector.demo")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")
    v = Vector2D.new(1.2, -8.7)
    logger.info("v = %s, norm = %s, norm^2 = %s", v, v.norm(), v.norm_sqr())


if __name__ == "__main__":
    main()
