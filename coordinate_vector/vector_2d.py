from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from coordinate_vector.common import CartesianVector, F, sqrt


@dataclass(frozen=True, eq=False)
class Vector2D(CartesianVector[F]):
    x: F
    y: F

    # Makes numpy scalars defer to __rmul__ instead of broadcasting over the vector.
    __array_ufunc__ = None

    @classmethod
    def new(cls, x: F, y: F) -> "Vector2D[F]":
        return cls(x, y)

    @classmethod
    def zero(cls) -> "Vector2D[float]":
        return cls(0.0, 0.0)

    @classmethod
    def from_tuple(cls, pair: Tuple[F, F]) -> "Vector2D[F]":
        x, y = pair
        return cls(x, y)

    def to_tuple(self) -> Tuple[F, F]:
        return (self.x, self.y)

    def norm(self) -> F:
        return sqrt(self.norm_sqr())

    def norm_sqr(self) -> F:
        return self.x * self.x + self.y * self.y

    def scale(self, t: F) -> "Vector2D[F]":
        return Vector2D(self.x * t, self.y * t)

    def __add__(self, o: "Vector2D[F]") -> "Vector2D[F]":
        if not isinstance(o, Vector2D):
            return NotImplemented
        return Vector2D(self.x + o.x, self.y + o.y)

    def __sub__(self, o: "Vector2D[F]") -> "Vector2D[F]":
        if not isinstance(o, Vector2D):
            return NotImplemented
        return Vector2D(self.x - o.x, self.y - o.y)

    def __neg__(self) -> "Vector2D[F]":
        return Vector2D(-self.x, -self.y)

    def __mul__(self, s: F) -> "Vector2D[F]":
        if isinstance(s, Vector2D):
            return NotImplemented
        return self.scale(s)

    __rmul__ = __mul__

    # Field-by-field so NaN coordinates never compare equal, not even to themselves.
    def __eq__(self, o: object) -> bool:
        if not isinstance(o, Vector2D):
            return NotImplemented
        return self.x == o.x and self.y == o.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
