import unittest
from pathlib import Path
import runpy

import numpy as np
from pydantic import ValidationError

from coordinate_vector.schema import Vector2DModel
from coordinate_vector.vector_2d import Vector2D


class TestVector2DModel(unittest.TestCase):
    def test_validates_mapping(self):
        m = Vector2DModel.model_validate({"x": 1, "y": -2.5})
        self.assertEqual(m.to_vector(), Vector2D(1.0, -2.5))

    def test_from_vector_single_precision(self):
        m = Vector2DModel.from_vector(Vector2D(np.float32(0.5), np.float32(-4.0)))
        self.assertEqual((m.x, m.y), (0.5, -4.0))
        self.assertIsInstance(m.x, float)

    def test_rejects_bad_payloads(self):
        with self.assertRaises(ValidationError):
            Vector2DModel.model_validate({"x": 1.0})
        with self.assertRaises(ValidationError):
            Vector2DModel.model_validate({"x": "left", "y": 0.0})


class TestDemo(unittest.TestCase):
    def test_reports_norms(self):
        path = Path(__file__).resolve().parent.parent / "examples" / "vector2d_demo.py"
        demo = runpy.run_path(str(path))
        with self.assertLogs("coordinate_vector.demo", level="INFO") as cm:
            demo["main"]()
        v = Vector2D.new(1.2, -8.7)
        expected = f"INFO:coordinate_vector.demo:v = (1.2, -8.7), norm = {v.norm()}, norm^2 = {v.norm_sqr()}"
        self.assertEqual(cm.output, [expected])


if __name__ == "__main__":
    unittest.main()
