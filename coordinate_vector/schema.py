from __future__ import annotations

from pydantic import BaseModel, Field

from coordinate_vector.vector_2d import Vector2D


class Vector2DModel(BaseModel):
    x: float = Field(..., description="Horizontal coordinate")
    y: float = Field(..., description="Vertical coordinate")

    @classmethod
    def from_vector(cls, v: Vector2D) -> "Vector2DModel":
        return cls(x=float(v.x), y=float(v.y))

    def to_vector(self) -> Vector2D[float]:
        return Vector2D(self.x, self.y)
