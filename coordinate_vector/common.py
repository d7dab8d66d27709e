from __future__ import annotations

from abc import ABC, abstractmethod
import math
from typing import Generic, TypeVar

import numpy as np


F = TypeVar("F", float, np.floating)
V = TypeVar("V", bound="CartesianVector")


def sqrt(value: F) -> F:
    """Square root that keeps numpy scalar widths (float32 stays float32)."""
    if isinstance(value, np.generic):
        return np.sqrt(value)
    return math.sqrt(value)


class CartesianVector(ABC, Generic[F]):
    """Capabilities shared by Cartesian coordinate vectors over a float type F."""

    @abstractmethod
    def norm(self) -> F:
        ...

    @abstractmethod
    def norm_sqr(self) -> F:
        """Squared Euclidean norm, for comparisons that can skip the square root."""

    @abstractmethod
    def scale(self: V, t: F) -> V:
        ...

    @abstractmethod
    def __add__(self: V, o: V) -> V:
        ...

    @abstractmethod
    def __sub__(self: V, o: V) -> V:
        ...
