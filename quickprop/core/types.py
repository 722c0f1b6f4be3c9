"""Value types with built-in arbitrary instances."""

from dataclasses import dataclass
from typing import NewType

# Single uppercase character; registered separately from ``str``
Char = NewType("Char", str)


@dataclass(frozen=True)
class Size:
    """Two-dimensional size with independent width and height."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @classmethod
    def zero(cls) -> "Size":
        return cls(0.0, 0.0)

    def __str__(self) -> str:
        return f"({self.width}, {self.height})"
