from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

_ALGEBRAIC = re.compile(r"^[A-Z][1-9][0-9]*$")


class Coordinate(BaseModel):
    """Board coordinate (0-based). Row 0 is the top rank."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    @classmethod
    def from_index(cls, index: Any) -> Coordinate:
        if isinstance(index, Coordinate):
            return cls(x=index.x, y=index.y)
        if isinstance(index, Mapping):
            return cls(x=index["x"], y=index["y"])
        x, y = index
        return cls(x=x, y=y)

    @classmethod
    def from_algebraic(cls, algebraic: str) -> Coordinate:
        pos = algebraic.upper()
        if not _ALGEBRAIC.match(pos):
            raise ValueError(f"Invalid algebraic position: {pos}")
        return cls(x=ord(pos[0]) - 65, y=int(pos[1:]) - 1)

    @property
    def index(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}

    @property
    def algebraic(self) -> str:
        if not 0 <= self.x < 26:
            raise ValueError("X out of bounds for algebraic notation")
        return chr(65 + self.x) + str(self.y + 1)

    def offset(self, dx: int, dy: int) -> Coordinate:
        return Coordinate(x=self.x + dx, y=self.y + dy)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
