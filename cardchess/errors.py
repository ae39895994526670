from __future__ import annotations


class EngineError(Exception):
    """Precondition violated at the engine boundary. Never retried."""


class OutOfBounds(EngineError, IndexError):
    def __init__(self, coord, width: int | None = None, height: int | None = None):
        msg = f"Coordinate out of bounds: {coord}"
        if width is not None and height is not None:
            msg += f" (board is {width}x{height})"
        super().__init__(msg)
        self.coord = coord


class EmptySource(EngineError, ValueError):
    def __init__(self, coord):
        super().__init__(f"No piece at source coordinate {coord}")
        self.coord = coord


class UnknownPieceType(EngineError, KeyError):
    def __init__(self, piece_type: str, where: str = ""):
        msg = f"Unknown piece type: {piece_type!r}"
        if where:
            msg += f" ({where})"
        super().__init__(msg)
        self.piece_type = piece_type

    def __str__(self) -> str:
        return self.args[0]
