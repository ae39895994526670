from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.pieces import Piece
    from ..ruleset import Ruleset


def captures_royal(rules: Ruleset, target: Piece | None) -> bool:
    # the only win condition: there is no check or mate detection
    return target is not None and rules.is_royal(target.type)
