from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ...models.api import Action
    from ..core import Game


class ActionHandler(Protocol):
    action_type: type

    def evaluate(self, game: Game, action: Action) -> tuple[bool, str]: ...

    def apply(self, game: Game, action: Action) -> Any: ...


Registry = dict[type, ActionHandler]
