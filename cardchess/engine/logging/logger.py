from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core import Game

from ...events import ActionEvent, event_bus
from ...models.api import Action, ActionLogEntry
from ...models.enums import ActionLogResult


def log_event(
    game: Game,
    action: Action,
    result: ActionLogResult,
    message: str | None = None,
) -> None:
    entry = ActionLogEntry(
        ply=game.ply,
        color=game.turn,
        action=action,
        result=result,
        message=message,
    )
    game.action_log.append(entry)
    event_bus.emit(
        ActionEvent(
            game_id=game.id,
            ply=entry.ply,
            color=entry.color,
            action=action,
            result=result,
            message=message,
        )
    )


def log_illegal(game: Game, action: Action, explanation: str) -> None:
    log_event(game, action, ActionLogResult.ILLEGAL, explanation)


def log_error(game: Game, action: Action, error: Exception) -> None:
    log_event(game, action, ActionLogResult.ERROR, str(error))
