from __future__ import annotations

import logging

from .events import ActionEvent, event_bus
from .models.api import ActionLogEntry
from .models.enums import ActionLogResult

logger = logging.getLogger("cardchess.actions")

_LEVELS = {
    ActionLogResult.APPLIED: logging.INFO,
    ActionLogResult.ILLEGAL: logging.WARNING,
    ActionLogResult.ERROR: logging.ERROR,
}


def _on_action_event(ev: ActionEvent) -> None:
    # Convert event to ActionLogEntry JSON for the log line
    entry = ActionLogEntry(
        ply=ev.ply,
        color=ev.color,
        action=ev.action,
        result=ev.result,
        message=ev.message,
    )
    logger.log(_LEVELS[ev.result], "[%s] %s", ev.game_id, entry.model_dump_json())


def register_listeners() -> None:
    event_bus.subscribe(ActionEvent, _on_action_event)


def unregister_listeners() -> None:
    event_bus.unsubscribe(ActionEvent, _on_action_event)
