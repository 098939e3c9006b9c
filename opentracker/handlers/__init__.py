from opentracker.handlers.events import (
    Callback,
    EventHandler,
    LoggingEventHandler,
    as_handler,
)

__all__ = ["Callback", "EventHandler", "LoggingEventHandler", "as_handler"]
