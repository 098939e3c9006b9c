import logging
from typing import Callable, Optional, Protocol, Union, runtime_checkable

from opentracker.models.event import OpenEvent
from opentracker.schemas.event import OpenEventRecord


events_logger = logging.getLogger("opentracker.events")


@runtime_checkable
class EventHandler(Protocol):
    """Receives one open event per tracked request.

    Implementations run on the request worker and delay the response
    while they run, so they should return promptly.
    """

    def handle(self, event: OpenEvent) -> None:
        ...


Callback = Union[EventHandler, Callable[[OpenEvent], None]]


class _CallableHandler:
    def __init__(self, func: Callable[[OpenEvent], None]) -> None:
        self._func = func

    def handle(self, event: OpenEvent) -> None:
        self._func(event)

    def __repr__(self) -> str:
        return f"_CallableHandler({self._func!r})"


def as_handler(callback: Optional[Callback]) -> Optional[EventHandler]:
    if callback is None:
        return None
    if callable(getattr(type(callback), "handle", None)):
        return callback
    if callable(callback):
        return _CallableHandler(callback)
    raise TypeError(f"callback must be callable or define handle(), got {type(callback).__name__}")


class LoggingEventHandler:
    """Write each event as one JSON line at INFO level."""

    def __init__(self, target: Optional[logging.Logger] = None) -> None:
        self.logger = target or events_logger

    def handle(self, event: OpenEvent) -> None:
        self.logger.info(OpenEventRecord.from_event(event).model_dump_json())
