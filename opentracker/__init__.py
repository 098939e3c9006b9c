from opentracker.errors import TrackerError, TrackerStartupError
from opentracker.handlers.events import EventHandler, LoggingEventHandler
from opentracker.links import generate_link
from opentracker.models.event import OpenEvent
from opentracker.pixel import PIXEL_GIF
from opentracker.schemas.config import TrackerConfig
from opentracker.server import create_app
from opentracker.tracker import Tracker

__all__ = [
    "EventHandler",
    "LoggingEventHandler",
    "OpenEvent",
    "PIXEL_GIF",
    "Tracker",
    "TrackerConfig",
    "TrackerError",
    "TrackerStartupError",
    "create_app",
    "generate_link",
]
