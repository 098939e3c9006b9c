import logging
import sys

from fastapi import FastAPI
from pydantic import ValidationError

from opentracker.errors import TrackerStartupError
from opentracker.handlers.events import LoggingEventHandler
from opentracker.logs import configure_logging
from opentracker.server import create_app
from opentracker.settings import load_config
from opentracker.tracker import Tracker


logger = logging.getLogger(__name__)


def build_tracker() -> Tracker:
    return Tracker(load_config(), LoggingEventHandler())


def create_default_app() -> FastAPI:
    """For `uvicorn --factory opentracker.main:create_default_app`."""
    return create_app(build_tracker())


def run() -> None:
    configure_logging()
    try:
        tracker = build_tracker()
    except (RuntimeError, ValidationError):
        logger.exception("invalid tracker configuration")
        sys.exit(1)

    logger.info("embed pixels as %s", tracker.generate_link("<id>"))
    try:
        tracker.start()
    except TrackerStartupError:
        logger.exception("tracker failed to start")
        sys.exit(1)
