from opentracker.schemas.config import TrackerConfig
from opentracker.schemas.event import OpenEventRecord

__all__ = ["OpenEventRecord", "TrackerConfig"]
