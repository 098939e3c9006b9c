from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class OpenEvent:
    """Domain model for a single pixel fetch."""

    id: str
    ip: str
    forwarded_for: str
    user_agent: str
    referer: str
    accept_language: str
    time: datetime
