from pydantic import BaseModel, ConfigDict

from opentracker.models.event import OpenEvent


class OpenEventRecord(BaseModel):
    id: str
    ip: str
    forwarded_for: str
    user_agent: str
    referer: str
    accept_language: str
    time: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "abc123",
                "ip": "203.0.113.5",
                "forwarded_for": "203.0.113.5",
                "user_agent": "Mozilla/5.0",
                "referer": "",
                "accept_language": "en-GB,en;q=0.9",
                "time": "2024-01-01T00:00:00+00:00",
            }
        }
    )

    @classmethod
    def from_event(cls, event: OpenEvent) -> "OpenEventRecord":
        return cls(
            id=event.id,
            ip=event.ip,
            forwarded_for=event.forwarded_for,
            user_agent=event.user_agent,
            referer=event.referer,
            accept_language=event.accept_language,
            time=event.time.isoformat(),
        )
