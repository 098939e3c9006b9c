from opentracker.models.event import OpenEvent

__all__ = ["OpenEvent"]
