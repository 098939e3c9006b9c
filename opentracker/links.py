from opentracker.schemas.config import TrackerConfig


def is_local_domain(domain: str, port: int) -> bool:
    """Static allow-list; ``::1`` or ``0.0.0.0`` do not count as local."""
    local = {"localhost", "127.0.0.1"}
    local |= {f"{name}:{port}" for name in ("localhost", "127.0.0.1")}
    return domain in local


def generate_link(config: TrackerConfig, event_id: str) -> str:
    """Build the image URL for ``event_id``.

    Nothing is percent-encoded, so callers must pass URL-safe identifiers.
    """
    scheme = "http" if is_local_domain(config.domain, config.port) else "https"
    return f"{scheme}://{config.domain}{config.path}?id={event_id}"
