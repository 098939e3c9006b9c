import os

from dotenv import load_dotenv

from opentracker.schemas.config import TrackerConfig

DEFAULT_PORT = 8080
DEFAULT_PATH = "/pixel"
DEFAULT_HOST = "0.0.0.0"


def load_config() -> TrackerConfig:
    """Build the standalone server config from the environment (and .env)."""
    load_dotenv()
    raw_port = os.getenv("TRACKER_PORT", "").strip()
    try:
        port = int(raw_port) if raw_port else DEFAULT_PORT
    except ValueError as exc:
        raise RuntimeError(f"TRACKER_PORT must be an integer, got {raw_port!r}") from exc

    domain = os.getenv("TRACKER_DOMAIN", "").strip() or f"localhost:{port}"
    path = os.getenv("TRACKER_PATH", "").strip() or DEFAULT_PATH
    host = os.getenv("TRACKER_HOST", "").strip() or DEFAULT_HOST

    trusted_proxies = None
    raw_proxies = os.getenv("TRACKER_TRUSTED_PROXIES")
    if raw_proxies is not None:
        trusted_proxies = tuple(p.strip() for p in raw_proxies.split(",") if p.strip())

    return TrackerConfig(
        port=port,
        domain=domain,
        path=path,
        host=host,
        trusted_proxies=trusted_proxies,
    )
