import logging
from datetime import datetime, timezone
from typing import Optional, Union

from fastapi import APIRouter, FastAPI, Request, Response

from opentracker.client_ip import client_ip, remote_address
from opentracker.errors import TrackerStartupError
from opentracker.handlers.events import Callback, as_handler
from opentracker.links import generate_link
from opentracker.models.event import OpenEvent
from opentracker.pixel import NO_CACHE_HEADERS, PIXEL_GIF, PIXEL_MEDIA_TYPE
from opentracker.schemas.config import TrackerConfig
from opentracker.server import bind_socket, create_app, serve


logger = logging.getLogger(__name__)

PIXEL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class Tracker:
    """Serves the tracking pixel and reports each fetch to a callback.

    The tracker keeps no state between requests. It can be mounted on a
    caller-owned app with :meth:`register`, or run on its own listener
    with :meth:`start`.
    """

    def __init__(self, config: TrackerConfig, callback: Optional[Callback] = None) -> None:
        self.config = config
        self.handler = as_handler(callback)
        self._proxies = config.proxy_networks()

    def build_event(self, request: Request) -> OpenEvent:
        ids = request.query_params.getlist("id")
        forwarded_for = request.headers.get("x-forwarded-for", "")
        return OpenEvent(
            id=ids[0] if ids else "",
            ip=client_ip(forwarded_for, remote_address(request), self._proxies),
            forwarded_for=forwarded_for,
            user_agent=request.headers.get("user-agent", ""),
            referer=request.headers.get("referer", ""),
            accept_language=request.headers.get("accept-language", ""),
            time=datetime.now(timezone.utc),
        )

    def track(self, request: Request) -> Response:
        event = self.build_event(request)
        if self.handler is not None:
            try:
                self.handler.handle(event)
            except Exception:
                logger.exception("open event callback failed for id %r", event.id)
        return Response(
            content=PIXEL_GIF,
            status_code=200,
            media_type=PIXEL_MEDIA_TYPE,
            headers=NO_CACHE_HEADERS,
        )

    def router(self) -> APIRouter:
        router = APIRouter()

        # Sync route: Starlette runs it, and the callback, in its threadpool.
        @router.api_route(self.config.path, methods=PIXEL_METHODS, include_in_schema=False)
        def pixel(request: Request) -> Response:
            return self.track(request)

        return router

    def register(self, target: Union[FastAPI, APIRouter]) -> None:
        target.include_router(self.router())

    def generate_link(self, event_id: str) -> str:
        return generate_link(self.config, event_id)

    def start(self) -> None:
        """Listen on the configured port and serve until shutdown.

        Raises :class:`TrackerStartupError` when the listener cannot be
        bound. Binding is not retried.
        """
        host, port = self.config.host, self.config.port
        if self.config.trusted_proxies is None:
            logger.warning("X-Forwarded-For is trusted from any client; recorded IPs can be spoofed")
        try:
            sock = bind_socket(host, port)
        except OSError as exc:
            raise TrackerStartupError(f"cannot listen on {host}:{port}: {exc}") from exc

        app = create_app(self)
        logger.info("serving pixel on %s:%d%s", host, port, self.config.path)
        try:
            serve(app, sock)
        finally:
            sock.close()
