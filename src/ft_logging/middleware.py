"""
ft_logging HTTP Middleware

FastAPI middleware that builds a RequestContext for every request and hands
it to route handlers through ``request.state``.
"""

import uuid
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .context import RequestContext
from .logger import Logger


class LogContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware to initialize the request-scoped log context.

    This middleware:
    - Reads the request ID from headers or generates a new one
    - Builds a RequestContext with user/session/trace information from headers
    - Stores it on ``request.state.log_context`` for handlers to pass along
    - Logs request start and completion when a logger is configured
    """

    def __init__(self, app: ASGIApp, logger: Optional[Logger] = None):
        """
        Initialize the middleware.

        Args:
            app: Wrapped ASGI application
            logger: Optional logger for request start/completion lines
        """
        super().__init__(app)
        self.logger = logger

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and attach its log context.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            HTTP response
        """
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        ctx = RequestContext(
            request_id=request_id,
            user_id=request.headers.get("X-User-ID"),
            session_id=request.headers.get("X-Session-ID"),
            trace_id=request.headers.get("X-Trace-ID"),
            attributes={
                "method": request.method,
                "path": request.url.path,
            },
        )
        request.state.log_context = ctx

        description = f"{request.method} {request.url.path}"
        if self.logger is not None:
            self.logger.info(ctx, f"Request started: {description}")

        try:
            response = await call_next(request)
        except Exception as e:
            if self.logger is not None:
                self.logger.error(ctx, f"Request failed: {description} ({type(e).__name__}: {e})")
            raise

        # Add request ID to response headers for tracing
        response.headers["X-Request-ID"] = request_id

        if self.logger is not None:
            message = f"Request completed: {description} -> {response.status_code}"
            if response.status_code >= 500:
                self.logger.error(ctx, message)
            else:
                self.logger.success(ctx, message)

        return response


def get_log_context(request: Request) -> RequestContext:
    """
    FastAPI dependency returning the current request's log context.

    Args:
        request: Incoming HTTP request

    Returns:
        The context built by LogContextMiddleware, or an empty RequestContext
        when the middleware is not installed
    """
    return getattr(request.state, "log_context", None) or RequestContext()
