"""
CSRF middleware for FastAPI / Starlette.
Verifies the token header on state-changing requests against the session
secret supplied by the host application.
"""
from __future__ import annotations

import inspect
import logging
from typing import Awaitable, Callable, Iterable, Optional, Union

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from csrf_tokens.core.config import get_settings
from csrf_tokens.security.tokens import Tokens

logger = logging.getLogger(__name__)

SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "TRACE"})

SecretGetter = Callable[[Request], Union[Optional[str], Awaitable[Optional[str]]]]


class CSRFMiddleware(BaseHTTPMiddleware):
    """
    Reject POST/PUT/PATCH/DELETE requests without a valid token.

    ``get_secret`` returns the secret the host stored for this client
    (sync or async); the middleware never stores anything itself.
    """

    def __init__(
        self,
        app,
        get_secret: SecretGetter,
        tokens: Optional[Tokens] = None,
        header_name: Optional[str] = None,
        exempt_paths: Iterable[str] = (),
    ):
        super().__init__(app)
        self.get_secret = get_secret
        self.tokens = tokens or Tokens()
        self.header_name = header_name or get_settings().header_name
        self.exempt_paths = tuple(exempt_paths)

    async def dispatch(self, request: Request, call_next):
        if request.method in SAFE_METHODS:
            return await call_next(request)

        if self.exempt_paths and request.url.path.startswith(self.exempt_paths):
            return await call_next(request)

        token = request.headers.get(self.header_name)
        if not token:
            return _forbidden(f"CSRF token missing. Include {self.header_name} header.")

        secret = self.get_secret(request)
        if inspect.isawaitable(secret):
            secret = await secret

        if not secret or not self.tokens.verify(secret, token):
            logger.info("CSRF check failed for %s %s", request.method, request.url.path)
            return _forbidden("CSRF token invalid.")

        return await call_next(request)


def _forbidden(detail: str) -> JSONResponse:
    # raising HTTPException inside BaseHTTPMiddleware bypasses FastAPI's handlers
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": detail})
