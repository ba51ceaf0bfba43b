"""Recetario API - Middleware Package."""

from recetario.middleware.security_headers import SecurityHeadersMiddleware

__all__ = ["SecurityHeadersMiddleware"]
