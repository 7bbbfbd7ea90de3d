"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y la clasificación de errores de red.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import AppSettings
from core.domain.results import ErrorKind


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que ambos adaptadores se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


# Errores que los adaptadores absorben y convierten en `ApiResult`.
# Cualquier otra excepción sube hasta el borde exterior (CLI).
ABSORBED_ERRORS: tuple[type[Exception], ...] = (httpx.HTTPError, ValueError)


def classify_exception(exc: Exception) -> tuple[ErrorKind, str]:
    """Map an absorbed exception to `(kind, detail)`."""

    if isinstance(exc, httpx.TransportError):
        return ErrorKind.TRANSPORT, f"{type(exc).__name__}: {exc}"
    if isinstance(exc, httpx.HTTPError):
        return ErrorKind.PROTOCOL, f"{type(exc).__name__}: {exc}"
    # json.JSONDecodeError y ValidationError de pydantic son ValueError.
    return ErrorKind.PROTOCOL, f"invalid response body: {type(exc).__name__}"


def safe_json(response: httpx.Response) -> Any | None:
    """Decodifica JSON sin lanzar; `None` si el cuerpo no es JSON."""

    try:
        return response.json()
    except ValueError:
        return None
