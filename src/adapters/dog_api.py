"""Cliente de la API Dog CEO (https://dog.ceo/dog-api/).

Endpoints usados:
- `GET /breed/{breed}/list` -> sub-razas.
- `GET /breed/{breed}[/{sub_breed}]/images/random` -> URL de imagen aleatoria.

Todas las respuestas tienen la forma `{"message": ..., "status": ...}`.
Los fallos de red/protocolo se registran y se devuelven como `ApiResult`.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import ValidationError

from adapters.http_client import ABSORBED_ERRORS, build_async_client, classify_exception, safe_json
from core.config import AppSettings
from core.domain.models import DogApiResponse
from core.domain.results import ApiResult, ErrorKind
from core.interfaces.sources import BreedImageSource


def _require_breed(breed: str) -> str:
    cleaned = breed.strip()
    if not cleaned:
        raise ValueError("breed must be a non-empty string")
    return cleaned


class DogApiClient(BreedImageSource):
    """Lectura sin estado del catálogo de razas."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        self._base_url = self._settings.dog_api_base_url.rstrip("/")

    async def list_sub_breeds(self, breed: str) -> ApiResult[list[str]]:
        breed = _require_breed(breed)
        action = f"Failed to list sub-breeds of '{breed}'"
        result = await self._fetch(f"/breed/{quote(breed)}/list", action=action)
        if not result.ok or result.value is None:
            return ApiResult.failure(
                [],
                result.error or ErrorKind.PROTOCOL,
                result.detail or "empty body",
                status_code=result.status_code,
            )

        message = result.value.message
        if not isinstance(message, list):
            logger.error(f"{action}: expected a list, got {type(message).__name__}")
            return ApiResult.failure([], ErrorKind.PROTOCOL, "message is not a list", status_code=result.status_code)

        return ApiResult.success(list(message), status_code=result.status_code)

    async def random_image(self, breed: str, sub_breed: str | None = None) -> ApiResult[str]:
        breed = _require_breed(breed)
        breed_path = quote(breed)
        label = breed
        sub_breed = (sub_breed or "").strip()
        if sub_breed:
            breed_path = f"{breed_path}/{quote(sub_breed)}"
            label = f"{breed}/{sub_breed}"

        action = f"Failed to fetch a random image for '{label}'"
        result = await self._fetch(f"/breed/{breed_path}/images/random", action=action)
        if not result.ok or result.value is None:
            return ApiResult.failure(
                "",
                result.error or ErrorKind.PROTOCOL,
                result.detail or "empty body",
                status_code=result.status_code,
            )

        message = result.value.message
        if not isinstance(message, str):
            logger.error(f"{action}: expected a URL string, got {type(message).__name__}")
            return ApiResult.failure("", ErrorKind.PROTOCOL, "message is not a string", status_code=result.status_code)

        return ApiResult.success(message, status_code=result.status_code)

    async def _fetch(self, path: str, *, action: str) -> ApiResult[DogApiResponse | None]:
        url = f"{self._base_url}{path}"
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url)
        except ABSORBED_ERRORS as exc:
            kind, detail = classify_exception(exc)
            logger.error(f"{action}: {detail}")
            return ApiResult.failure(None, kind, detail)

        envelope: DogApiResponse | None = None
        body = safe_json(response)
        if isinstance(body, dict):
            try:
                envelope = DogApiResponse.model_validate(body)
            except ValidationError:
                envelope = None

        status = response.status_code
        if status == 200 and envelope is not None and not envelope.is_error:
            return ApiResult.success(envelope, status_code=status)

        if envelope is not None and envelope.is_error and isinstance(envelope.message, str):
            detail = f"{envelope.message} (HTTP {status})"
        else:
            detail = f"unknown error (HTTP {status})"
        logger.error(f"{action}: {detail}")
        return ApiResult.failure(None, ErrorKind.PROTOCOL, detail, status_code=status)
