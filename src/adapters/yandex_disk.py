"""Cliente de la API REST de Yandex.Disk.

Operaciones:
- `PUT  /resources?path=...` -> crear carpeta.
- `POST /resources/upload?path=...&url=...&overwrite=true` -> subida por referencia
  (el propio Yandex.Disk descarga la URL).
- `GET  /resources?path=...` -> listar el contenido de una carpeta.

Autenticación: cabecera `Authorization: OAuth <token>` en todas las peticiones.
El token nunca aparece en los logs.
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from adapters.http_client import ABSORBED_ERRORS, build_async_client, classify_exception, safe_json
from core.config import AppSettings
from core.domain.models import DiskError, DiskItem, FolderStatus
from core.domain.results import ApiResult, ErrorKind
from core.interfaces.storage import FileStorage

_EXISTING_DIRECTORY_ERROR = "DiskPathPointsToExistentDirectoryError"


def disk_path(*parts: str) -> str:
    """Join path segments into an absolute disk path (`/a/b`)."""

    cleaned = [p.strip("/") for p in parts if p and p.strip("/")]
    return "/" + "/".join(cleaned)


def _parse_error(body: Any) -> DiskError | None:
    if not isinstance(body, dict):
        return None
    try:
        return DiskError.model_validate(body)
    except ValidationError:
        return None


class YandexDiskClient(FileStorage):
    """Acceso autenticado a Yandex.Disk."""

    def __init__(
        self,
        token: str,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not token:
            raise ValueError("Yandex.Disk token is required")
        self._settings = settings or AppSettings()
        self._transport = transport
        self._base_url = self._settings.disk_api_base_url.rstrip("/")
        self._headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"OAuth {token}",
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    async def create_folder(self, path: str) -> ApiResult[FolderStatus]:
        target = disk_path(path)
        result = await self._request("PUT", "/resources", params={"path": target})
        if isinstance(result, ApiResult):
            logger.error(f"Failed to create folder '{target}': {result.detail}")
            return ApiResult.failure(FolderStatus.FAILED, result.error or ErrorKind.TRANSPORT, result.detail or "")

        response = result
        if response.status_code == 201:
            logger.info(f"Folder created: {target}")
            return ApiResult.success(FolderStatus.CREATED, status_code=201)

        error = _parse_error(safe_json(response))
        if response.status_code == 409 and error is not None and error.error == _EXISTING_DIRECTORY_ERROR:
            logger.info(f"Folder already exists: {target}")
            return ApiResult.success(FolderStatus.EXISTS, status_code=409)

        detail = self._describe(response, error)
        logger.error(f"Failed to create folder '{target}': {detail}")
        return ApiResult.failure(FolderStatus.FAILED, ErrorKind.PROTOCOL, detail, status_code=response.status_code)

    async def upload_from_url(self, path: str, source_url: str, file_name: str) -> ApiResult[str | None]:
        target = disk_path(path, file_name)
        params = {
            "path": target,
            "url": source_url,
            "overwrite": "true",
        }
        result = await self._request("POST", "/resources/upload", params=params)
        if isinstance(result, ApiResult):
            logger.error(f"Failed to upload '{file_name}': {result.detail}")
            return ApiResult.failure(None, result.error or ErrorKind.TRANSPORT, result.detail or "")

        response = result
        body = safe_json(response)
        if response.is_success:
            href = body.get("href") if isinstance(body, dict) else None
            logger.info(f"Uploaded: {file_name}")
            return ApiResult.success(href if isinstance(href, str) else None, status_code=response.status_code)

        detail = self._describe(response, _parse_error(body))
        logger.error(f"Failed to upload '{file_name}': {detail}")
        return ApiResult.failure(None, ErrorKind.PROTOCOL, detail, status_code=response.status_code)

    async def list_items(self, path: str) -> ApiResult[list[DiskItem]]:
        target = disk_path(path)
        params: dict[str, Any] = {"path": target, "limit": self._settings.disk_list_limit}
        result = await self._request("GET", "/resources", params=params)
        if isinstance(result, ApiResult):
            logger.error(f"Failed to list '{target}': {result.detail}")
            return ApiResult.failure([], result.error or ErrorKind.TRANSPORT, result.detail or "")

        response = result
        body = safe_json(response)
        if response.status_code != 200 or not isinstance(body, dict):
            detail = self._describe(response, _parse_error(body))
            logger.error(f"Failed to list '{target}': {detail}")
            return ApiResult.failure([], ErrorKind.PROTOCOL, detail, status_code=response.status_code)

        embedded = body.get("_embedded")
        raw_items = embedded.get("items") if isinstance(embedded, dict) else None
        items: list[DiskItem] = []
        for raw in raw_items or []:
            if not isinstance(raw, dict):
                continue
            try:
                items.append(DiskItem.model_validate(raw))
            except ValidationError:
                continue
        return ApiResult.success(items, status_code=response.status_code)

    async def ping(self) -> ApiResult[bool]:
        """`GET /` (disk info): checks connectivity and token validity."""

        result = await self._request("GET", "/")
        if isinstance(result, ApiResult):
            return ApiResult.failure(False, result.error or ErrorKind.TRANSPORT, result.detail or "")
        if result.status_code != 200:
            detail = self._describe(result, _parse_error(safe_json(result)))
            return ApiResult.failure(False, ErrorKind.PROTOCOL, detail, status_code=result.status_code)
        return ApiResult.success(True, status_code=200)

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response | ApiResult[None]:
        """Run one request; network failures come back as a failed `ApiResult`."""

        url = f"{self._base_url}{endpoint}"
        try:
            async with build_async_client(
                self._settings,
                extra_headers=self._headers,
                transport=self._transport,
            ) as client:
                return await client.request(method, url, params=params)
        except ABSORBED_ERRORS as exc:
            kind, detail = classify_exception(exc)
            return ApiResult.failure(None, kind, detail)

    @staticmethod
    def _describe(response: httpx.Response, error: DiskError | None) -> str:
        if error is not None:
            text = error.message or error.description or error.error
            return f"{error.error}: {text} (HTTP {response.status_code})"
        return f"unknown error (HTTP {response.status_code})"
