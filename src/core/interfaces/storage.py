"""Contrato del almacenamiento remoto de ficheros."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import DiskItem, FolderStatus
from core.domain.results import ApiResult


@runtime_checkable
class FileStorage(Protocol):
    """Almacenamiento con subida por referencia (el servidor descarga la URL)."""

    async def create_folder(self, path: str) -> ApiResult[FolderStatus]:
        ...

    async def upload_from_url(self, path: str, source_url: str, file_name: str) -> ApiResult[str | None]:
        """Pide al servicio que descargue `source_url` en `path/file_name` (sobrescribe)."""

        ...

    async def list_items(self, path: str) -> ApiResult[list[DiskItem]]:
        ...
