"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Normaliza las respuestas JSON de Dog CEO y Yandex.Disk en estructuras claras.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class DogApiResponse(BaseModel):
    """Sobre común de todas las respuestas de Dog CEO.

    Ejemplos:
    - `{"message": ["boston", "english", "french"], "status": "success"}`
    - `{"message": "https://images.dog.ceo/breeds/collie/n02106030_1.jpg", "status": "success"}`
    - `{"message": "Breed not found (main breed does not exist)", "status": "error", "code": 404}`
    """

    model_config = ConfigDict(extra="ignore")

    message: str | list[str] = Field(
        ...,
        description="Carga útil: lista de sub-razas, URL de imagen o texto de error.",
    )
    status: str = Field(
        ...,
        description="'success' o 'error'.",
    )
    code: int | None = Field(
        default=None,
        description="Código HTTP replicado en el cuerpo de error.",
    )

    @property
    def is_error(self) -> bool:
        return self.status != "success"


class DiskItem(BaseModel):
    """Elemento remoto de Yandex.Disk (carpeta o fichero)."""

    model_config = ConfigDict(extra="ignore")

    type: str = Field(
        ...,
        description="'dir' o 'file'.",
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Nombre del recurso dentro de su carpeta.",
    )
    path: str | None = Field(
        default=None,
        description="Ruta completa (p.ej. 'disk:/dog_images/collie.jpg').",
    )
    size: int | None = Field(
        default=None,
        ge=0,
        description="Tamaño en bytes (solo ficheros).",
    )
    mime_type: str | None = Field(
        default=None,
        description="MIME type detectado por el servicio (solo ficheros).",
    )

    @property
    def is_file(self) -> bool:
        return self.type == "file"


class DiskError(BaseModel):
    """Cuerpo de error estándar de la API REST de Yandex.Disk."""

    model_config = ConfigDict(extra="ignore")

    error: str = Field(
        ...,
        description="Código simbólico (p.ej. 'DiskPathPointsToExistentDirectoryError').",
    )
    message: str | None = Field(
        default=None,
        description="Mensaje localizado para humanos.",
    )
    description: str | None = Field(
        default=None,
        description="Descripción técnica en inglés.",
    )


class FolderStatus(str, Enum):
    """Outcome of a folder creation request."""

    CREATED = "created"
    EXISTS = "exists"
    FAILED = "failed"
