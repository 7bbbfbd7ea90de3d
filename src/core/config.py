"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (Dog CEO / Yandex.Disk) lean config de forma consistente.

Solo se lee el entorno del proceso: no hay fichero de configuración.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BREEDS: tuple[str, ...] = ("doberman", "bulldog", "collie")
DEFAULT_FOLDER = "dog_images"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOG_UPLOADER_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    yandex_disk_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("YANDEX_DISK_TOKEN", "DOG_UPLOADER_YANDEX_DISK_TOKEN"),
        description="Token OAuth de Yandex.Disk. Nunca se registra en logs.",
    )

    dog_api_base_url: str = Field(
        default="https://dog.ceo/api",
        min_length=8,
        description="Base URL de la API Dog CEO.",
    )
    disk_api_base_url: str = Field(
        default="https://cloud-api.yandex.net/v1/disk",
        min_length=8,
        description="Base URL de la API REST de Yandex.Disk.",
    )
    folder_name: str = Field(
        default=DEFAULT_FOLDER,
        min_length=1,
        description="Carpeta remota donde se suben las imágenes.",
    )
    breeds: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BREEDS),
        min_length=1,
        description="Razas candidatas; se elige una al azar en cada ejecución.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="dog-disk-uploader/0.1",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )
    disk_list_limit: int = Field(
        default=100,
        ge=1,
        le=10_000,
        description="Máximo de elementos pedidos al listar una carpeta.",
    )
    log_level: str = Field(
        default="INFO",
        description="Nivel de log (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("breeds")
    @classmethod
    def _strip_breeds(cls, value: list[str]) -> list[str]:
        cleaned = [b.strip().lower() for b in value]
        if any(not b for b in cleaned):
            raise ValueError("breed names must not be blank")
        return cleaned

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    def token_value(self) -> str | None:
        """Token en claro, o `None` si falta o está vacío."""

        if self.yandex_disk_token is None:
            return None
        token = self.yandex_disk_token.get_secret_value().strip()
        return token or None
