from __future__ import annotations

import pytest
from loguru import logger

from core.config import AppSettings

_ENV_VARS = (
    "YANDEX_DISK_TOKEN",
    "DOG_UPLOADER_YANDEX_DISK_TOKEN",
    "DOG_UPLOADER_BREEDS",
    "DOG_UPLOADER_FOLDER_NAME",
    "DOG_UPLOADER_LOG_LEVEL",
    "DOG_UPLOADER_DOG_API_BASE_URL",
    "DOG_UPLOADER_DISK_API_BASE_URL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def log_messages() -> list[str]:
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture()
def settings() -> AppSettings:
    return AppSettings(
        dog_api_base_url="https://dog.test/api",
        disk_api_base_url="https://disk.test/v1/disk",
        yandex_disk_token="secret-token",
    )
