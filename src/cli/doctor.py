"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.dog_api import DogApiClient
from adapters.yandex_disk import YandexDiskClient
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_dog_api(settings: AppSettings, transport: httpx.AsyncBaseTransport | None = None) -> tuple[bool, str]:
    breed = settings.breeds[0]
    result = await DogApiClient(settings, transport=transport).list_sub_breeds(breed)
    if result.ok:
        return True, f"HTTP {result.status_code} ({breed}: {len(result.value)} sub-breeds)"
    return False, result.detail or "request failed"


async def _check_disk(
    settings: AppSettings,
    token: str,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[bool, str]:
    result = await YandexDiskClient(token, settings, transport=transport).ping()
    if result.ok:
        return True, f"HTTP {result.status_code}"
    return False, result.detail or "request failed"


def build_doctor_table(
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Table:
    """Run every check and collect the outcome in a table (never shows the token)."""

    table = Table(title="dog-disk-uploader Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    token = settings.token_value()
    if token:
        table.add_row("Disk token", "OK", "YANDEX_DISK_TOKEN is set")
    else:
        table.add_row("Disk token", "MISSING", "Set YANDEX_DISK_TOKEN before uploading")
    table.add_row("Target folder", "OK", f"/{settings.folder_name}")
    table.add_row("Breeds", "OK", ", ".join(settings.breeds))

    # Connectivity (best-effort)
    ok_dog, detail_dog = asyncio.run(_check_dog_api(settings, transport))
    table.add_row("Dog CEO API", "OK" if ok_dog else "FAIL", detail_dog)

    if token:
        ok_disk, detail_disk = asyncio.run(_check_disk(settings, token, transport))
        table.add_row("Yandex.Disk API", "OK" if ok_disk else "FAIL", detail_disk)
    else:
        table.add_row("Yandex.Disk API", "SKIPPED", "No token")

    return table


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    _console.print(build_doctor_table(settings))
