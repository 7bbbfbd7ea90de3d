"""CLI principal (Typer).

Sin argumentos ejecuta la subida: elige una raza al azar, sube sus imágenes
a Yandex.Disk y verifica la carpeta. `doctor run` hace diagnósticos.
"""

from __future__ import annotations

import asyncio
import random
from typing import Callable, Sequence

import httpx
import typer
from loguru import logger
from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console

from cli import doctor
from cli.ui_components import build_upload_table, print_banner
from core.config import AppSettings
from core.logging_config import setup_logging
from core.services.upload_pipeline import WorkflowResult, run_workflow

app = typer.Typer(
    help="Upload random dog breed images to Yandex.Disk.",
    add_completion=False,
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def choose_breed(breeds: Sequence[str], chooser: Callable[[Sequence[str]], str] = random.choice) -> str:
    """Pick one breed uniformly at random."""

    if not breeds:
        raise ValueError("no breeds configured")
    return chooser(breeds)


def perform_upload(
    settings: AppSettings | None = None,
    *,
    chooser: Callable[[Sequence[str]], str] = random.choice,
    transport: httpx.AsyncBaseTransport | None = None,
    console: Console | None = None,
) -> WorkflowResult | None:
    """Run the whole workflow once; returns `None` when the run was aborted.

    Never raises: a missing token stops the run before any request, and any
    other error escaping the workflow is logged here.
    """

    try:
        settings = settings or AppSettings()
    except (ValidationError, SettingsError) as exc:
        logger.error(f"Invalid configuration: {exc}")
        return None

    setup_logging(level=settings.log_level)

    token = settings.token_value()
    if token is None:
        logger.error("Yandex.Disk token not found in environment (YANDEX_DISK_TOKEN)")
        return None

    try:
        breed = choose_breed(settings.breeds, chooser)
        if console is not None:
            print_banner(console, breed=breed)
        logger.info(f"Selected breed: {breed}")
        result = asyncio.run(run_workflow(breed=breed, token=token, settings=settings, transport=transport))
    except Exception:
        logger.exception("Upload run failed")
        return None

    if console is not None:
        console.print(build_upload_table(result))
    return result


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Upload one random image per sub-breed of a random breed."""

    if ctx.invoked_subcommand is not None:
        return
    setup_logging()
    perform_upload(console=_console)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
