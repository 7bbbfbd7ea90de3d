"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.services.upload_pipeline import WorkflowResult


def print_banner(console: Console, *, breed: str) -> None:
    """Imprime el banner con la raza elegida para esta ejecución."""

    title = Text("dog-disk-uploader", style="bold cyan")
    subtitle = Text(f"Dog CEO → Yandex.Disk • breed: {breed}", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_upload_table(result: WorkflowResult) -> Table:
    """Tabla con un intento de subida por fila, más los saltados."""

    report = result.report
    table = Table(title=f"Uploads to /{report.folder} ({report.folder_status.value})")
    table.add_column("File", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Verified", style="green")
    table.add_column("Source / Error", style="magenta")

    seen = set(result.files)
    for attempt in report.attempts:
        status = "OK" if attempt.ok else f"FAIL ({attempt.error.value if attempt.error else '?'})"
        verified = "yes" if attempt.file_name in seen else "no"
        info = attempt.source_url if attempt.ok else (attempt.detail or "")
        table.add_row(attempt.file_name, status, verified, info)
    for name in report.skipped:
        table.add_row(name, "SKIPPED", "-", "no image URL", style="dim")
    return table
