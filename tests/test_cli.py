from __future__ import annotations

import sys

import httpx
import pytest
from loguru import logger
from rich.console import Console
from typer.testing import CliRunner

import cli.main as cli_main
from cli.doctor import build_doctor_table
from cli.main import app, choose_breed, perform_upload
from core.config import AppSettings
from core.logging_config import setup_logging
from fakes import RecordingTransport, json_response


@pytest.fixture(autouse=True)
def _keep_test_sinks(monkeypatch: pytest.MonkeyPatch) -> None:
    # setup_logging() would drop the capture sink installed by `log_messages`.
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected request: {request.method} {request.url}")


def test_choose_breed_uses_chooser() -> None:
    assert choose_breed(["doberman", "bulldog", "collie"], lambda seq: seq[-1]) == "collie"


def test_choose_breed_rejects_empty() -> None:
    with pytest.raises(ValueError):
        choose_breed([])


def test_missing_token_makes_no_requests(log_messages) -> None:
    transport = RecordingTransport(_unreachable)

    result = perform_upload(AppSettings(), transport=transport)

    assert result is None
    assert transport.requests == []
    assert any("token not found" in m for m in log_messages)


def test_blank_token_counts_as_missing() -> None:
    transport = RecordingTransport(_unreachable)

    assert perform_upload(AppSettings(yandex_disk_token="   "), transport=transport) is None
    assert transport.requests == []


def test_token_is_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YANDEX_DISK_TOKEN", "from-env")

    assert AppSettings().token_value() == "from-env"


def test_unhandled_error_is_logged_not_raised(settings, monkeypatch: pytest.MonkeyPatch, log_messages) -> None:
    async def explode(**kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_main, "run_workflow", explode)

    assert perform_upload(settings) is None
    assert "Upload run failed" in log_messages


def test_perform_upload_runs_selected_breed(settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "dog.test":
            if request.url.path.endswith("/list"):
                return json_response(200, {"message": [], "status": "success"})
            return json_response(200, {"message": "http://x/3.jpg", "status": "success"})
        if request.method == "GET":
            return json_response(200, {"_embedded": {"items": [{"type": "file", "name": "collie.jpg"}]}})
        return json_response(201 if request.method == "PUT" else 202, {"href": "x"})

    console = Console(record=True, width=120)
    result = perform_upload(
        settings,
        chooser=lambda breeds: "collie",
        transport=RecordingTransport(handler),
        console=console,
    )

    assert result is not None
    assert result.report.uploaded == ["collie.jpg"]
    assert result.files == ["collie.jpg"]
    assert "collie.jpg" in console.export_text()


def test_cli_without_token_exits_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    called = []

    async def fake_workflow(**kwargs):
        called.append(kwargs)

    monkeypatch.setattr(cli_main, "run_workflow", fake_workflow)

    result = CliRunner().invoke(app, [])

    assert result.exit_code == 0
    assert called == []


def test_doctor_reports_missing_token() -> None:
    settings = AppSettings(dog_api_base_url="https://dog.test/api")
    transport = RecordingTransport(lambda request: json_response(200, {"message": [], "status": "success"}))

    console = Console(record=True, width=160)
    console.print(build_doctor_table(settings, transport=transport))
    text = console.export_text()

    assert "MISSING" in text
    assert "Dog CEO API" in text
    assert [r.url.host for r in transport.requests] == ["dog.test"]


def test_doctor_checks_disk_with_token(settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "dog.test":
            return json_response(200, {"message": ["x"], "status": "success"})
        return json_response(200, {"total_space": 10, "used_space": 1})

    console = Console(record=True, width=160)
    console.print(build_doctor_table(settings, transport=RecordingTransport(handler)))
    text = console.export_text()

    assert "Yandex.Disk API" in text
    assert "FAIL" not in text
    assert "secret-token" not in text


def test_traceback_does_not_expose_token(monkeypatch: pytest.MonkeyPatch, capfd: pytest.CaptureFixture[str]) -> None:
    secret = "-".join(["TOPSECRET", "123"])
    settings = AppSettings(yandex_disk_token=secret)

    async def explode(**kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_main, "run_workflow", explode)
    setup_logging(level="DEBUG")
    try:
        assert perform_upload(settings) is None
        err = capfd.readouterr().err
    finally:
        logger.remove()
        logger.add(sys.stderr)

    assert "Upload run failed" in err
    assert "RuntimeError" in err
    assert secret not in err


def test_unparseable_env_value_is_logged_not_raised(monkeypatch: pytest.MonkeyPatch, log_messages) -> None:
    monkeypatch.setenv("YANDEX_DISK_TOKEN", "t")
    monkeypatch.setenv("DOG_UPLOADER_BREEDS", "doberman,collie")
    transport = RecordingTransport(_unreachable)

    assert perform_upload(transport=transport) is None
    assert transport.requests == []
    assert any(m.startswith("Invalid configuration") for m in log_messages)


def test_cli_with_unparseable_env_exits_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YANDEX_DISK_TOKEN", "t")
    monkeypatch.setenv("DOG_UPLOADER_BREEDS", "doberman,collie")

    result = CliRunner().invoke(app, [])

    assert result.exit_code == 0
    assert result.exception is None
