"""Tests for the pantryscan command-line entry point."""

import io
import json
import logging
from pathlib import Path

import pytest

from pantryscan.cli import receipt as receipt_cli
from pantryscan.cli.main import main
from pantryscan.runtime import OCRServiceUnavailable, set_log_level

RECEIPT_TEXT = "FRESHMART\n05/12/2024\n2x Milk 5.98\nTOTAL 5.98\n"


@pytest.fixture
def receipt_file(tmp_path: Path) -> Path:
    path = tmp_path / "receipt.txt"
    path.write_text(RECEIPT_TEXT, encoding="utf-8")
    return path


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "parse" in capsys.readouterr().out


def test_parse_prints_summary(receipt_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["parse", str(receipt_file)]) == 0

    out = capsys.readouterr().out
    assert "Store: FRESHMART" in out
    assert "1. Milk x2 piece - $5.98 [dairy]" in out


def test_parse_json(receipt_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["parse", str(receipt_file), "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["storeName"] == "FRESHMART"
    assert payload["totalAmount"] == 5.98
    assert payload["items"] == [{"name": "Milk", "quantity": 2, "unit": "piece", "price": 5.98, "category": "dairy"}]
    assert payload["rawText"] == RECEIPT_TEXT


def test_parse_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("SHOP\nMilk 2.99\n"))

    assert main(["parse", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["items"][0]["name"] == "Milk"


def test_parse_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["parse", str(tmp_path / "missing.txt")]) == 1
    assert "not found" in capsys.readouterr().out


def test_parse_with_config_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    text = tmp_path / "receipt.txt"
    text.write_text("*** WELCOME ***\nFRESHMART EXPRESS\nPaper Towels 3.49\n", encoding="utf-8")
    stores = tmp_path / "stores.toml"
    stores.write_text('[[stores]]\nnames = ["FreshMart"]\n', encoding="utf-8")
    categories = tmp_path / "categories.toml"
    categories.write_text('[[categories]]\nname = "household"\nkeywords = ["towel"]\n', encoding="utf-8")

    code = main(["parse", str(text), "--json", "--stores", str(stores), "--categories", str(categories)])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["storeName"] == "FreshMart"
    assert payload["items"][0]["category"] == "household"


def test_scan_runs_ocr_then_parses(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    image = tmp_path / "receipt.jpg"
    image.write_bytes(b"jpeg")
    seen: list[tuple[Path, str]] = []

    def fake_fetch(image_path: Path, ocr_url: str) -> str:
        seen.append((image_path, ocr_url))
        return RECEIPT_TEXT

    monkeypatch.setattr(receipt_cli, "fetch_receipt_text", fake_fetch)

    assert main(["scan", str(image), "--ocr-url", "http://ocr.local", "--json"]) == 0
    assert seen == [(image, "http://ocr.local")]
    assert json.loads(capsys.readouterr().out)["items"][0]["name"] == "Milk"


def test_scan_reports_unavailable_ocr(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    image = tmp_path / "receipt.jpg"
    image.write_bytes(b"jpeg")

    def failing_fetch(image_path: Path, ocr_url: str) -> str:
        raise OCRServiceUnavailable("OCR service error: 503")

    monkeypatch.setattr(receipt_cli, "fetch_receipt_text", failing_fetch)

    assert main(["scan", str(image)]) == 1
    assert "OCR service unavailable" in capsys.readouterr().out


def test_scan_missing_image(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["scan", str(tmp_path / "missing.jpg")]) == 1
    assert "not found" in capsys.readouterr().out


def test_verbose_enables_debug_logging(receipt_file: Path) -> None:
    root_logger = logging.getLogger("pantryscan")
    previous = root_logger.level
    try:
        assert main(["-v", "parse", str(receipt_file)]) == 0
        assert root_logger.level == logging.DEBUG
    finally:
        set_log_level(previous)
