from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest


def _load_demo_module():
    path = Path(__file__).resolve().parents[2] / "scripts" / "demo.py"
    spec = importlib.util.spec_from_file_location("fixdec_demo_module", path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["format", "425143693331510191", "15"], "425.143693331510191"),
        (["format", "425143693331510191", "15", "--display", "10"], "425.1436933315"),
        (["format", "33000000000000000", "15", "--trim"], "33.0"),
        (["parse", "425.1436933315101915", "15", "--round"], "425143693331510192"),
        (["parse", "4.25143693331510191e2", "15"], "425143693331510191"),
        (["locale-format", "ar", "0xab54a98ceb1f0ad3", "10"], "١٬٢٣٤٬٥٦٧٬٨٩٠٫١٢٣٤٥٦٧٨٩١"),
        (["locale-format", "hi", "12345678901234567891", "10", "--no-group"], "1234567890.1234567891"),
        (["locale-parse", "de", "1.234,5", "2"], "123450"),
        (["convert", "12500", "5", "2", "--round"], "13"),
    ],
)
def test_demo_commands(capsys, argv, expected):
    module = _load_demo_module()
    assert module.main(argv) == 0
    assert capsys.readouterr().out.strip() == expected


def test_demo_lists_locales(capsys):
    module = _load_demo_module()
    assert module.main(["locales"]) == 0
    tags = capsys.readouterr().out.split()
    assert "en" in tags and "fil" in tags and len(tags) == 74


@pytest.mark.parametrize(
    "argv,error_name",
    [
        (["parse", "1e", "2"], "NumeralSyntaxError"),
        (["parse", "18446744073709551616", "0"], "MagnitudeRangeError"),
        (["format", "1", "20"], "AmountDomainError"),
    ],
)
def test_demo_reports_errors(capsys, argv, error_name):
    module = _load_demo_module()
    assert module.main(argv) == 1
    assert error_name in capsys.readouterr().err
