import json
import logging
from pathlib import Path

import pytest

from main import main


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # main() reconfigures the root logger; keep other tests' handlers intact
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_decodes_codes_given_as_arguments(capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["EMXXXM", "EPVNDB", "--format", "short", "--console-level", "ERROR"])

    assert status == 0
    assert capsys.readouterr().out.splitlines() == [
        "Equity; Misc.; N/A; N/A; N/A; Misc.",
        "Equity; Preferred Shares; Voting; Perpetual; Dividends; Bearer",
    ]


def test_strict_rejection_sets_exit_status(capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["ZXXXXX", "EMXXXM", "--format", "tag", "--console-level", "CRITICAL"])

    assert status == 1
    assert capsys.readouterr().out.splitlines() == ["EMXXXM"]


def test_format_option_is_case_insensitive(capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["EMXXXM", "--format", "TAG", "--console-level", "ERROR"])

    assert status == 0
    assert capsys.readouterr().out.strip() == "EMXXXM"


def test_lenient_flag_normalizes(capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["--lenient", "--format", "tag", "--console-level", "ERROR", " qw12 "])

    assert status == 0
    assert capsys.readouterr().out.strip() == "QWXXXX"


def test_decodes_table_to_json(tmp_path: Path) -> None:
    table = tmp_path / "instruments.csv"
    table.write_text("isin,cfi\nUS0000000001,ESVUFR\nUS0000000002,NA1234\n", encoding="utf-8")
    log_file = tmp_path / "logs" / "decode.log"

    status = main(["--input", str(table), "--summary", "--log-file", str(log_file), "--console-level", "ERROR"])

    assert status == 0
    records = json.loads((tmp_path / "instruments.decoded.json").read_text(encoding="utf-8"))
    assert [r["cfi_tag"] for r in records] == ["ESVUFR", None]
    assert records[1]["raw_code"] == "NA1234"
    assert "Category/group breakdown" in log_file.read_text(encoding="utf-8")


def test_config_file_with_overrides(tmp_path: Path) -> None:
    table = tmp_path / "codes.csv"
    table.write_text("code\nesvufr\n", encoding="utf-8")
    config = tmp_path / "decoder.yaml"
    config.write_text(f"strict: true\ncode_col: code\ninput_file: {table}\nformat: long\n", encoding="utf-8")
    output = tmp_path / "out" / "decoded.json"

    status = main(["--config", str(config), "--lenient", "--output", str(output), "--console-level", "ERROR"])

    assert status == 0
    records = json.loads(output.read_text(encoding="utf-8"))
    assert records[0]["cfi_tag"] == "ESVUFR"
    assert records[0]["cfi_decoded"].splitlines()[0] == "Equity"


def test_nothing_to_decode_is_an_error() -> None:
    with pytest.raises(ValueError, match="Nothing to decode"):
        main(["--console-level", "ERROR"])


def test_missing_or_directory_input_is_reported(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="input table"):
        main(["--input", str(tmp_path / "absent.csv"), "--console-level", "ERROR"])
    with pytest.raises(IsADirectoryError):
        main(["--input", str(tmp_path), "--console-level", "ERROR"])
