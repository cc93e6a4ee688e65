from pathlib import Path

import pytest
from pydantic import ValidationError

from domain.cfi import CodeFormat
from infrastructure.config import DecoderConfig, load_decoder_config, load_taxonomy_config
from infrastructure.constants import TAXONOMY_FILE


def test_defaults() -> None:
    cfg = DecoderConfig()
    assert cfg.strict is True
    assert cfg.format is CodeFormat.SHORT
    assert cfg.code_col == "cfi"
    assert cfg.taxonomy_file == TAXONOMY_FILE
    assert cfg.output_file is None


def test_output_file_is_derived_from_input() -> None:
    cfg = DecoderConfig(input_file=Path("data/instruments.csv"))
    assert cfg.output_file == Path("data/instruments.decoded.json")


def test_output_without_input_is_rejected() -> None:
    with pytest.raises(ValidationError):
        DecoderConfig(output_file=Path("out.json"))


def test_blank_code_col_is_rejected() -> None:
    with pytest.raises(ValidationError):
        DecoderConfig(code_col="  ")


def test_load_decoder_config(tmp_path: Path) -> None:
    path = tmp_path / "decoder.yaml"
    path.write_text(
        "strict: false\nformat: LONG\ninput_file: in.xlsx\ncode_col: CFI Code\n",
        encoding="utf-8",
    )
    cfg = load_decoder_config(path)

    assert cfg.strict is False
    assert cfg.format is CodeFormat.LONG
    assert cfg.input_file == Path("in.xlsx")
    assert cfg.output_file == Path("in.decoded.json")
    assert cfg.code_col == "CFI Code"


def test_load_decoder_config_rejects_bad_values(tmp_path: Path) -> None:
    bad_format = tmp_path / "bad_format.yaml"
    bad_format.write_text("format: verbose\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid format"):
        load_decoder_config(bad_format)

    unknown_key = tmp_path / "unknown.yaml"
    unknown_key.write_text("stict: true\n", encoding="utf-8")
    with pytest.raises(ValueError, match="unknown keys"):
        load_decoder_config(unknown_key)

    not_a_mapping = tmp_path / "list.yaml"
    not_a_mapping.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Expected YAML dict"):
        load_decoder_config(not_a_mapping)


def test_missing_files_raise(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_decoder_config(tmp_path / "nope.yaml")
    with pytest.raises(FileNotFoundError):
        load_taxonomy_config(tmp_path / "nope.yaml")


def test_alternative_taxonomy_file(tmp_path: Path) -> None:
    path = tmp_path / "taxonomy.yaml"
    path.write_text(
        'version: "x"\ncategories:\n  "E":\n    name: "Equity"\n    groups:\n      "S": {name: "Shares"}\n',
        encoding="utf-8",
    )
    taxonomy = load_taxonomy_config(path)
    assert taxonomy.version == "x"
    assert taxonomy.group_name("E", "S") == "Shares"
