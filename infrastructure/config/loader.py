"""Configuration loading from YAML files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from domain.cfi.decoding import CodeFormat
from domain.taxonomy.loader import parse_taxonomy_config
from domain.taxonomy.models import Taxonomy
from infrastructure.config.models import DecoderConfig
from infrastructure.constants import TAXONOMY_FILE

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_taxonomy_config(path: Path = TAXONOMY_FILE) -> Taxonomy:
    """
    Load the CFI taxonomy from a YAML file.

    This function handles file I/O, then delegates parsing to domain layer.
    """
    data = _load_yaml(path)
    taxonomy = parse_taxonomy_config(data)
    logger.debug(
        "Loaded CFI taxonomy %s from %s (%d categories)",
        taxonomy.version or "<unversioned>",
        path,
        len(taxonomy.categories),
    )
    return taxonomy


def load_decoder_config(config_path: Path) -> DecoderConfig:
    """
    Load decoder.yaml and construct a DecoderConfig.

    Relative `input_file`/`output_file` paths are kept as written (resolved
    against the working directory), matching how the CLI treats its flags.

    Raises:
        FileNotFoundError: If the config file does not exist
        ValueError: If a key has an invalid value
    """
    raw = _load_yaml(config_path)

    unknown = set(raw) - set(DecoderConfig.model_fields)
    if unknown:
        raise ValueError(f"{config_path}: unknown keys {sorted(unknown)}")

    fmt_raw = raw.get("format", CodeFormat.SHORT.value)
    try:
        fmt = CodeFormat(str(fmt_raw))
    except ValueError as e:
        raise ValueError(
            f"Invalid format {fmt_raw!r} in {config_path}. Choose one of: {[f.value for f in CodeFormat]}"
        ) from e

    taxonomy_file = raw.get("taxonomy_file")
    input_file = raw.get("input_file")
    output_file = raw.get("output_file")

    return DecoderConfig(
        taxonomy_file=Path(taxonomy_file) if taxonomy_file else TAXONOMY_FILE,
        strict=bool(raw.get("strict", True)),
        format=fmt,
        input_file=Path(input_file) if input_file else None,
        code_col=str(raw.get("code_col") or "cfi"),
        output_file=Path(output_file) if output_file else None,
    )
