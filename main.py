"""
CLI entrypoint for CFI code decoding.

This script performs the following steps:
- loads configs/decoder.yaml (optional) and applies CLI overrides
- loads the CFI taxonomy (packaged reference dataset unless overridden)
- decodes the codes given as arguments and prints them, OR
- decodes a column of a CSV/Excel file and saves the rows as JSON
- logs a category/group breakdown of a decoded file (optional)

Exit status is 1 when a code given as an argument fails strict validation.
"""

import argparse
import logging
from pathlib import Path

from application import (
    decode_codes_frame,
    default_taxonomy,
    detect_code_column,
    format_code,
    from_normalized,
    from_validated,
    serialize_decoded,
    summarize_by_group,
)
from domain.cfi import CodeFormat, InvalidCodeError
from domain.taxonomy import Taxonomy
from infrastructure.config import DecoderConfig, load_decoder_config, load_taxonomy_config
from infrastructure.constants import TAXONOMY_FILE
from infrastructure.io import ensure_exists, read_table
from infrastructure.observability import clear_row_context, configure_logging, set_log_context

logger = logging.getLogger(__name__)

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Decode ISO 10962 CFI codes")
    p.add_argument("codes", nargs="*", help="CFI codes to decode (omit to decode --input instead)")
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to decoder.yaml (flags below override its values)",
    )
    p.add_argument("--input", type=str, default=None, help="CSV/Excel file with a column of codes")
    p.add_argument("--column", type=str, default=None, help="Column holding the codes (default: cfi)")
    p.add_argument(
        "--output",
        type=str,
        default=None,
        help="JSON output path (default: <input stem>.decoded.json)",
    )
    p.add_argument(
        "--format",
        type=str.lower,
        default=None,
        choices=[f.value for f in CodeFormat],
        help="Rendering of decoded codes (default: short)",
    )
    p.add_argument(
        "--lenient",
        action="store_true",
        help="Normalize and pad codes instead of rejecting invalid ones.",
    )
    p.add_argument("--taxonomy", type=str, default=None, help="Alternative taxonomy YAML")
    p.add_argument("--summary", action="store_true", help="Log a category/group breakdown of --input")
    p.add_argument("--log-file", type=str, default=None, help="Also log to this (rotating) file")
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=_LEVELS,
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=_LEVELS,
        help="File log level",
    )
    return p.parse_args(argv)


def _build_config(args: argparse.Namespace) -> DecoderConfig:
    if args.config:
        config_path = Path(args.config)
        ensure_exists(config_path, "decoder.yaml")
        cfg = load_decoder_config(config_path)
    else:
        cfg = DecoderConfig()

    overrides: dict[str, object] = {}
    if args.input:
        overrides["input_file"] = Path(args.input)
        overrides["output_file"] = None  # re-derived from the new input unless --output is given
    if args.output:
        overrides["output_file"] = Path(args.output)
    if args.column:
        overrides["code_col"] = args.column
    if args.format:
        overrides["format"] = CodeFormat(args.format)
    if args.lenient:
        overrides["strict"] = False
    if args.taxonomy:
        overrides["taxonomy_file"] = Path(args.taxonomy)

    if not overrides:
        return cfg
    return DecoderConfig(**{**cfg.model_dump(), **overrides})


def _load_taxonomy(cfg: DecoderConfig) -> Taxonomy:
    if cfg.taxonomy_file.resolve() == TAXONOMY_FILE.resolve():
        return default_taxonomy()
    ensure_exists(cfg.taxonomy_file, "taxonomy file")
    return load_taxonomy_config(cfg.taxonomy_file)


def _decode_arguments(codes: list[str], cfg: DecoderConfig, taxonomy: Taxonomy) -> int:
    set_log_context(source="argv")
    failures = 0
    for pos, raw in enumerate(codes):
        set_log_context(row=pos)
        if cfg.strict:
            try:
                code = from_validated(raw, taxonomy)
            except InvalidCodeError as e:
                logger.error("%s", e)
                failures += 1
                continue
        else:
            code = from_normalized(raw)
        print(format_code(code, cfg.format, taxonomy))
    clear_row_context()

    if failures:
        logger.error("%d of %d codes rejected", failures, len(codes))
        return 1
    return 0


def _decode_table(cfg: DecoderConfig, taxonomy: Taxonomy, *, show_summary: bool) -> int:
    input_file = cfg.input_file
    output_file = cfg.output_file
    if input_file is None or output_file is None:
        raise ValueError("Nothing to decode: pass codes as arguments or set an input file")

    ensure_exists(input_file, "input table")
    set_log_context(source=str(input_file))

    logger.info("Loading codes from %s...", input_file)
    df = read_table(input_file, text_cols=[cfg.code_col])
    logger.info("Input loaded: %d rows, %d columns", df.shape[0], df.shape[1])

    code_col = detect_code_column(cfg, df)
    decoded = decode_codes_frame(df, code_col, strict=cfg.strict, fmt=cfg.format, taxonomy=taxonomy)
    serialize_decoded(decoded, code_col, output_file)

    if show_summary:
        summary = summarize_by_group(decoded)
        logger.info("Category/group breakdown:\n%s", summary.to_string(index=False))

    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    configure_logging(
        log_file=Path(args.log_file) if args.log_file else None,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )

    cfg = _build_config(args)
    taxonomy = _load_taxonomy(cfg)

    if args.codes:
        return _decode_arguments(args.codes, cfg, taxonomy)
    return _decode_table(cfg, taxonomy, show_summary=args.summary)


if __name__ == "__main__":
    raise SystemExit(main())
