"""Decoded code serialization utilities."""

import json
import logging
import math
from pathlib import Path

import pandas as pd

from application.constants import DECODED_COLUMNS, RAW_CODE_KEY, ROW_KEY

logger = logging.getLogger(__name__)


def _json_value(value: object) -> object:
    # numpy scalars -> python scalars; NaN -> null
    if hasattr(value, "item"):
        value = value.item()
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def decoded_records(decoded_df: pd.DataFrame, code_col: str) -> list[dict[str, object]]:
    """Turn decode_codes_frame output into JSON-ready records, one per input row."""
    records: list[dict[str, object]] = []
    for pos, (_, row) in enumerate(decoded_df.iterrows()):
        record: dict[str, object] = {
            ROW_KEY: pos,
            RAW_CODE_KEY: _json_value(row[code_col]),
        }
        for col in DECODED_COLUMNS:
            record[col] = _json_value(row[col])
        records.append(record)
    return records


def serialize_decoded(decoded_df: pd.DataFrame, code_col: str, output_path: Path) -> Path:
    """
    Write decoded rows to output_path as a JSON list.
    """
    records = decoded_records(decoded_df, code_col)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=2)

    logger.info("Saved %d decoded codes to %s", len(records), output_path)
    return output_path
