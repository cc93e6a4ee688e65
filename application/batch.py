"""Batch decoding of CFI codes held in a DataFrame column."""

import logging

import pandas as pd

from application.codes import default_taxonomy
from application.constants import (
    CFI_CATEGORY_COL,
    CFI_DECODED_COL,
    CFI_GROUP_COL,
    CFI_TAG_COL,
    CFI_VALID_COL,
    DECODED_COLUMNS,
)
from domain.cfi import (
    CfiCode,
    CodeFormat,
    InvalidCodeError,
    category_name,
    group_name,
    is_structurally_valid,
    render_code,
)
from domain.taxonomy import Taxonomy
from infrastructure.config import DecoderConfig
from infrastructure.observability import clear_row_context, set_log_context

logger = logging.getLogger(__name__)


def detect_code_column(cfg: DecoderConfig, df: pd.DataFrame) -> str:
    """
    Resolve the configured code column in the input data.

    Raises:
        KeyError: If configured code column not found in DataFrame
    """
    if cfg.code_col not in df.columns:
        raise KeyError(f"Configured code_col='{cfg.code_col}' not found in input columns: {list(df.columns)}")
    return cfg.code_col


def _decoded_row(code: CfiCode, valid: bool, fmt: CodeFormat, taxonomy: Taxonomy) -> dict[str, object]:
    return {
        CFI_TAG_COL: code.tag,
        CFI_VALID_COL: valid,
        CFI_CATEGORY_COL: category_name(code, taxonomy),
        CFI_GROUP_COL: group_name(code, taxonomy),
        CFI_DECODED_COL: render_code(code, fmt, taxonomy),
    }


def _rejected_row() -> dict[str, object]:
    return {
        CFI_TAG_COL: None,
        CFI_VALID_COL: False,
        CFI_CATEGORY_COL: "",
        CFI_GROUP_COL: "",
        CFI_DECODED_COL: "",
    }


def decode_codes_frame(
    df: pd.DataFrame,
    code_col: str,
    *,
    strict: bool = True,
    fmt: CodeFormat | str = CodeFormat.SHORT,
    taxonomy: Taxonomy | None = None,
) -> pd.DataFrame:
    """
    Decode every code in `df[code_col]` and attach the decoded columns.

    Strict mode rejects codes failing structural validation: the row keeps
    cfi_tag=None, cfi_valid=False and empty labels, and a warning is logged.
    Lenient mode normalizes every value; cfi_valid then reports whether the
    normalized code passes structural validation.

    Args:
        df: Input DataFrame
        code_col: Column holding raw codes
        strict: Strict (validate-or-reject) or lenient (normalize) construction
        fmt: Rendering used for the cfi_decoded column
        taxonomy: Taxonomy to decode against (default: packaged reference dataset)

    Returns:
        Copy of `df` with cfi_tag, cfi_valid, cfi_category, cfi_group, cfi_decoded columns

    Raises:
        KeyError: If `code_col` is not a column of `df`
    """
    if code_col not in df.columns:
        raise KeyError(f"Column '{code_col}' not found in DataFrame: {list(df.columns)}")

    taxonomy = taxonomy if taxonomy is not None else default_taxonomy()
    fmt = CodeFormat(fmt)

    rows: list[dict[str, object]] = []
    rejected = 0
    for pos, raw in enumerate(df[code_col].tolist()):
        set_log_context(row=pos)
        text = "" if pd.isna(raw) else str(raw)

        if strict:
            try:
                code = CfiCode.from_validated(text, taxonomy)
            except InvalidCodeError as e:
                logger.warning("Rejected CFI code %r", e.code)
                rejected += 1
                rows.append(_rejected_row())
                continue
            rows.append(_decoded_row(code, True, fmt, taxonomy))
        else:
            code = CfiCode.from_normalized(text)
            rows.append(_decoded_row(code, is_structurally_valid(code.tag, taxonomy), fmt, taxonomy))
    clear_row_context()

    # object dtype keeps None for rejected tags (string inference would turn it into NaN)
    decoded = pd.DataFrame(rows, index=df.index, columns=DECODED_COLUMNS, dtype=object)
    decoded[CFI_VALID_COL] = decoded[CFI_VALID_COL].astype(bool)
    out = df.copy()
    for col in DECODED_COLUMNS:
        out[col] = decoded[col]

    logger.info(
        "Decoded %d codes from column '%s' (strict=%s, rejected=%d)",
        len(out),
        code_col,
        strict,
        rejected,
    )
    return out
