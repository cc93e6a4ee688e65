"""Per-category/group breakdown of decoded codes."""

import pandas as pd

from application.constants import (
    CFI_CATEGORY_COL,
    CFI_GROUP_COL,
    CFI_TAG_COL,
    CFI_VALID_COL,
    SUMMARY_CATEGORY_COL,
    SUMMARY_GROUP_COL,
    SUMMARY_TOTAL_COL,
    SUMMARY_VALID_COL,
    SUMMARY_VALID_PCT_COL,
)

SUMMARY_COLUMNS = [
    SUMMARY_CATEGORY_COL,
    SUMMARY_GROUP_COL,
    SUMMARY_TOTAL_COL,
    SUMMARY_VALID_COL,
    SUMMARY_VALID_PCT_COL,
]


def summarize_by_group(decoded_df: pd.DataFrame) -> pd.DataFrame:
    """
    Count decoded codes per (category, group).

    Rows rejected by strict decoding (no cfi_tag) are left out. Codes with an
    unknown category or group are counted under empty names.

    Columns in the result:
      - Category / Group: decoded names
      - Total count: number of codes in this (Category, Group)
      - Valid (count): codes passing structural validation
      - Valid (%): valid / total * 100

    Args:
        decoded_df: Output of decode_codes_frame

    Returns:
        DataFrame sorted by category and group
    """
    for col in [CFI_TAG_COL, CFI_VALID_COL, CFI_CATEGORY_COL, CFI_GROUP_COL]:
        if col not in decoded_df.columns:
            raise KeyError(f"Required column '{col}' not found in DataFrame.")

    sub_df = decoded_df.dropna(subset=[CFI_TAG_COL])

    rows: list[dict[str, object]] = []
    for (category, group), block in sub_df.groupby([CFI_CATEGORY_COL, CFI_GROUP_COL], dropna=False, sort=True):
        total = len(block)
        valid = int(block[CFI_VALID_COL].astype(bool).sum())
        rows.append(
            {
                SUMMARY_CATEGORY_COL: category,
                SUMMARY_GROUP_COL: group,
                SUMMARY_TOTAL_COL: total,
                SUMMARY_VALID_COL: valid,
                SUMMARY_VALID_PCT_COL: round(valid / total * 100.0, 2) if total > 0 else float("nan"),
            }
        )

    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
