import json
from pathlib import Path

import pandas as pd
import pytest

from application import decode_codes_frame, serialize_decoded, summarize_by_group
from application.constants import (
    CFI_CATEGORY_COL,
    CFI_DECODED_COL,
    CFI_GROUP_COL,
    CFI_TAG_COL,
    CFI_VALID_COL,
)


def _frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "isin": ["A", "B", "C", "D"],
            "cfi": ["ESVUFR", "zzz", None, "EPVNDB"],
        }
    )


def test_strict_decoding_rejects_invalid_rows() -> None:
    out = decode_codes_frame(_frame(), "cfi", strict=True, fmt="tag")

    assert out[CFI_TAG_COL].tolist() == ["ESVUFR", None, None, "EPVNDB"]
    assert out[CFI_TAG_COL].iloc[1] is None
    assert out[CFI_VALID_COL].dtype == bool
    assert out[CFI_VALID_COL].tolist() == [True, False, False, True]
    assert out[CFI_CATEGORY_COL].tolist() == ["Equity", "", "", "Equity"]
    assert out[CFI_GROUP_COL].tolist() == ["Shares", "", "", "Preferred Shares"]
    assert out[CFI_DECODED_COL].tolist() == ["ESVUFR", "", "", "EPVNDB"]
    # input columns are kept, input frame is untouched
    assert out["isin"].tolist() == ["A", "B", "C", "D"]
    assert CFI_TAG_COL not in _frame().columns


def test_strict_decoding_logs_rejections(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING"):
        decode_codes_frame(_frame(), "cfi", strict=True)
    assert sum("Rejected CFI code" in r.getMessage() for r in caplog.records) == 2


def test_lenient_decoding_normalizes_every_row() -> None:
    out = decode_codes_frame(_frame(), "cfi", strict=False, fmt="short")

    assert out[CFI_TAG_COL].tolist() == ["ESVUFR", "ZZZXXX", "XXXXXX", "EPVNDB"]
    assert out[CFI_VALID_COL].tolist() == [True, False, False, True]
    assert out[CFI_DECODED_COL].iloc[0] == "Equity; Shares; Voting; Free; Fully Paid; Registered"
    assert out[CFI_DECODED_COL].iloc[1] == "; ; ; ; ; "


def test_rejected_tags_stay_none_in_string_columns() -> None:
    df = pd.DataFrame({"cfi": pd.Series(["ESVUFR", "bad"], dtype="string")})
    out = decode_codes_frame(df, "cfi", strict=True, fmt="SHORT")

    assert out[CFI_TAG_COL].tolist() == ["ESVUFR", None]
    assert out[CFI_VALID_COL].tolist() == [True, False]


def test_missing_code_column_is_reported() -> None:
    with pytest.raises(KeyError, match="not_there"):
        decode_codes_frame(_frame(), "not_there")


def test_summary_counts_per_category_and_group() -> None:
    df = pd.DataFrame({"cfi": ["ESVUFR", "ESVUFR", "EPVNDB", "bad"]})
    summary = summarize_by_group(decode_codes_frame(df, "cfi", strict=True))

    assert summary["Category"].tolist() == ["Equity", "Equity"]
    assert summary["Group"].tolist() == ["Preferred Shares", "Shares"]
    assert summary["Total count"].tolist() == [1, 2]
    assert summary["Valid (count)"].tolist() == [1, 2]
    assert summary["Valid (%)"].tolist() == [100.0, 100.0]


def test_summary_keeps_unknown_codes_in_lenient_mode() -> None:
    df = pd.DataFrame({"cfi": ["ESVUFR", "qw"]})
    summary = summarize_by_group(decode_codes_frame(df, "cfi", strict=False))

    assert summary["Total count"].sum() == 2
    unknown = summary[summary["Category"] == ""]
    assert unknown["Valid (count)"].tolist() == [0]


def test_summary_of_empty_frame() -> None:
    df = pd.DataFrame({"cfi": pd.Series([], dtype=object)})
    summary = summarize_by_group(decode_codes_frame(df, "cfi"))
    assert summary.empty
    assert list(summary.columns) == ["Category", "Group", "Total count", "Valid (count)", "Valid (%)"]


def test_serialize_decoded_writes_json_records(tmp_path: Path) -> None:
    out = decode_codes_frame(_frame(), "cfi", strict=True, fmt="short")
    path = serialize_decoded(out, "cfi", tmp_path / "nested" / "decoded.json")

    records = json.loads(path.read_text(encoding="utf-8"))
    assert [r["row"] for r in records] == [0, 1, 2, 3]
    assert records[0]["raw_code"] == "ESVUFR"
    assert records[0]["cfi_valid"] is True
    assert records[0]["cfi_decoded"] == "Equity; Shares; Voting; Free; Fully Paid; Registered"
    assert records[1]["cfi_tag"] is None
    assert records[1]["cfi_valid"] is False
    assert records[2]["raw_code"] is None
