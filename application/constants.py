"""Application-level constants."""

# Column names added by batch decoding
CFI_TAG_COL = "cfi_tag"
CFI_VALID_COL = "cfi_valid"
CFI_CATEGORY_COL = "cfi_category"
CFI_GROUP_COL = "cfi_group"
CFI_DECODED_COL = "cfi_decoded"

DECODED_COLUMNS = [
    CFI_TAG_COL,
    CFI_VALID_COL,
    CFI_CATEGORY_COL,
    CFI_GROUP_COL,
    CFI_DECODED_COL,
]

# Keys for serialization
ROW_KEY = "row"
RAW_CODE_KEY = "raw_code"

# Summary table columns
SUMMARY_CATEGORY_COL = "Category"
SUMMARY_GROUP_COL = "Group"
SUMMARY_TOTAL_COL = "Total count"
SUMMARY_VALID_COL = "Valid (count)"
SUMMARY_VALID_PCT_COL = "Valid (%)"
