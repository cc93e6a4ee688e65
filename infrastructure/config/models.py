"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.cfi.decoding import CodeFormat
from infrastructure.constants import TAXONOMY_FILE


class DecoderConfig(BaseModel):
    """
    Runtime configuration for decoding.
    - Loaded from decoder.yaml (optional) and overridden by CLI flags
    - Validated and enriched by configuration loader
    - Consumed by the batch decoder and the CLI
    """

    taxonomy_file: Path = Field(
        default_factory=lambda: TAXONOMY_FILE,
        description="CFI taxonomy YAML. Defaults to the packaged reference dataset.",
    )
    strict: bool = Field(
        default=True,
        description="If true, reject codes failing structural validation; otherwise normalize them.",
    )
    format: CodeFormat = Field(default=CodeFormat.SHORT, description="Rendering of decoded codes.")

    # Batch input/output
    input_file: Path | None = Field(
        default=None,
        description="Tabular file (Excel or CSV) holding codes to decode.",
    )
    code_col: str = Field(default="cfi", description="Column of input_file holding the raw codes.")
    output_file: Path | None = Field(
        default=None,
        description="JSON output path. Defaults to '<input stem>.decoded.json' next to input_file.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "DecoderConfig":
        self.code_col = str(self.code_col).strip()
        if not self.code_col:
            raise ValueError("code_col must not be empty")

        if self.output_file is not None and self.input_file is None:
            raise ValueError("output_file is set but input_file is not")

        if self.input_file is not None and self.output_file is None:
            self.output_file = self.input_file.with_name(f"{self.input_file.stem}.decoded.json")

        return self
