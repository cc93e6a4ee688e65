"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains:
- The packaged CFI taxonomy dataset
- Configuration loading (YAML)
- Observability (logging)
- Tabular dataset reading

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import DecoderConfig, load_decoder_config, load_taxonomy_config

__all__ = [
    "load_taxonomy_config",
    "load_decoder_config",
    "DecoderConfig",
]
