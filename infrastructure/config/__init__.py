"""
Configuration management: models, loading, and validation.

Handles:
- DecoderConfig: CLI/batch decoding configuration
- Taxonomy loading from YAML

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_decoder_config, load_taxonomy_config
from infrastructure.config.models import DecoderConfig

__all__ = [
    # Main config (most commonly used)
    "DecoderConfig",
    "load_decoder_config",
    # Loaders
    "load_taxonomy_config",
]
