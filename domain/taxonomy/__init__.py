"""
Taxonomy management: CFI category/group/attribute tables.

This module handles the ISO 10962 reference taxonomy.
All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.loader import parse_taxonomy_config
from domain.taxonomy.models import OWN_LABEL_KEY, AttributeTable, Category, Group, Taxonomy

__all__ = [
    "Taxonomy",
    "Category",
    "Group",
    "AttributeTable",
    "OWN_LABEL_KEY",
    "parse_taxonomy_config",
]
