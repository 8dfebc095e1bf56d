# backend/gof_catalog/patterns/__init__.py
"""
Design Pattern Catalog

Read-only registry of the Gang-of-Four patterns:
- Grouped into Creational, Structural and Behavioral categories
- Looked up by category or by exact name
- Built once at startup from the compiled-in catalog or a JSON file
"""

from gof_catalog.patterns.errors import (
    CatalogError,
    CatalogSourceError,
    DuplicatePatternError,
    InvalidPatternError,
    PatternNotFoundError,
)
from gof_catalog.patterns.registry import (
    Category,
    PatternCatalog,
    PatternEntry,
    build_catalog,
)
from gof_catalog.patterns.catalog import PATTERN_CATALOG
from gof_catalog.patterns.loader import load_entries

__all__ = [
    "Category",
    "PatternCatalog",
    "PatternEntry",
    "build_catalog",
    "load_entries",
    "PATTERN_CATALOG",
    "CatalogError",
    "CatalogSourceError",
    "DuplicatePatternError",
    "InvalidPatternError",
    "PatternNotFoundError",
]
