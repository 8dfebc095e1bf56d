# backend/gof_catalog/patterns/registry.py
"""
Pattern Registry - Read-only store for the GoF pattern catalog
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Tuple

from gof_catalog.patterns.errors import (
    DuplicatePatternError,
    InvalidPatternError,
    PatternNotFoundError,
)

logger = logging.getLogger(__name__)


class Category(Enum):
    """The three Gang-of-Four groupings, in catalog order"""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class PatternEntry:
    """One named, categorized design pattern"""
    name: str
    category: Category
    summary: str

    # Worked example used by the write-up (pizza factory, house builder, ...)
    example: Optional[str] = None

    # "Also known as" names; informational only
    aliases: Tuple[str, ...] = field(default_factory=tuple)


class PatternCatalog:
    """
    Immutable registry of pattern entries

    Built once from a fixed enumeration. Entries keep the order they were
    given in within each category; categories always come out in
    Category declaration order.
    """

    def __init__(self, entries: Iterable[PatternEntry]):
        by_name: Dict[str, PatternEntry] = {}
        by_category: Dict[Category, list] = {cat: [] for cat in Category}

        for entry in entries:
            if not isinstance(entry.category, Category):
                raise InvalidPatternError(
                    f"Pattern '{entry.name}' has invalid category {entry.category!r}"
                )
            if not isinstance(entry.name, str) or not entry.name.strip():
                raise InvalidPatternError("Pattern name must be a non-empty string")

            existing = by_name.get(entry.name)
            if existing is not None:
                raise DuplicatePatternError(
                    entry.name, existing.category.label, entry.category.label
                )

            by_name[entry.name] = entry
            by_category[entry.category].append(entry)
            logger.debug("Registered pattern: %s (%s)", entry.name, entry.category.value)

        self._by_name = by_name
        self._by_category: Dict[Category, Tuple[PatternEntry, ...]] = {
            cat: tuple(items) for cat, items in by_category.items()
        }
        self._all: Tuple[PatternEntry, ...] = tuple(
            entry for cat in Category for entry in self._by_category[cat]
        )
        logger.info("Pattern catalog built with %d patterns", len(self._all))

    def list_by_category(self, category: Category) -> Tuple[PatternEntry, ...]:
        """Get all patterns in a category"""
        return self._by_category[category]

    def find_by_name(self, name: str) -> PatternEntry:
        """Get a pattern by its exact (case-sensitive) name"""
        entry = self._by_name.get(name)
        if entry is None:
            logger.debug("find_by_name('%s') -> not found", name)
            raise PatternNotFoundError(name)
        return entry

    def all(self) -> Tuple[PatternEntry, ...]:
        """List all patterns, Creational first, then Structural, then Behavioral"""
        return self._all

    def categories(self) -> Tuple[Category, ...]:
        return tuple(Category)

    def summary(self) -> Dict[str, int]:
        """Pattern count per category value"""
        return {cat.value: len(self._by_category[cat]) for cat in Category}

    def __len__(self) -> int:
        return len(self._all)

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(self._all)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"PatternCatalog({len(self._all)} patterns)"


def build_catalog(entries: Optional[Iterable[PatternEntry]] = None) -> PatternCatalog:
    """
    Build the catalog once for the process

    Without explicit entries the compiled-in enumeration is used.
    """
    if entries is None:
        from gof_catalog.patterns.catalog import PATTERN_CATALOG
        entries = PATTERN_CATALOG
    return PatternCatalog(entries)
