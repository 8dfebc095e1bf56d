# backend/gof_catalog/patterns/loader.py
"""
Load pattern entries from an external JSON file

Expected shape:

    {"patterns": [{"name": "Singleton", "category": "creational",
                   "summary": "...", "example": "...", "aliases": []}]}
"""

import json
import logging
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from gof_catalog.patterns.errors import CatalogSourceError
from gof_catalog.patterns.registry import Category, PatternEntry

logger = logging.getLogger(__name__)


class PatternRecord(BaseModel):
    name: str
    category: Category
    summary: str
    example: Optional[str] = None
    aliases: List[str] = []

    def to_entry(self) -> PatternEntry:
        return PatternEntry(
            name=self.name,
            category=self.category,
            summary=self.summary,
            example=self.example,
            aliases=tuple(self.aliases),
        )


class CatalogDocument(BaseModel):
    patterns: List[PatternRecord]


def load_entries(path: str) -> List[PatternEntry]:
    """Read and validate a catalog file; entries keep file order"""
    try:
        with open(path, encoding="utf-8") as fh:
            raw = json.load(fh)
    except OSError as e:
        raise CatalogSourceError(path, str(e)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogSourceError(path, f"invalid JSON ({e})") from e

    try:
        document = CatalogDocument.model_validate(raw)
    except ValidationError as e:
        raise CatalogSourceError(path, f"{e.error_count()} validation error(s)") from e

    logger.info("Loaded %d pattern entries from %s", len(document.patterns), path)
    return [record.to_entry() for record in document.patterns]
