# backend/gof_catalog/patterns/errors.py
"""
Catalog errors
"""


class CatalogError(Exception):
    """Base class for pattern catalog errors"""


class PatternNotFoundError(CatalogError, LookupError):
    """No pattern with the requested name exists in any category"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Pattern '{name}' not found")


class DuplicatePatternError(CatalogError):
    """Two entries share a name"""

    def __init__(self, name: str, existing_category: str, category: str):
        self.name = name
        self.existing_category = existing_category
        self.category = category
        super().__init__(
            f"Pattern '{name}' registered twice "
            f"({existing_category} and {category})"
        )


class InvalidPatternError(CatalogError):
    """An entry is missing its name or has no valid category"""


class CatalogSourceError(CatalogError):
    """The external catalog file could not be read or parsed"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load pattern catalog from '{path}': {reason}")
