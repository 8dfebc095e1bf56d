from gof_catalog.patterns.registry import PatternEntry
from gof_catalog.schemas import PatternOut


def serialize_entry(entry: PatternEntry) -> PatternOut:
    return PatternOut(
        name=entry.name,
        category=entry.category.value,
        summary=entry.summary,
        example=entry.example,
        aliases=list(entry.aliases),
    )
