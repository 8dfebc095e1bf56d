from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from gof_catalog.api.serializers import serialize_entry
from gof_catalog.patterns.errors import PatternNotFoundError
from gof_catalog.patterns.registry import Category, PatternCatalog
from gof_catalog.schemas import CategoryOut, PatternListResponse, PatternOut

router = APIRouter(
    prefix="/patterns",
    tags=["patterns"],
)


def get_catalog(request: Request) -> PatternCatalog:
    """The catalog built by create_app for this application"""
    return request.app.state.catalog


# ============================================================
# PATTERN ENDPOINTS - Catalog lookup
# ============================================================

@router.get("", response_model=PatternListResponse)
def list_patterns(
    category: Optional[Category] = None,
    catalog: PatternCatalog = Depends(get_catalog),
):
    """List all patterns, optionally narrowed to one category"""
    entries = catalog.all() if category is None else catalog.list_by_category(category)
    return PatternListResponse(
        patterns=[serialize_entry(e) for e in entries],
        count=len(entries),
    )


@router.get("/categories", response_model=List[CategoryOut])
def list_categories(catalog: PatternCatalog = Depends(get_catalog)):
    """Category overview with pattern counts"""
    counts = catalog.summary()
    return [
        CategoryOut(category=cat.value, label=cat.label, count=counts[cat.value])
        for cat in catalog.categories()
    ]


@router.get("/{name:path}", response_model=PatternOut)
def get_pattern(name: str, catalog: PatternCatalog = Depends(get_catalog)):
    """Get a single pattern by exact name"""
    try:
        entry = catalog.find_by_name(name)
    except PatternNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return serialize_entry(entry)
