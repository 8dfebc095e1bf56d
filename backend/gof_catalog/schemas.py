from pydantic import BaseModel
from typing import List, Optional


class PatternOut(BaseModel):
    name: str
    category: str
    summary: str
    example: Optional[str] = None
    aliases: List[str] = []


class PatternListResponse(BaseModel):
    patterns: List[PatternOut]
    count: int


class CategoryOut(BaseModel):
    """One row of the category overview"""
    category: str
    label: str
    count: int
