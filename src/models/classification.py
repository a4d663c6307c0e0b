"""Classification request/response models."""

from typing import List

from pydantic import BaseModel, Field

from models.ticket import Category, Priority


class ClassificationInput(BaseModel):
    """Text the keyword classifier looks at."""

    subject: str
    description: str


class ClassificationResult(BaseModel):
    """Outcome of weighted keyword scoring."""

    category: Category
    priority: Priority
    confidence: float = Field(ge=0, le=1)
    reasoning: str
    keywords_found: List[str] = Field(default_factory=list)
