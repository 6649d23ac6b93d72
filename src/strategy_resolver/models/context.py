"""
Context data model.

The value a strategy's applicability predicate is tested against.
"""

from pydantic import BaseModel, Field


class Context(BaseModel):
    """Discriminator pair used to select a strategy."""

    condition_alpha: str = Field(description="Primary category, e.g. the material domain")
    condition_beta: str = Field(description="Subcategory within the primary category")

    class Config:
        frozen = True

    def __str__(self) -> str:
        return f"condition_alpha={self.condition_alpha!r}, condition_beta={self.condition_beta!r}"
