"""
Strategy descriptor model.
"""

from pydantic import BaseModel, Field


class StrategyDescriptor(BaseModel):
    """Describes a registered strategy variant."""

    name: str = Field(description="Class name of the strategy")
    parameters: list[str] = Field(
        default_factory=list,
        description="Keyword parameters required to construct the strategy",
    )
    summary: str = Field(default="", description="First line of the strategy docstring")

    class Config:
        frozen = True
