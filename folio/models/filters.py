"""
Filter request model for Folio.
"""

from typing import Literal, Set, Union

from pydantic import BaseModel, Field

from .content import ContentKind


ALL_KINDS = "all"


class FilterRequest(BaseModel):
    """
    A transient query over a flattened content collection.
    """

    query: str = Field(
        default="",
        description="Free-text search, may contain type:<kind> and is:<badge> tokens"
    )

    type_filter: Union[ContentKind, Literal["all"]] = Field(
        default=ALL_KINDS,
        description="A single content kind, or 'all'"
    )

    tags: Set[str] = Field(
        default_factory=set,
        description="Tags of which at least one must be present on the item"
    )
