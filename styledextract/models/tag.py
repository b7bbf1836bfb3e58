"""
Models describing a markup tag occurrence and a styling-library import.
"""
from typing import Any, List

from pydantic import BaseModel, Field

from .enums import TagKind
from .range import TextRange


class TagReference(BaseModel):
    """Read-only view of a tag in a parsed document.

    ``name_ranges`` holds the character ranges of every name token that belongs
    to the tag's own opening/closing markers, in document order.
    """
    name: str
    kind: TagKind
    range: TextRange
    name_ranges: List[TextRange] = Field(default_factory=list)
    self_closing: bool = False
    node: Any = Field(default=None, exclude=True, repr=False)
    model_config = {'arbitrary_types_allowed': True}

    @property
    def is_fragment(self) -> bool:
        return self.kind == TagKind.FRAGMENT


class StyledImportBinding(BaseModel):
    """An existing import of the styling package and the identifier it binds."""
    source: str
    local_name: str
    range: TextRange
