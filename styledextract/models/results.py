"""
Models produced while extracting a styled component.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from .enums import SessionStatus, TagKind
from .range import TextRange


class SynthesizedDeclaration(BaseModel):
    """Text fragments of the new component, before they are parsed."""
    name: str
    kind: TagKind
    tag_name: str
    call_head: str
    import_text: Optional[str] = None
    declaration_text: str
    tag_text: str

    @property
    def text(self) -> str:
        """Full scratch program: import (if any), declaration, renamed tag."""
        parts = []
        if self.import_text:
            parts.append(self.import_text)
        parts.append(self.declaration_text)
        parts.append(self.tag_text)
        return '\n'.join(parts)


class GraftResult(BaseModel):
    """Where the grafted pieces ended up in the real document."""
    tag_name_ranges: List[TextRange] = Field(default_factory=list)
    declaration_name_range: TextRange
    declaration_range: TextRange
    import_inserted: bool = False

    @property
    def linked_ranges(self) -> List[TextRange]:
        return sorted([*self.tag_name_ranges, self.declaration_name_range], key=lambda r: r.start)


class NamingSessionState(BaseModel):
    """Snapshot of an inline naming session."""
    status: SessionStatus = SessionStatus.IDLE
    tag_name: str = ''
    default_name: str = ''
    value: str = ''
    regions: List[TextRange] = Field(default_factory=list)


class ExtractionResult(BaseModel):
    """Outcome of a completed extraction."""
    name: str
    tag_name: str
    kind: TagKind
    code: str
    import_inserted: bool
    caret: Optional[int] = None
    selection: Optional[TextRange] = None
