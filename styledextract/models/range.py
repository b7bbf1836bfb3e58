from typing import Optional

from pydantic import BaseModel, model_validator


class TextRange(BaseModel):
    """Half-open range of character offsets in a document"""
    start: int
    end: int

    @model_validator(mode='after')
    def check_order(self) -> 'TextRange':
        if self.start < 0 or self.end < self.start:
            raise ValueError(f'Invalid range [{self.start}, {self.end})')
        return self

    @property
    def length(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        return text[self.start:self.end]


class CodePosition(BaseModel):
    """Line/column position (1-based line, 0-based column)"""
    line: int
    column: int
    offset: Optional[int] = None
