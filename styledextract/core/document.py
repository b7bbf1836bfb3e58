"""
In-memory document with atomic edits, undo history and caret state.

Every mutation happens inside ``write_action``: the edits of one action are
applied together and undone together. Marks group several write actions into
one undo unit and allow rolling back to the text the mark was taken on.
"""
import logging
from contextlib import contextmanager
from typing import Iterable, List, Optional

from pydantic import BaseModel

from styledextract.core.engine.languages import file_kind_for_path
from styledextract.core.error_handling import (
    EditConflictError,
    InvalidParameterError,
    UnsupportedLanguageError,
)
from styledextract.models.enums import FileKind
from styledextract.models.range import CodePosition, TextRange

logger = logging.getLogger(__name__)


class TextEdit(BaseModel):
    """Replace ``[start, end)`` with ``text``; an empty range is an insertion."""
    start: int
    end: int
    text: str = ''

    @property
    def delta(self) -> int:
        return len(self.text) - (self.end - self.start)


class _UndoEntry(BaseModel):
    name: str
    before: str
    after: str


class DocumentMark(BaseModel):
    name: str
    text: str
    history_size: int
    caret: int


def shift_offset(offset: int, edits: Iterable[TextEdit]) -> int:
    """Map an offset of the pre-edit text onto the post-edit text.

    Insertions exactly at ``offset`` push it to the right.
    """
    shifted = offset
    for edit in edits:
        if edit.end <= offset:
            shifted += edit.delta
    return shifted


class Document:
    """Text of one JSX-capable file plus its undo and caret state."""

    def __init__(self, text: str, kind: FileKind, path: Optional[str] = None):
        self._text = text
        self.kind = FileKind(kind)
        self.path = path
        self.caret = 0
        self.selection: Optional[TextRange] = None
        self._undo: List[_UndoEntry] = []
        self._redo: List[_UndoEntry] = []
        self._action_depth = 0

    @classmethod
    def from_file(cls, path: str) -> 'Document':
        kind = file_kind_for_path(path)
        if kind is None:
            raise UnsupportedLanguageError(path, operation='open')
        with open(path, 'r', encoding='utf8') as fh:
            return cls(fh.read(), kind, path=path)

    def save(self, path: Optional[str] = None) -> str:
        target = path or self.path
        if not target:
            raise InvalidParameterError('path', target, 'a file path for an unsaved document')
        with open(target, 'w', encoding='utf8') as fh:
            fh.write(self._text)
        return target

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    # ----- positions -----

    def offset_at(self, line: int, column: int) -> int:
        """Character offset of a 1-based line and 0-based column."""
        lines = self._text.split('\n')
        if line < 1 or line > len(lines):
            raise InvalidParameterError('line', line, f'1..{len(lines)}')
        if column < 0 or column > len(lines[line - 1]):
            raise InvalidParameterError('column', column, f'0..{len(lines[line - 1])}')
        return sum(len(l) + 1 for l in lines[:line - 1]) + column

    def position_at(self, offset: int) -> CodePosition:
        self._check_offset(offset)
        before = self._text[:offset]
        line = before.count('\n') + 1
        column = offset - (before.rfind('\n') + 1)
        return CodePosition(line=line, column=column, offset=offset)

    def _check_offset(self, offset: int):
        if offset < 0 or offset > len(self._text):
            raise InvalidParameterError('offset', offset, f'0..{len(self._text)}')

    # ----- caret -----

    def move_caret(self, offset: int):
        self._check_offset(offset)
        self.caret = offset
        self.selection = None

    def select(self, start: int, end: int):
        self._check_offset(start)
        self._check_offset(end)
        self.selection = TextRange(start=min(start, end), end=max(start, end))

    @property
    def selected_text(self) -> str:
        return self.selection.slice(self._text) if self.selection else ''

    # ----- edits -----

    @contextmanager
    def write_action(self, name: str = 'edit'):
        """Scope of one atomic, undoable command.

        Nested actions join the outermost one. When the body raises, the text
        is restored and the exception propagates.
        """
        if self._action_depth:
            self._action_depth += 1
            try:
                yield self
            finally:
                self._action_depth -= 1
            return
        before = self._text
        caret = self.caret
        self._action_depth = 1
        try:
            yield self
        except Exception:
            self._text = before
            self.caret = caret
            logger.debug("Write action '%s' rolled back", name)
            raise
        finally:
            self._action_depth = 0
        if self._text != before:
            self._undo.append(_UndoEntry(name=name, before=before, after=self._text))
            self._redo.clear()
            logger.debug("Write action '%s' committed", name)

    def apply_edits(self, edits: Iterable[TextEdit]) -> str:
        """Apply non-overlapping ``edits`` (offsets of the current text) at once."""
        if not self._action_depth:
            with self.write_action('edit'):
                return self.apply_edits(edits)
        ordered = sorted(edits, key=lambda e: (e.start, e.end))
        size = len(self._text)
        previous_end = -1
        for edit in ordered:
            if edit.start < 0 or edit.end > size or edit.end < edit.start:
                raise EditConflictError(f'range [{edit.start}, {edit.end}) outside document of length {size}')
            if edit.start < previous_end:
                raise EditConflictError(f'edit at {edit.start} overlaps a previous edit ending at {previous_end}')
            previous_end = edit.end
        text = self._text
        for edit in reversed(ordered):
            text = text[:edit.start] + edit.text + text[edit.end:]
        self._text = text
        self.caret = min(self.caret, len(text))
        return text

    def replace(self, start: int, end: int, text: str) -> str:
        return self.apply_edits([TextEdit(start=start, end=end, text=text)])

    def insert(self, offset: int, text: str) -> str:
        return self.apply_edits([TextEdit(start=offset, end=offset, text=text)])

    # ----- undo -----

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    def undo(self) -> bool:
        if not self._undo:
            return False
        entry = self._undo.pop()
        self._text = entry.before
        self._redo.append(entry)
        self.caret = min(self.caret, len(self._text))
        self.selection = None
        return True

    def redo(self) -> bool:
        if not self._redo:
            return False
        entry = self._redo.pop()
        self._text = entry.after
        self._undo.append(entry)
        self.caret = min(self.caret, len(self._text))
        self.selection = None
        return True

    def start_mark(self, name: str) -> DocumentMark:
        return DocumentMark(name=name, text=self._text, history_size=len(self._undo), caret=self.caret)

    def rollback_to_mark(self, mark: DocumentMark):
        """Restore the text the mark was taken on and drop the history made since."""
        self._text = mark.text
        del self._undo[mark.history_size:]
        self._redo.clear()
        self.caret = mark.caret
        self.selection = None
        logger.debug("Rolled back to mark '%s'", mark.name)

    def commit_mark(self, mark: DocumentMark):
        """Collapse the history made since ``mark`` into one undo unit."""
        del self._undo[mark.history_size:]
        if self._text != mark.text:
            self._undo.append(_UndoEntry(name=mark.name, before=mark.text, after=self._text))
        logger.debug("Committed mark '%s'", mark.name)
