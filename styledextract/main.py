import logging
import os
from typing import List, Optional

from .classifier import find_all_tags
from .core.document import Document
from .core.engine.ast_handler import ASTHandler
from .core.engine.languages import file_kind_for_path, supported_kinds
from .core.error_handling import UnsupportedLanguageError
from .intention import StyledComponentsExtractor
from .models.enums import FileKind
from .models.results import ExtractionResult
from .models.tag import TagReference

logger = logging.getLogger(__name__)


class StyledExtract:
    """
    Main entry point for styledextract.
    Works on source text addressed by line/column, one file kind per instance.
    """

    def __init__(self, kind: str, indent: Optional[str] = None):
        """
        Args:
            kind: File kind ('jsx' or 'tsx')
            indent: Indentation unit for the template body; configuration default when None

        Raises:
            UnsupportedLanguageError: If the kind has no JSX grammar
        """
        try:
            self.kind = FileKind(str(kind).lower())
        except ValueError:
            raise UnsupportedLanguageError(str(kind))
        self.extractor = StyledComponentsExtractor(indent=indent)

    @classmethod
    def from_file_path(cls, file_path: str, indent: Optional[str] = None) -> 'StyledExtract':
        """Create an instance based on the file extension."""
        kind = file_kind_for_path(file_path)
        if kind is None:
            raise UnsupportedLanguageError(os.path.splitext(file_path)[1] or file_path)
        return cls(kind.value, indent=indent)

    @staticmethod
    def load_file(file_path: str) -> str:
        try:
            with open(file_path, 'r', encoding='utf8') as fh:
                return fh.read()
        except UnicodeDecodeError:
            with open(file_path, 'r', encoding='latin-1') as fh:
                return fh.read()

    @staticmethod
    def supported_kinds() -> List[str]:
        return [kind.value for kind in supported_kinds()]

    def document(self, code: str) -> Document:
        return Document(code, self.kind)

    def is_available(self, code: str, line: int, column: int) -> bool:
        document = self.document(code)
        return self.extractor.is_available(document, document.offset_at(line, column))

    def extract(self, code: str, line: int, column: int, name: Optional[str] = None) -> Optional[ExtractionResult]:
        """
        Extract the tag at ``line``/``column`` (1-based line, 0-based column).

        Returns:
            The extraction result, or None when the refactoring does not apply
        """
        document = self.document(code)
        return self.extractor.extract(document, document.offset_at(line, column), name=name)

    def find_tags(self, code: str) -> List[TagReference]:
        """All extractable (non-fragment) tags of ``code`` in document order."""
        handler = ASTHandler(self.kind)
        root, code_bytes = handler.parse(code)
        return [tag for tag in find_all_tags(handler, root, code_bytes) if not tag.is_fragment]
