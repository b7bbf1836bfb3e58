import pytest

from styledextract.core.config import config
from styledextract.core.document import Document
from styledextract.core.engine.ast_handler import ASTHandler
from styledextract.intention import StyledComponentsExtractor
from styledextract.models.enums import FileKind


@pytest.fixture(autouse=True)
def default_config():
    config.reset()
    yield config
    config.reset()


@pytest.fixture
def tsx_handler():
    return ASTHandler(FileKind.TSX)


@pytest.fixture
def jsx_handler():
    return ASTHandler(FileKind.JSX)


@pytest.fixture
def extractor():
    return StyledComponentsExtractor()


@pytest.fixture
def tsx_document():
    def make(code: str) -> Document:
        return Document(code, FileKind.TSX)
    return make


@pytest.fixture
def offset_of():
    """Offset of the ``occurrence``-th ``needle`` in ``code`` plus ``delta``."""
    def find(code: str, needle: str, occurrence: int = 1, delta: int = 0) -> int:
        index = -1
        for _ in range(occurrence):
            index = code.index(needle, index + 1)
        return index + delta
    return find
