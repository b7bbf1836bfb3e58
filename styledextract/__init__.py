from .models.enums import FileKind, SessionStatus, TagKind
from .models.results import ExtractionResult
from .models.tag import TagReference
from .core.document import Document
from .intention import StyledComponentsExtractor
from .session import NamingSession
from .main import StyledExtract

__version__ = "1.0.0"
__all__ = [
    "Document",
    "ExtractionResult",
    "FileKind",
    "NamingSession",
    "SessionStatus",
    "StyledComponentsExtractor",
    "StyledExtract",
    "TagKind",
    "TagReference",
]
