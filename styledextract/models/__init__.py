from .enums import FileKind, SessionStatus, TagKind
from .range import CodePosition, TextRange
from .tag import StyledImportBinding, TagReference
from .results import ExtractionResult, GraftResult, NamingSessionState, SynthesizedDeclaration

__all__ = [
    'CodePosition',
    'ExtractionResult',
    'FileKind',
    'GraftResult',
    'NamingSessionState',
    'SessionStatus',
    'StyledImportBinding',
    'SynthesizedDeclaration',
    'TagKind',
    'TagReference',
    'TextRange',
]
