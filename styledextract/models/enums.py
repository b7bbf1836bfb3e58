"""
Enumerations shared by the extraction models.
"""
from enum import Enum


class FileKind(str, Enum):
    """JSX-capable file kinds"""
    JSX = 'jsx'
    TSX = 'tsx'


class TagKind(str, Enum):
    """Classification of a markup tag"""
    FRAGMENT = 'fragment'
    INTRINSIC = 'intrinsic'
    CUSTOM = 'custom'


class SessionStatus(str, Enum):
    """Lifecycle of an inline naming session"""
    IDLE = 'idle'
    GRAFTED = 'grafted'
    EDITING = 'editing'
    FINISHED = 'finished'
    CANCELLED = 'cancelled'
