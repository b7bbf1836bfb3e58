"""
Core infrastructure: configuration, errors, documents and the tree-sitter engine.
"""
from .config import config, Configuration
from .document import Document, TextEdit

__all__ = ['config', 'Configuration', 'Document', 'TextEdit']
