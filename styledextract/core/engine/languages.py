"""
Tree-sitter grammars for the JSX-capable file kinds.

Only two kinds are recognised: ``jsx`` (JavaScript with JSX) and ``tsx``
(TypeScript with JSX). Grammars come from the pre-compiled language packages.
"""
import logging
import os
from typing import Dict, Optional

from tree_sitter import Language, Parser

from styledextract.core.error_handling import UnsupportedLanguageError
from styledextract.models.enums import FileKind

logger = logging.getLogger(__name__)

# kind -> (module name, function returning the grammar)
LANGUAGE_MODULES: Dict[FileKind, tuple] = {
    FileKind.JSX: ('tree_sitter_javascript', 'language'),
    FileKind.TSX: ('tree_sitter_typescript', 'language_tsx'),
}

FILE_EXTENSIONS: Dict[str, FileKind] = {
    '.jsx': FileKind.JSX,
    '.tsx': FileKind.TSX,
}

_language_cache: Dict[FileKind, Language] = {}
_parser_cache: Dict[FileKind, Parser] = {}


def _as_kind(kind) -> FileKind:
    if isinstance(kind, FileKind):
        return kind
    try:
        return FileKind(str(kind).lower())
    except ValueError:
        raise UnsupportedLanguageError(str(kind))


def get_language(kind) -> Language:
    """Return the tree-sitter ``Language`` for ``kind``."""
    kind = _as_kind(kind)
    if kind in _language_cache:
        return _language_cache[kind]
    module_name, func_name = LANGUAGE_MODULES[kind]
    try:
        module = __import__(module_name)
    except ImportError:
        raise UnsupportedLanguageError(
            kind.value,
            operation='parse',
            reason=f"grammar package '{module_name.replace('_', '-')}' is not installed",
        )
    lang_obj = getattr(module, func_name)()
    lang = lang_obj if isinstance(lang_obj, Language) else Language(lang_obj)
    _language_cache[kind] = lang
    logger.debug('Loaded %s grammar from %s.%s', kind.value, module_name, func_name)
    return lang


def get_parser(kind) -> Parser:
    """Return a cached ``Parser`` bound to the grammar of ``kind``."""
    kind = _as_kind(kind)
    if kind not in _parser_cache:
        _parser_cache[kind] = Parser(get_language(kind))
    return _parser_cache[kind]


def file_kind_for_path(path: str) -> Optional[FileKind]:
    """Map a file path to its JSX-capable kind, or ``None``."""
    ext = os.path.splitext(path)[1].lower()
    return FILE_EXTENSIONS.get(ext)


def supported_kinds():
    return list(LANGUAGE_MODULES.keys())
