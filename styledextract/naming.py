"""
Name normalization for generated components.

Component identifiers are PascalCase. Text that already is PascalCase is
kept verbatim so that normalizing twice never changes a name.
"""
import re
from typing import Optional

from styledextract.core.config import config

_PASCAL_RE = re.compile(r'^[A-Z][A-Za-z0-9]*$')
_SEPARATOR_RE = re.compile(r'[^A-Za-z0-9]+')
_WORD_RE = re.compile(r'[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+')


def is_pascal_case(text: str) -> bool:
    return bool(text) and _PASCAL_RE.match(text) is not None


def split_words(text: str) -> list:
    """Split ``text`` on separators and on case/digit boundaries."""
    words = []
    for chunk in _SEPARATOR_RE.split(text or ''):
        words.extend(_WORD_RE.findall(chunk))
    return words


def to_pascal_case(text: str) -> str:
    """
    Convert ``text`` into a PascalCase identifier.

    ``my-button`` and ``my_button`` give ``MyButton``, ``React.Fragment`` gives
    ``ReactFragment``. Leading digits are dropped; the result is empty when
    ``text`` contains no letters.
    """
    if is_pascal_case(text):
        return text
    result = ''.join(word[0].upper() + word[1:] for word in split_words(text))
    return result.lstrip('0123456789')


def default_styled_name(tag_name: str, prefix: Optional[str] = None) -> str:
    """Default identifier for the component extracted from ``tag_name``."""
    if prefix is None:
        prefix = config.get('styling', 'name_prefix', 'Styled')
    return f'{prefix}{to_pascal_case(tag_name)}'


def resolve_component_name(raw: Optional[str], tag_name: str) -> str:
    """Identifier to use for user input ``raw``: the default when blank, else PascalCase."""
    default = default_styled_name(tag_name)
    if raw is None or not raw.strip():
        return default
    return to_pascal_case(raw.strip()) or default
