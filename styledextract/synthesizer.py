"""
Textual synthesis of the styled component declaration.

The output is plain program text; the tree for it is obtained by parsing it
with the grammar of the target file.
"""
import logging
import re
from typing import Optional

from styledextract.core.config import config
from styledextract.models.enums import TagKind
from styledextract.models.results import SynthesizedDeclaration

logger = logging.getLogger(__name__)

_JS_MEMBER_PATH_RE = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*(\.[A-Za-z_$][A-Za-z0-9_$]*)*$')


def import_line(identifier: str, package: str) -> str:
    return f'import {identifier} from "{package}";'


def call_head(identifier: str, kind: TagKind, tag_name: str) -> str:
    """``styled.div`` for intrinsic tags, ``styled(Button)`` for components."""
    if kind == TagKind.INTRINSIC:
        if _JS_MEMBER_PATH_RE.match(tag_name):
            return f'{identifier}.{tag_name}'
        # names such as <my-element> or <svg:rect> are not member paths
        return f'{identifier}("{tag_name}")'
    return f'{identifier}({tag_name})'


def synthesize(name: str, kind: TagKind, tag_name: str, indent: Optional[str] = None,
               import_identifier: Optional[str] = None,
               placeholder: Optional[str] = None) -> SynthesizedDeclaration:
    """
    Build the text of the new declaration.

    Args:
        name: Identifier of the new component
        kind: Classification of the extracted tag (never a fragment)
        tag_name: Original tag name
        indent: Indentation unit placed before the placeholder
        import_identifier: Local name of an existing styling import; when
            ``None`` an import statement is synthesized too
        placeholder: Body of the template literal
    """
    if kind == TagKind.FRAGMENT:
        raise ValueError('Fragments cannot be extracted')
    if indent is None:
        indent = config.indent
    if placeholder is None:
        placeholder = config.get('styling', 'placeholder', '')
    default_identifier = config.get('styling', 'default_identifier', 'styled')

    import_text = None
    if import_identifier is None:
        import_text = import_line(default_identifier, config.get('styling', 'package'))
    head = call_head(import_identifier or default_identifier, kind, tag_name)
    declaration_text = f'const {name} = {head}`\n{indent}{placeholder}\n`;'
    logger.debug('Synthesized declaration for <%s>: %s', tag_name, head)
    return SynthesizedDeclaration(
        name=name,
        kind=kind,
        tag_name=tag_name,
        call_head=head,
        import_text=import_text,
        declaration_text=declaration_text,
        tag_text=f'<{name} />',
    )
