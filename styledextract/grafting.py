"""
Grafting of synthesized text into a real document.

The synthesized program is parsed on its own, as a scratch tree that never
belongs to a document. Import, declaration and renamed tag name are taken
from that tree, so everything inserted into the real file went through the
parser first. All lookups happen before the document is touched: a missing
node leaves the document unchanged.
"""
import logging
from typing import List, Optional

from styledextract.classifier import tag_name_node
from styledextract.core.document import Document, TextEdit, shift_offset
from styledextract.core.engine.ast_handler import ASTHandler
from styledextract.core.error_handling import EditConflictError, NodeNotFoundError
from styledextract.models.range import TextRange
from styledextract.models.results import GraftResult, SynthesizedDeclaration
from styledextract.models.tag import StyledImportBinding, TagReference

logger = logging.getLogger(__name__)

SCRATCH = 'scratch document'


def _append_prefix(text: str) -> str:
    if not text:
        return ''
    if text.endswith('\n'):
        return '\n'
    return '\n\n'


def graft(document: Document, handler: ASTHandler, tag: TagReference,
          synthesized: SynthesizedDeclaration,
          existing_import: Optional[StyledImportBinding] = None,
          command_name: str = 'Extract styled component') -> GraftResult:
    """
    Insert the import (when needed), append the declaration and rename every
    name token of ``tag``.

    Raises:
        NodeNotFoundError: an expected node is missing; nothing was edited
        EditConflictError: ``tag`` does not match the document text
    """
    scratch_root, scratch_bytes = handler.parse(synthesized.text)

    import_text = None
    if existing_import is None:
        import_node = handler.find_child_of_type(scratch_root, 'import_statement')
        if import_node is None:
            raise NodeNotFoundError('import_statement', where=SCRATCH)
        import_text = handler.get_node_text(import_node, scratch_bytes)

    declaration = handler.find_child_of_type(scratch_root, 'lexical_declaration')
    if declaration is None:
        raise NodeNotFoundError('lexical_declaration', where=SCRATCH)
    declarator = handler.find_child_of_type(declaration, 'variable_declarator')
    declared_name = handler.find_child_by_field_name(declarator, 'name')
    if declared_name is None:
        raise NodeNotFoundError('variable_declarator', where=SCRATCH)

    renamed_tag = handler.find_child_of_type(scratch_root, 'jsx_self_closing_element')
    if renamed_tag is None:
        raise NodeNotFoundError('jsx_self_closing_element', where=SCRATCH)
    renamed_token = tag_name_node(renamed_tag)
    if renamed_token is None:
        raise NodeNotFoundError('tag name', where=SCRATCH)

    if not tag.name_ranges:
        raise NodeNotFoundError('tag name', where=f'<{tag.name}>')
    text = document.text
    for name_range in tag.name_ranges:
        if name_range.end > len(text) or name_range.slice(text) != tag.name:
            raise EditConflictError(f"tag reference <{tag.name}> is stale")

    declaration_text = handler.get_node_text(declaration, scratch_bytes)
    renamed_text = handler.get_node_text(renamed_token, scratch_bytes)
    name_offset = (handler.char_offset(scratch_bytes, declared_name.start_byte)
                   - handler.char_offset(scratch_bytes, declaration.start_byte))
    name_length = len(handler.get_node_text(declared_name, scratch_bytes))

    edits: List[TextEdit] = []
    # ahead of the first top-level statement, leading directives included
    if import_text is not None:
        edits.append(TextEdit(start=0, end=0, text=import_text + '\n'))
    edits.append(TextEdit(start=len(text), end=len(text),
                          text=_append_prefix(text) + declaration_text + '\n'))
    rename_edits = [TextEdit(start=r.start, end=r.end, text=renamed_text) for r in tag.name_ranges]
    edits.extend(rename_edits)

    with document.write_action(command_name):
        document.apply_edits(edits)

    tag_ranges = []
    for edit in rename_edits:
        start = shift_offset(edit.start, edits)
        tag_ranges.append(TextRange(start=start, end=start + len(renamed_text)))
    declaration_start = len(document.text) - len(declaration_text) - 1
    name_start = declaration_start + name_offset
    logger.debug('Grafted %s: %d tag token(s), import inserted: %s',
                 renamed_text, len(tag_ranges), import_text is not None)
    return GraftResult(
        tag_name_ranges=tag_ranges,
        declaration_name_range=TextRange(start=name_start, end=name_start + name_length),
        declaration_range=TextRange(start=declaration_start, end=declaration_start + len(declaration_text)),
        import_inserted=import_text is not None,
    )
