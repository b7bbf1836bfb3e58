"""
Discovery of an existing import of the styling package.
"""
import logging
from typing import Optional

from tree_sitter import Node

from styledextract.core.engine.ast_handler import ASTHandler
from styledextract.models.tag import StyledImportBinding

logger = logging.getLogger(__name__)

# exported names that refer to the styled factory itself
STYLED_EXPORTS = ('styled', 'default')


def _source_text(handler: ASTHandler, statement: Node, code_bytes: bytes) -> Optional[str]:
    source = statement.child_by_field_name('source')
    if source is None:
        for child in statement.children:
            if child.type == 'string':
                source = child
                break
    if source is None:
        return None
    raw = handler.get_node_text(source, code_bytes)
    if len(raw) < 2 or raw[0] not in '\'"' or raw[-1] != raw[0]:
        return None
    return raw[1:-1]


def _bound_identifier(handler: ASTHandler, statement: Node, code_bytes: bytes) -> Optional[str]:
    """Default import first, then ``* as y``, then a ``styled`` or ``default`` specifier."""
    clause = handler.find_child_of_type(statement, 'import_clause')
    if clause is None:
        return None
    for child in clause.named_children:
        if child.type == 'identifier':
            return handler.get_node_text(child, code_bytes)
    namespace = handler.find_child_of_type(clause, 'namespace_import')
    if namespace is not None:
        ident = handler.find_child_of_type(namespace, 'identifier')
        if ident is not None:
            return handler.get_node_text(ident, code_bytes)
    for specifier in handler.find_children_of_type(clause, 'import_specifier'):
        imported = specifier.child_by_field_name('name')
        if imported is None or handler.get_node_text(imported, code_bytes) not in STYLED_EXPORTS:
            continue
        local = specifier.child_by_field_name('alias') or imported
        return handler.get_node_text(local, code_bytes)
    return None


def find_styled_import(handler: ASTHandler, root: Node, code_bytes: bytes,
                       package: str) -> Optional[StyledImportBinding]:
    """
    Return the first import of ``package`` that binds the styled factory.

    Side-effect imports and imports of helpers only (``{ css }``) bind no
    factory and are ignored.
    """
    for statement in handler.find_children_of_type(root, 'import_statement'):
        if _source_text(handler, statement, code_bytes) != package:
            continue
        local_name = _bound_identifier(handler, statement, code_bytes)
        if local_name is None:
            logger.debug('Ignoring import of %s without a styled binding', package)
            continue
        logger.debug('Found %s import bound to %s', package, local_name)
        return StyledImportBinding(
            source=package,
            local_name=local_name,
            range=handler.char_range(statement, code_bytes),
        )
    return None
