"""
Tag classification and lookup of the tag under the caret.
"""
import logging
from typing import List, Optional

from tree_sitter import Node

from styledextract.core.engine.ast_handler import ASTHandler
from styledextract.core.error_handling import NodeNotFoundError
from styledextract.models.enums import TagKind
from styledextract.models.tag import TagReference

logger = logging.getLogger(__name__)

FRAGMENT_NAMES = ('', 'Fragment', 'React.Fragment')

OPENING_ELEMENT = 'jsx_opening_element'
CLOSING_ELEMENT = 'jsx_closing_element'
SELF_CLOSING_ELEMENT = 'jsx_self_closing_element'
ELEMENT = 'jsx_element'
MARKER_TYPES = (OPENING_ELEMENT, CLOSING_ELEMENT, SELF_CLOSING_ELEMENT)

# start-tag opener, end-tag opener, tag-end closer
BOUNDARY_TOKENS = ('<', '</', '/', '>')
NAME_NODE_TYPES = ('identifier', 'member_expression', 'nested_identifier', 'jsx_namespace_name', 'jsx_identifier')


def is_fragment(name: Optional[str]) -> bool:
    return (name or '') in FRAGMENT_NAMES


def is_intrinsic_element(name: Optional[str]) -> bool:
    return bool(name) and name[0].islower()


def classify_tag_name(name: Optional[str]) -> TagKind:
    if is_fragment(name):
        return TagKind.FRAGMENT
    if is_intrinsic_element(name):
        return TagKind.INTRINSIC
    return TagKind.CUSTOM


def tag_name_node(marker: Node) -> Optional[Node]:
    name = marker.child_by_field_name('name')
    if name is not None:
        return name
    for child in marker.named_children:
        if child.type in NAME_NODE_TYPES:
            return child
    return None


def is_tag_boundary_token(handler: ASTHandler, token: Optional[Node]) -> bool:
    """True for ``<``, ``</``, ``>`` of a tag marker and for tokens of its name."""
    if token is None or token.child_count:
        return False
    parent = token.parent
    if parent is not None and parent.type in MARKER_TYPES and token.type in BOUNDARY_TOKENS:
        return True
    marker = handler.find_parent_of_type(token, MARKER_TYPES)
    if marker is None:
        return False
    name = tag_name_node(marker)
    return name is not None and name.start_byte <= token.start_byte and token.end_byte <= name.end_byte


def _element_markers(element: Node) -> List[Node]:
    if element.type == SELF_CLOSING_ELEMENT:
        return [element]
    markers = []
    open_tag = element.child_by_field_name('open_tag')
    close_tag = element.child_by_field_name('close_tag')
    if open_tag is None or close_tag is None:
        for child in element.children:
            if child.type == OPENING_ELEMENT and open_tag is None:
                open_tag = child
            elif child.type == CLOSING_ELEMENT:
                close_tag = child
    markers.extend(m for m in (open_tag, close_tag) if m is not None)
    return markers


def tag_from_element(handler: ASTHandler, element: Node, code_bytes: bytes) -> TagReference:
    """Build a ``TagReference`` for a ``jsx_element`` or ``jsx_self_closing_element``."""
    markers = _element_markers(element)
    if not markers:
        raise NodeNotFoundError(OPENING_ELEMENT, where='tag')
    name_nodes = [n for n in (tag_name_node(m) for m in markers) if n is not None]
    name = handler.get_node_text(name_nodes[0], code_bytes) if name_nodes else ''
    return TagReference(
        name=name,
        kind=classify_tag_name(name),
        range=handler.char_range(element, code_bytes),
        name_ranges=[handler.char_range(n, code_bytes) for n in name_nodes],
        self_closing=element.type == SELF_CLOSING_ELEMENT,
        node=element,
    )


def find_tag(handler: ASTHandler, token: Node, code_bytes: bytes) -> TagReference:
    """Resolve the tag that ``token`` belongs to."""
    marker = handler.find_parent_of_type(token, MARKER_TYPES, include_self=True)
    if marker is None:
        raise NodeNotFoundError('jsx tag', where=f'ancestors of {token.type!r}')
    element = marker
    if marker.type != SELF_CLOSING_ELEMENT:
        element = marker.parent
        if element is None or element.type != ELEMENT:
            raise NodeNotFoundError(ELEMENT, where=f'parent of {marker.type}')
    return tag_from_element(handler, element, code_bytes)


def find_all_tags(handler: ASTHandler, root: Node, code_bytes: bytes) -> List[TagReference]:
    """Every tag of a tree in document order, fragments included."""
    return [
        tag_from_element(handler, element, code_bytes)
        for element in handler.find_children_of_type(root, (ELEMENT, SELF_CLOSING_ELEMENT))
    ]
