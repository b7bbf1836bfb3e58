"""
AST Handler for styledextract providing a unified interface for tree-sitter operations.
"""
import hashlib
import logging
from functools import lru_cache
from typing import Callable, Iterator, List, Optional, Tuple, Union

from tree_sitter import Node

from styledextract.core.engine.languages import get_language, get_parser
from styledextract.models.enums import FileKind
from styledextract.models.range import TextRange

logger = logging.getLogger(__name__)

NodeTypes = Union[str, List[str], Tuple[str, ...], set]


def _type_set(node_types: NodeTypes) -> set:
    if isinstance(node_types, str):
        return {node_types}
    return set(node_types)


class ASTHandler:
    """
    Handles syntax tree operations using tree-sitter.
    Provides the navigation primitives the extraction needs: parent/child
    lookup by type, descendant collection and token lookup by offset.
    """

    def __init__(self, kind: FileKind):
        """
        Initialize the AST handler.

        Args:
            kind: JSX-capable file kind whose grammar is used for parsing
        """
        self.kind = FileKind(kind)
        self.parser = get_parser(self.kind)
        self.language = get_language(self.kind)

    @lru_cache(maxsize=64)
    def _parse_cached(self, code_hash: str, code: str) -> Tuple[Node, bytes]:
        """Internal cached parse implementation."""
        code_bytes = code.encode('utf8')
        tree = self.parser.parse(code_bytes)
        return (tree.root_node, code_bytes)

    def parse(self, code: str) -> Tuple[Node, bytes]:
        """
        Parse source code into a syntax tree. Results are cached by the SHA1
        hash of ``code``.

        Returns:
            Tuple of (root_node, code_bytes)
        """
        code_hash = hashlib.sha1(code.encode('utf8')).hexdigest()
        return self._parse_cached(code_hash, code)

    @staticmethod
    def get_node_text(node: Node, code_bytes: bytes) -> str:
        return code_bytes[node.start_byte:node.end_byte].decode('utf8')

    @staticmethod
    def iter_descendants(node: Node) -> Iterator[Node]:
        """Yield every descendant of ``node`` in document order (pre-order)."""
        stack = list(reversed(node.children))
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def find_parent_of_type(self, node: Optional[Node], parent_type: NodeTypes,
                            include_self: bool = False) -> Optional[Node]:
        """
        Find the nearest ancestor whose type is ``parent_type`` (a type name or
        a collection of type names).
        """
        if node is None:
            return None
        target_types = _type_set(parent_type)
        current = node if include_self else node.parent
        while current is not None:
            if current.type in target_types:
                return current
            current = current.parent
        return None

    @staticmethod
    def find_child_by_field_name(node: Optional[Node], field_name: str) -> Optional[Node]:
        if node is None:
            return None
        return node.child_by_field_name(field_name)

    def find_child_of_type(self, node: Node, node_type: NodeTypes) -> Optional[Node]:
        """First descendant (document order) of the given type(s)."""
        target_types = _type_set(node_type)
        for child in self.iter_descendants(node):
            if child.type in target_types:
                return child
        return None

    def find_children_of_type(self, node: Node, node_type: NodeTypes,
                              predicate: Optional[Callable[[Node], bool]] = None) -> List[Node]:
        """All descendants of the given type(s), optionally filtered by ``predicate``."""
        target_types = _type_set(node_type)
        return [
            child for child in self.iter_descendants(node)
            if child.type in target_types and (predicate is None or predicate(child))
        ]

    @staticmethod
    def token_at(root: Node, byte_offset: int) -> Optional[Node]:
        """
        Return the leaf token covering ``byte_offset`` or ``None`` when the
        offset falls into whitespace or past the end of the tree.
        """
        node = root
        while node.child_count:
            for child in node.children:
                if child.start_byte <= byte_offset < child.end_byte:
                    node = child
                    break
            else:
                return None
        if node is root:
            return None
        return node

    @staticmethod
    def char_offset(code_bytes: bytes, byte_offset: int) -> int:
        """Convert a UTF-8 byte offset into a character offset."""
        return len(code_bytes[:byte_offset].decode('utf8'))

    @staticmethod
    def byte_offset(code: str, char_offset: int) -> int:
        """Convert a character offset into a UTF-8 byte offset."""
        return len(code[:char_offset].encode('utf8'))

    def char_range(self, node: Node, code_bytes: bytes) -> TextRange:
        return TextRange(
            start=self.char_offset(code_bytes, node.start_byte),
            end=self.char_offset(code_bytes, node.end_byte),
        )
