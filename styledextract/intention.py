"""
The "Extract styled component" refactoring as offered at a caret position.
"""
import logging
from typing import Optional

from styledextract.classifier import find_tag, is_tag_boundary_token
from styledextract.core.config import config
from styledextract.core.document import Document
from styledextract.core.engine.ast_handler import ASTHandler
from styledextract.core.error_handling import NodeNotFoundError, NotApplicableError, handle_missing_anchor
from styledextract.imports import find_styled_import
from styledextract.models.results import ExtractionResult
from styledextract.models.tag import TagReference
from styledextract.session import COMMAND_NAME, NamingSession

logger = logging.getLogger(__name__)


class StyledComponentsExtractor:
    """
    Extracts the tag under the caret into a ``styled-components`` declaration.

    Available when the caret is on ``<``, ``</``, ``>`` or the name of a tag in
    a JSX/TSX file and the tag is not a fragment.
    """
    family_name = COMMAND_NAME
    text = COMMAND_NAME

    def __init__(self, indent: Optional[str] = None):
        self.indent = indent
        self._handlers = {}

    def _handler(self, document: Document) -> ASTHandler:
        if document.kind not in self._handlers:
            self._handlers[document.kind] = ASTHandler(document.kind)
        return self._handlers[document.kind]

    def find_tag_at(self, document: Document, offset: int) -> Optional[TagReference]:
        """
        The tag whose boundary token is under ``offset``; the token ending at
        ``offset`` is tried when the caret sits right after it.
        """
        handler = self._handler(document)
        text = document.text
        root, code_bytes = handler.parse(text)
        for candidate in (offset, offset - 1):
            if candidate < 0 or candidate >= len(text):
                continue
            token = handler.token_at(root, handler.byte_offset(text, candidate))
            if is_tag_boundary_token(handler, token):
                return find_tag(handler, token, code_bytes)
        return None

    def is_available(self, document: Document, offset: int) -> bool:
        try:
            tag = self.find_tag_at(document, offset)
        except NodeNotFoundError as e:
            logger.debug('Tag lookup failed at %d: %s', offset, e)
            return False
        return tag is not None and not tag.is_fragment

    @handle_missing_anchor
    def invoke(self, document: Document, offset: int) -> Optional[NamingSession]:
        """
        Graft the component and return the running naming session, or ``None``
        when the refactoring does not apply at ``offset``.
        """
        tag = self.find_tag_at(document, offset)
        if tag is None:
            raise NotApplicableError('no tag boundary under the caret', offset=offset)
        if tag.is_fragment:
            raise NotApplicableError('fragments cannot be extracted', offset=offset)
        handler = self._handler(document)
        root, code_bytes = handler.parse(document.text)
        existing_import = find_styled_import(handler, root, code_bytes, config.get('styling', 'package'))
        session = NamingSession(document, handler, tag, existing_import=existing_import, indent=self.indent)
        session.start()
        logger.info('Extracting <%s> into %s', tag.name, session.default_name)
        return session

    def extract(self, document: Document, offset: int, name: Optional[str] = None) -> Optional[ExtractionResult]:
        """Run a whole session: invoke, type ``name`` when given, finish."""
        session = self.invoke(document, offset)
        if session is None:
            return None
        if name is not None:
            session.type(name)
        return session.finish()
