"""
Inline naming session for an extracted styled component.

The component is grafted first under a default name. Every renamed tag token
and the declaration identifier then form linked regions: typing replaces all
of them at once. Finishing normalizes the name to PascalCase and places the
caret in the template body; cancelling restores the document as it was before
the session started.
"""
import logging
from typing import List, Optional

from styledextract.core.config import config
from styledextract.core.document import Document, DocumentMark, TextEdit
from styledextract.core.engine.ast_handler import ASTHandler
from styledextract.core.error_handling import EditConflictError, NodeNotFoundError, SessionStateError
from styledextract.grafting import graft
from styledextract.models.enums import SessionStatus
from styledextract.models.range import TextRange
from styledextract.models.results import ExtractionResult, GraftResult, NamingSessionState
from styledextract.models.tag import StyledImportBinding, TagReference
from styledextract.naming import default_styled_name, resolve_component_name
from styledextract.synthesizer import synthesize

logger = logging.getLogger(__name__)

COMMAND_NAME = 'Extract styled component'


class NamingSession:
    """Linked-region editing of the new component's name."""

    def __init__(self, document: Document, handler: ASTHandler, tag: TagReference,
                 existing_import: Optional[StyledImportBinding] = None,
                 indent: Optional[str] = None):
        self.document = document
        self.handler = handler
        self.tag = tag
        self.existing_import = existing_import
        self.indent = config.indent if indent is None else indent
        self.default_name = default_styled_name(tag.name)
        self.status = SessionStatus.IDLE
        self.value = ''
        self.graft_result: Optional[GraftResult] = None
        self._regions: List[TextRange] = []
        self._declaration_index = -1
        self._mark: Optional[DocumentMark] = None

    @property
    def regions(self) -> List[TextRange]:
        return list(self._regions)

    @property
    def state(self) -> NamingSessionState:
        return NamingSessionState(
            status=self.status,
            tag_name=self.tag.name,
            default_name=self.default_name,
            value=self.value,
            regions=self.regions,
        )

    def _require(self, operation: str, *allowed: SessionStatus):
        if self.status not in allowed:
            raise SessionStateError(operation, self.status.value)

    def start(self) -> GraftResult:
        """Graft the component under its default name and link the name regions."""
        self._require('start', SessionStatus.IDLE)
        local_name = self.existing_import.local_name if self.existing_import else None
        synthesized = synthesize(self.default_name, self.tag.kind, self.tag.name,
                                 indent=self.indent, import_identifier=local_name)
        self._mark = self.document.start_mark(COMMAND_NAME)
        try:
            result = graft(self.document, self.handler, self.tag, synthesized,
                           existing_import=self.existing_import, command_name=COMMAND_NAME)
        except (NodeNotFoundError, EditConflictError):
            self.document.rollback_to_mark(self._mark)
            self.status = SessionStatus.CANCELLED
            raise
        self.graft_result = result
        self._regions = result.linked_ranges
        self._declaration_index = self._regions.index(result.declaration_name_range)
        self.value = self.default_name
        self.status = SessionStatus.GRAFTED
        logger.debug('Naming session started for <%s> with %d linked regions',
                     self.tag.name, len(self._regions))
        return result

    def type(self, text: str):
        """Replace the content of every linked region with ``text``."""
        self._require('edit', SessionStatus.GRAFTED, SessionStatus.EDITING)
        self._set_regions(text)
        self.status = SessionStatus.EDITING

    def _set_regions(self, text: str):
        edits = [TextEdit(start=r.start, end=r.end, text=text) for r in self._regions]
        with self.document.write_action('Rename styled component'):
            self.document.apply_edits(edits)
        regions = []
        delta = 0
        for region in self._regions:
            start = region.start + delta
            regions.append(TextRange(start=start, end=start + len(text)))
            delta += len(text) - region.length
        self._regions = regions
        self.value = text

    def finish(self) -> ExtractionResult:
        """Normalize the typed name, place the caret and seal the edit."""
        self._require('finish', SessionStatus.GRAFTED, SessionStatus.EDITING)
        raw = self.value
        name = resolve_component_name(raw, self.tag.name)
        if name != raw:
            logger.debug('Normalized component name %r to %r', raw, name)
            self._set_regions(name)
        self._place_caret()
        self.document.commit_mark(self._mark)
        self.status = SessionStatus.FINISHED
        return ExtractionResult(
            name=name,
            tag_name=self.tag.name,
            kind=self.tag.kind,
            code=self.document.text,
            import_inserted=self.graft_result.import_inserted,
            caret=self.document.caret,
            selection=self.document.selection,
        )

    def cancel(self):
        """Abandon the session; the document returns to its pre-session text."""
        self._require('cancel', SessionStatus.IDLE, SessionStatus.GRAFTED, SessionStatus.EDITING)
        if self._mark is not None:
            self.document.rollback_to_mark(self._mark)
        self.status = SessionStatus.CANCELLED
        logger.debug('Naming session for <%s> cancelled', self.tag.name)

    def _place_caret(self):
        """Put the caret on the placeholder line of the template and select the placeholder."""
        text = self.document.text
        root, code_bytes = self.handler.parse(text)
        name_region = self._regions[self._declaration_index]
        token = self.handler.token_at(root, self.handler.byte_offset(text, name_region.start))
        declarator = self.handler.find_parent_of_type(token, 'variable_declarator')
        template = self.handler.find_child_of_type(declarator, 'template_string') if declarator else None
        if template is None:
            logger.debug('No template literal found for %s, caret left in place', self.value)
            return
        template_start = self.handler.char_offset(code_bytes, template.start_byte)
        # skip the backtick and the newline that opens the body
        caret = min(template_start + 2 + len(self.indent), len(text))
        placeholder = config.get('styling', 'placeholder', '')
        self.document.move_caret(caret)
        if placeholder and text[caret:caret + len(placeholder)] == placeholder:
            self.document.select(caret, caret + len(placeholder))
