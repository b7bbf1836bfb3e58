import pytest

from styledextract.classifier import find_tag
from styledextract.core.error_handling import NodeNotFoundError, SessionStateError
from styledextract.models.enums import SessionStatus
from styledextract.session import NamingSession

CODE = (
    'export const Form = () => (\n'
    '  <button type="submit">\n'
    '    Send\n'
    '  </button>\n'
    ');\n'
)


@pytest.fixture
def session(tsx_handler, tsx_document, offset_of):
    document = tsx_document(CODE)
    root, code_bytes = tsx_handler.parse(CODE)
    token = tsx_handler.token_at(root, offset_of(CODE, 'button'))
    tag = find_tag(tsx_handler, token, code_bytes)
    return NamingSession(document, tsx_handler, tag)


def _linked_texts(session):
    return [r.slice(session.document.text) for r in session.regions]


def test_start_grafts_default_name(session):
    session.start()
    assert session.status == SessionStatus.GRAFTED
    assert session.value == 'StyledButton'
    assert _linked_texts(session) == ['StyledButton'] * 3
    assert 'const StyledButton = styled.button`' in session.document.text


def test_typing_updates_every_linked_region(session):
    session.start()
    for partial in ('S', 'Su', 'Submit', ''):
        session.type(partial)
        assert session.status == SessionStatus.EDITING
        assert _linked_texts(session) == [partial] * 3
    session.type('SubmitButton')
    text = session.document.text
    assert '<SubmitButton type="submit">' in text
    assert '</SubmitButton>' in text
    assert 'const SubmitButton = styled.button`' in text


def test_finish_keeps_pascal_case_name(session):
    session.start()
    session.type('SubmitButton')
    result = session.finish()
    assert result.name == 'SubmitButton'
    assert session.status == SessionStatus.FINISHED
    assert result.code == session.document.text


def test_finish_normalizes_typed_name(session):
    session.start()
    session.type('submit button')
    result = session.finish()
    assert result.name == 'SubmitButton'
    assert _linked_texts(session) == ['SubmitButton'] * 3
    assert 'submit button' not in session.document.text


def test_finish_with_blank_name_uses_default(session):
    session.start()
    session.type('   ')
    result = session.finish()
    assert result.name == 'StyledButton'
    assert _linked_texts(session) == ['StyledButton'] * 3


def test_finish_selects_placeholder(session):
    session.start()
    result = session.finish()
    document = session.document
    assert document.selected_text == '// TODO: add styling'
    assert result.caret == document.caret == result.selection.start
    assert document.position_at(document.caret).column == 2


def test_finished_session_is_one_undo_unit(session):
    session.start()
    session.type('Submit')
    session.type('SubmitButton')
    session.finish()
    assert session.document.undo()
    assert session.document.text == CODE
    assert not session.document.can_undo


def test_cancel_restores_original_document(session):
    session.start()
    session.type('Whatever')
    session.cancel()
    assert session.status == SessionStatus.CANCELLED
    assert session.document.text == CODE
    assert not session.document.can_undo


def test_invalid_transitions(session):
    with pytest.raises(SessionStateError):
        session.type('X')
    with pytest.raises(SessionStateError):
        session.finish()
    session.start()
    with pytest.raises(SessionStateError):
        session.start()
    session.finish()
    with pytest.raises(SessionStateError):
        session.cancel()


def test_state_snapshot(session):
    session.start()
    state = session.state
    assert state.status == SessionStatus.GRAFTED
    assert state.tag_name == 'button'
    assert state.default_name == 'StyledButton'
    assert len(state.regions) == 3


def test_missing_anchor_cancels_without_edits(session, monkeypatch):
    import styledextract.session as session_module

    def broken_graft(*args, **kwargs):
        raise NodeNotFoundError('lexical_declaration', where='scratch document')

    monkeypatch.setattr(session_module, 'graft', broken_graft)
    with pytest.raises(NodeNotFoundError):
        session.start()
    assert session.status == SessionStatus.CANCELLED
    assert session.document.text == CODE
