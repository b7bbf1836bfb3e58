import pytest

from styledextract.core.document import Document
from styledextract.core.error_handling import EditConflictError
from styledextract.models.enums import FileKind, TagKind

APP = (
    'import React from "react";\n'
    '\n'
    'export const App = () => (\n'
    '  <div className="app">\n'
    '    <Header title="Home" />\n'
    '    <>\n'
    '      <p>Hello</p>\n'
    '    </>\n'
    '    <React.Fragment>x</React.Fragment>\n'
    '  </div>\n'
    ');\n'
)


def test_family_name(extractor):
    assert extractor.family_name == 'Extract styled component'
    assert extractor.text == extractor.family_name


@pytest.mark.parametrize('needle, delta', [
    ('<div', 0),         # start-tag opener
    ('<div', 1),         # tag name
    ('</div', 0),        # end-tag opener
    ('</div', 3),        # closing tag name
    ('"app">', 5),       # tag-end closer
    ('<Header', 3),
    ('<p>', 1),
])
def test_available_on_boundary_tokens(extractor, tsx_document, offset_of, needle, delta):
    document = tsx_document(APP)
    assert extractor.is_available(document, offset_of(APP, needle, delta=delta))


def test_available_right_after_tag_end(extractor, tsx_document, offset_of):
    document = tsx_document(APP)
    # caret between '>' and 'Hello'
    assert extractor.is_available(document, offset_of(APP, 'Hello'))


@pytest.mark.parametrize('needle, delta', [
    ('<>', 0),
    ('</>', 0),
    ('<React.Fragment', 1),
    ('</React.Fragment', 8),
])
def test_fragments_are_never_available(extractor, tsx_document, offset_of, needle, delta):
    document = tsx_document(APP)
    assert not extractor.is_available(document, offset_of(APP, needle, delta=delta))


@pytest.mark.parametrize('needle, delta', [
    ('className', 2),
    ('"Home"', 2),
    ('import', 0),
    ('export', 3),
])
def test_not_available_elsewhere(extractor, tsx_document, offset_of, needle, delta):
    document = tsx_document(APP)
    assert not extractor.is_available(document, offset_of(APP, needle, delta=delta))


def test_invoke_not_applicable_returns_none(extractor, tsx_document, offset_of):
    document = tsx_document(APP)
    assert extractor.invoke(document, offset_of(APP, '<>')) is None
    assert extractor.invoke(document, offset_of(APP, 'className')) is None
    assert document.text == APP


def test_end_to_end_intrinsic_without_import(extractor, tsx_document, offset_of):
    code = 'export const App = () => <div>Hello</div>;\n'
    document = tsx_document(code)
    result = extractor.extract(document, offset_of(code, 'div'))
    assert result.name == 'StyledDiv'
    assert result.kind == TagKind.INTRINSIC
    assert result.import_inserted
    assert document.text == (
        'import styled from "styled-components";\n'
        'export const App = () => <StyledDiv>Hello</StyledDiv>;\n'
        '\n'
        'const StyledDiv = styled.div`\n'
        '  // TODO: add styling\n'
        '`;\n'
    )
    assert document.selected_text == '// TODO: add styling'


def test_end_to_end_custom_with_import(extractor, offset_of):
    code = (
        'import styled from "styled-components";\n'
        'import { MyComponent } from "./my-component";\n'
        '\n'
        'export const Page = () => <MyComponent label="a" />;\n'
    )
    document = Document(code, FileKind.JSX)
    result = extractor.extract(document, offset_of(code, '<MyComponent', delta=1))
    assert result.name == 'StyledMyComponent'
    assert not result.import_inserted
    assert document.text.count('from "styled-components"') == 1
    assert '<StyledMyComponent label="a" />' in document.text
    assert document.text.endswith('const StyledMyComponent = styled(MyComponent)`\n  // TODO: add styling\n`;\n')


def test_aliased_import_is_used_as_call_head(extractor, tsx_document, offset_of):
    code = (
        'import { styled as sc } from "styled-components";\n'
        'const A = () => <section><Card /></section>;\n'
    )
    document = tsx_document(code)
    extractor.extract(document, offset_of(code, 'section'))
    assert 'const StyledSection = sc.section`' in document.text
    assert 'import styled' not in document.text

    extractor.extract(document, document.text.index('<Card') + 1)
    assert 'const StyledCard = sc(Card)`' in document.text
    assert document.text.count('import') == 1


def test_named_helper_import_is_not_reused(extractor, tsx_document, offset_of):
    code = (
        'import { css } from "styled-components";\n'
        'const A = () => <div>x</div>;\n'
    )
    document = tsx_document(code)
    result = extractor.extract(document, offset_of(code, '<div', delta=1))
    assert result.import_inserted
    assert document.text.startswith('import styled from "styled-components";\nimport { css } from')
    assert 'const StyledDiv = styled.div`' in document.text
    assert 'css.div' not in document.text


def test_dotted_intrinsic_tag(extractor, tsx_document, offset_of):
    code = 'const A = () => <motion.div>x</motion.div>;\n'
    document = tsx_document(code)
    result = extractor.extract(document, offset_of(code, 'motion.div'))
    assert result.name == 'StyledMotionDiv'
    assert '<StyledMotionDiv>x</StyledMotionDiv>' in document.text
    assert 'const StyledMotionDiv = styled.motion.div`' in document.text


def test_extract_with_typed_name(extractor, tsx_document, offset_of):
    code = 'const A = () => <ul><li>one</li></ul>;\n'
    document = tsx_document(code)
    result = extractor.extract(document, offset_of(code, '<li', delta=1), name='menu item')
    assert result.name == 'MenuItem'
    assert '<ul><MenuItem>one</MenuItem></ul>' in document.text
    assert 'const MenuItem = styled.li`' in document.text


def test_nested_tags_keep_their_names(extractor, tsx_document, offset_of):
    code = 'const A = () => <div><div>inner</div></div>;\n'
    document = tsx_document(code)
    extractor.extract(document, offset_of(code, '<div', occurrence=2, delta=1))
    assert 'const A = () => <div><StyledDiv>inner</StyledDiv></div>;' in document.text


def test_session_cancel_reverts_document(extractor, tsx_document, offset_of):
    code = 'const A = () => <nav>links</nav>;\n'
    document = tsx_document(code)
    session = extractor.invoke(document, offset_of(code, 'nav'))
    assert session is not None
    session.type('Navigation')
    session.cancel()
    assert document.text == code


def test_custom_indent(tsx_document, offset_of):
    from styledextract.intention import StyledComponentsExtractor

    code = 'const A = () => <h1>t</h1>;\n'
    document = tsx_document(code)
    result = StyledComponentsExtractor(indent='\t').extract(document, offset_of(code, 'h1'))
    assert 'const StyledH1 = styled.h1`\n\t// TODO: add styling\n`;' in document.text
    assert document.position_at(result.caret).column == 1


def test_overlapping_edit_propagates(extractor, tsx_document, offset_of, monkeypatch):
    def overlap(*args, **kwargs):
        raise EditConflictError('edit overlaps')

    code = 'const A = () => <b>x</b>;\n'
    document = tsx_document(code)
    monkeypatch.setattr(document, 'apply_edits', overlap)
    with pytest.raises(EditConflictError):
        extractor.invoke(document, offset_of(code, '<b', delta=1))
    assert document.text == code
