import pytest

from styledextract.classifier import (
    classify_tag_name,
    find_all_tags,
    find_tag,
    is_fragment,
    is_intrinsic_element,
    is_tag_boundary_token,
)
from styledextract.models.enums import TagKind


@pytest.mark.parametrize('name', ['', 'Fragment', 'React.Fragment'])
def test_fragments(name):
    assert is_fragment(name)
    assert classify_tag_name(name) == TagKind.FRAGMENT


def test_intrinsic_and_custom():
    assert is_intrinsic_element('div')
    assert not is_intrinsic_element('Div')
    assert not is_intrinsic_element('')
    assert classify_tag_name('span') == TagKind.INTRINSIC
    assert classify_tag_name('my-element') == TagKind.INTRINSIC
    assert classify_tag_name('MyComponent') == TagKind.CUSTOM
    assert classify_tag_name('Foo.Bar') == TagKind.CUSTOM


def _token(handler, code, offset):
    root, code_bytes = handler.parse(code)
    return handler.token_at(root, handler.byte_offset(code, offset)), code_bytes


def test_find_tag_from_opening_name(tsx_handler, offset_of):
    code = 'const App = () => <div className="a"><span>hi</span></div>;\n'
    token, code_bytes = _token(tsx_handler, code, offset_of(code, 'div'))
    assert is_tag_boundary_token(tsx_handler, token)
    tag = find_tag(tsx_handler, token, code_bytes)
    assert tag.name == 'div'
    assert tag.kind == TagKind.INTRINSIC
    assert not tag.self_closing
    assert [r.slice(code) for r in tag.name_ranges] == ['div', 'div']
    assert tag.name_ranges[0].start == offset_of(code, 'div')
    assert tag.name_ranges[1].start == offset_of(code, '</div', delta=2)


def test_find_tag_from_closing_opener(tsx_handler, offset_of):
    code = 'const App = () => <Panel><b>x</b></Panel>;\n'
    token, code_bytes = _token(tsx_handler, code, offset_of(code, '</Panel'))
    assert is_tag_boundary_token(tsx_handler, token)
    tag = find_tag(tsx_handler, token, code_bytes)
    assert tag.name == 'Panel'
    assert tag.kind == TagKind.CUSTOM
    assert len(tag.name_ranges) == 2


def test_self_closing_tag(tsx_handler, offset_of):
    code = 'const Field = () => <input value="x" />;\n'
    token, code_bytes = _token(tsx_handler, code, offset_of(code, '<input'))
    tag = find_tag(tsx_handler, token, code_bytes)
    assert tag.self_closing
    assert [r.slice(code) for r in tag.name_ranges] == ['input']


def test_member_expression_name(tsx_handler, offset_of):
    code = 'const A = () => <Layout.Header>t</Layout.Header>;\n'
    token, code_bytes = _token(tsx_handler, code, offset_of(code, 'Header'))
    assert is_tag_boundary_token(tsx_handler, token)
    tag = find_tag(tsx_handler, token, code_bytes)
    assert tag.name == 'Layout.Header'
    assert [r.slice(code) for r in tag.name_ranges] == ['Layout.Header', 'Layout.Header']


def test_fragment_tag(tsx_handler):
    code = 'const A = () => <><p /></>;\n'
    token, code_bytes = _token(tsx_handler, code, code.index('<>'))
    tag = find_tag(tsx_handler, token, code_bytes)
    assert tag.is_fragment
    assert tag.name_ranges == []


def test_non_boundary_tokens(tsx_handler, offset_of):
    code = 'const A = () => <div title="x">text</div>;\n'
    for offset in (offset_of(code, 'title'), offset_of(code, 'text'), offset_of(code, 'const')):
        token, _ = _token(tsx_handler, code, offset)
        assert not is_tag_boundary_token(tsx_handler, token)


def test_find_all_tags(jsx_handler):
    code = 'const A = () => <main><Nav /><>x</></main>;\n'
    root, code_bytes = jsx_handler.parse(code)
    tags = find_all_tags(jsx_handler, root, code_bytes)
    assert [t.name for t in tags] == ['main', 'Nav', '']
    assert [t.kind for t in tags] == [TagKind.INTRINSIC, TagKind.CUSTOM, TagKind.FRAGMENT]
