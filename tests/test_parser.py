import pytest

from zcompiler.parser import iter_top_level_declarations, parse_source
from zcompiler.syntax import Element


def names(src):
    return [child.name for child in parse_source(src).children]


def test_root_is_program():
    tree = parse_source("")
    assert tree.name == "Program"
    assert tree.children == []


def test_blocks_become_target_name_children():
    src = "next MySite {\n}\nswift MyApp {\n}\n"
    assert names(src) == ["next:MySite", "swift:MyApp"]
    assert all(isinstance(child, Element) for child in parse_source(src).children)


def test_iter_top_level_declarations_yields_pairs():
    src = "tauri Desk {\n}\nrust Tool {}"
    assert list(iter_top_level_declarations(src)) == [("tauri", "Desk"), ("rust", "Tool")]


@pytest.mark.parametrize(
    "line",
    ["   rust Tool{", "\trust Tool   {", "rust Tool {  // comment"],
)
def test_whitespace_variations_match(line):
    assert names(line) == ["rust:Tool"]


@pytest.mark.parametrize(
    "line",
    ["Next Site {", "next {", "next My-Site {", "next Site", "// next Site {", "next2 Site {"],
)
def test_non_declarations_are_ignored(line):
    assert names(line) == []


def test_windows_line_endings():
    assert names("next A {\r\n}\r\nswift B {\r\n}\r\n") == ["next:A", "swift:B"]


def test_nested_blocks_are_also_collected():
    src = "next Site {\n  routes Main {\n  }\n}\n"
    assert names(src) == ["next:Site", "routes:Main"]


def test_children_have_no_nested_content():
    tree = parse_source("next Site {\n  title: hello\n}\n")
    (child,) = tree.children
    assert child.children == []
    assert child.annotations == []