import json

import pytest

from zcompiler.syntax import Annotation, ChildLine, Element, KeyValue


def test_defaults_are_independent_lists():
    first = Element("A")
    second = Element("B")
    first.children.append(Element("C"))
    assert second.children == []
    assert first.annotations == []


def test_to_dict_of_empty_element():
    element = Element("Program")
    assert element.to_dict() == {"name": "Program", "annotations": [], "children": []}


def test_to_dict_tags_child_nodes_with_kind():
    tree = Element(
        "Program",
        annotations=[Annotation("entry")],
        children=[
            Element("next:Site"),
            ChildLine(id="Header", modifier="optional"),
            KeyValue(key="title", value="Home"),
        ],
    )
    data = tree.to_dict()
    assert "kind" not in data
    assert data["annotations"] == [{"name": "entry"}]
    assert [child["kind"] for child in data["children"]] == ["Element", "ChildLine", "KeyValue"]
    assert data["children"][0]["name"] == "next:Site"
    assert data["children"][1] == {"kind": "ChildLine", "modifier": "optional", "id": "Header"}
    assert data["children"][2] == {"kind": "KeyValue", "key": "title", "value": "Home"}


def test_to_dict_is_json_serialisable_and_nested():
    tree = Element("Program", children=[Element("outer", children=[Element("inner")])])
    decoded = json.loads(json.dumps(tree.to_dict()))
    assert decoded["children"][0]["children"][0]["name"] == "inner"
    assert decoded["children"][0]["children"][0]["kind"] == "Element"


def test_child_line_modifier_defaults_to_none():
    tree = Element("Program", children=[ChildLine(id="Footer")])
    assert tree.to_dict()["children"][0]["modifier"] is None


def test_elements_filters_non_element_children():
    a = Element("a")
    b = Element("b")
    tree = Element("Program", children=[a, KeyValue("k", "v"), ChildLine("x"), b])
    assert list(tree.elements()) == [a, b]


def test_to_dict_rejects_foreign_children():
    tree = Element("Program", children=["not a node"])  # type: ignore[list-item]
    with pytest.raises(TypeError):
        tree.to_dict()