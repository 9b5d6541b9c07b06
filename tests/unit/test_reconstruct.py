"""Schema-driven reconstruction from XML elements."""

from __future__ import annotations

import pytest
from lxml import etree
from pydantic import ValidationError

from federation.errors import PayloadErrorCode, SchemaCycleError
from federation.reconstruct import populate_entity
from tests.unit.fixtures import (
    DefaultEntity,
    GuidEntity,
    NestedEntity,
    OtherEntity,
    SampleEntity,
    TreeNode,
)


def _element(xml: str) -> etree._Element:
    return etree.fromstring(xml)


def test_populates_scalars() -> None:
    entity = populate_entity(SampleEntity, _element("<sample_entity><test>hi</test></sample_entity>"))
    assert entity == SampleEntity(test="hi")


def test_takes_first_matching_scalar() -> None:
    element = _element("<sample_entity><test>one</test><test>two</test></sample_entity>")
    assert populate_entity(SampleEntity, element).test == "one"


def test_scalar_text_includes_descendant_text() -> None:
    element = _element("<sample_entity><test>a<b>c</b>d</test></sample_entity>")
    assert populate_entity(SampleEntity, element).test == "acd"


def test_empty_scalar_element_yields_empty_string() -> None:
    element = _element("<default_entity><test1/></default_entity>")
    assert populate_entity(DefaultEntity, element).test1 == ""


def test_missing_scalar_is_omitted() -> None:
    """Absent scalars are left out, so the constructor default applies."""
    entity = populate_entity(DefaultEntity, _element("<default_entity/>"))
    assert entity.test1 is None
    assert entity.test2 == "default"


def test_missing_nested_entity_is_omitted() -> None:
    entity = populate_entity(NestedEntity, _element("<nested_entity><asdf>x</asdf></nested_entity>"))
    assert entity.test is None
    assert "test" not in entity.model_fields_set


def test_missing_entity_list_is_empty_not_omitted() -> None:
    entity = populate_entity(NestedEntity, _element("<nested_entity><asdf>x</asdf></nested_entity>"))
    assert entity.multi == []
    assert "multi" in entity.model_fields_set


def test_nested_entities_in_document_order() -> None:
    element = _element(
        "<nested_entity>"
        "<asdf>QWERT</asdf>"
        "<other_entity><asdf>first</asdf></other_entity>"
        "<sample_entity><test>inner</test></sample_entity>"
        "<other_entity><asdf>second</asdf></other_entity>"
        "</nested_entity>"
    )
    entity = populate_entity(NestedEntity, element)
    assert entity.test == SampleEntity(test="inner")
    assert entity.multi == [OtherEntity(asdf="first"), OtherEntity(asdf="second")]


def test_nested_lookup_uses_wire_tag_not_property_name() -> None:
    """<test> holds a scalar name, not the nested sample_entity element."""
    element = _element("<nested_entity><asdf>x</asdf><test><test>no</test></test></nested_entity>")
    assert populate_entity(NestedEntity, element).test is None


def test_only_direct_children_are_matched() -> None:
    element = _element("<sample_entity><wrap><test>deep</test></wrap></sample_entity>")
    with pytest.raises(ValidationError):
        populate_entity(SampleEntity, element)


def test_unknown_children_are_ignored() -> None:
    element = _element("<sample_entity><test>x</test><noise>y</noise></sample_entity>")
    assert populate_entity(SampleEntity, element) == SampleEntity(test="x")


def test_constructor_rejection_propagates() -> None:
    """Missing required properties surface as the constructor's own error."""
    with pytest.raises(ValidationError, match="asdf"):
        populate_entity(OtherEntity, _element("<other_entity/>"))


def test_field_rule_rejection_propagates() -> None:
    with pytest.raises(ValidationError, match="guid"):
        populate_entity(GuidEntity, _element("<guid_entity><guid>nope</guid></guid_entity>"))


def _tree(depth: int) -> str:
    xml = "<tree_node><label>leaf</label></tree_node>"
    for level in range(depth):
        xml = f"<tree_node><label>n{level}</label>{xml}</tree_node>"
    return xml


def test_recursive_type_within_depth() -> None:
    root = populate_entity(TreeNode, _element(_tree(3)), max_depth=3)
    assert root.label == "n2"
    assert root.children[0].children[0].children[0].label == "leaf"


def test_recursive_type_beyond_depth_raises() -> None:
    with pytest.raises(SchemaCycleError, match="max depth 3") as exc_info:
        populate_entity(TreeNode, _element(_tree(4)), max_depth=3)
    assert exc_info.value.code is PayloadErrorCode.SCHEMA_CYCLE
    assert exc_info.value.data["max_depth"] == 3
