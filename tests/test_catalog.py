import pytest

from alacycle.core.errors import MalformedDocument
from alacycle.cycling.catalog import AnchorCatalog, extract_anchors


def test_anchors_in_declaration_order(sample_config):
    assert extract_anchors(sample_config) == ["gruvbox", "solarized", "nord"]


def test_aliases_are_not_declarations():
    text = "base: &base {a: 1}\nother: *base\nlast: &last 2\n"
    assert extract_anchors(text) == ["base", "last"]


def test_scalar_sequence_and_mapping_anchors():
    text = (
        "seq: &seq\n"
        "  - 1\n"
        "map: &map\n"
        "  k: v\n"
        "scalar: &scalar value\n"
    )
    assert extract_anchors(text) == ["seq", "map", "scalar"]


def test_nested_anchors_follow_parse_order():
    """Anchors inside an anchored node come after their parent."""
    text = (
        "outer: &outer\n"
        "  inner: &inner\n"
        "    x: 1\n"
        "after: &after 3\n"
    )
    assert extract_anchors(text) == ["outer", "inner", "after"]


def test_duplicate_declarations_are_kept():
    text = "a: &dup 1\nb: &other 2\nc: &dup 3\n"
    assert extract_anchors(text) == ["dup", "other", "dup"]


def test_no_anchors_yields_empty_list():
    assert extract_anchors("colors: {}\nfont:\n  size: 10\n") == []
    assert extract_anchors("") == []


def test_malformed_document_raises():
    with pytest.raises(MalformedDocument) as exc_info:
        extract_anchors("key: value: broken\n")
    # Parser's message is carried unchanged
    assert "mapping values are not allowed" in str(exc_info.value)
    assert exc_info.value.__cause__ is not None


def test_extraction_is_deterministic(sample_config):
    assert extract_anchors(sample_config) == extract_anchors(sample_config)


def test_catalog_view(sample_config):
    catalog = AnchorCatalog.from_text(sample_config)
    assert len(catalog) == 3
    assert list(catalog) == ["gruvbox", "solarized", "nord"]
    assert "nord" in catalog
    assert "ghost" not in catalog
    assert catalog.position("solarized") == 1
    assert catalog.position("ghost") == -1


def test_position_uses_first_declaration():
    catalog = AnchorCatalog(["dup", "other", "dup"])
    assert catalog.position("dup") == 0
    assert catalog.position("other") == 1
