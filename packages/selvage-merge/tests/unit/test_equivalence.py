import pytest

from selvage.merge import is_equivalent
from selvage.spec import MergeConventions
from selvage.test_utils import parse_xml


@pytest.mark.parametrize(
    "original, proposed, expected",
    [
        # Identical
        ('<div id="a" x="1"/>', '<div id="a" x="1"/>', True),
        # Attribute order does not matter
        ('<div id="a" x="1" y="2"/>', '<div y="2" x="1" id="a"/>', True),
        # Tag mismatch
        ('<div id="a"/>', '<span id="a"/>', False),
        # Value mismatch
        ('<div id="a" x="1"/>', '<div id="a" x="2"/>', False),
        # Same count, different names
        ('<div id="a" x="1"/>', '<div id="a" y="1"/>', False),
        # New attribute on the proposed side
        ('<div id="a"/>', '<div id="a" x="1"/>', False),
        # Bookkeeping values may differ
        ('<div id="a" z="old" _state="1"/>', '<div id="a" z="new" _state="2"/>', True),
        # ... but still count: fingerprint missing on the proposed side
        ('<div id="a" z="old"/>', '<div id="a"/>', False),
        # ... and an extra internal attribute on either side
        ('<div id="a" _x="1"/>', '<div id="a"/>', False),
        ('<div id="a"/>', '<div id="a" _x="1"/>', False),
    ],
)
def test_equivalence(original, proposed, expected):
    assert is_equivalent(parse_xml(original), parse_xml(proposed)) is expected


def test_children_are_not_compared():
    original = parse_xml('<div id="a"><span id="b" x="1"/></div>')
    proposed = parse_xml('<div id="a"><span id="b" x="2"/><p/></div>')

    assert is_equivalent(original, proposed)


def test_custom_conventions_change_bookkeeping_names():
    conventions = MergeConventions(fingerprint_attribute="hash", internal_prefix="tmp-")
    original = parse_xml('<div id="a" hash="1" tmp-x="1"/>')
    proposed = parse_xml('<div id="a" hash="2" tmp-x="2"/>')

    assert is_equivalent(original, proposed, conventions)
    # "z" is an ordinary attribute under these conventions.
    assert not is_equivalent(
        parse_xml('<div id="a" z="1"/>'), parse_xml('<div id="a" z="2"/>'), conventions
    )
