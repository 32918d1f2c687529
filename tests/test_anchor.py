import pytest

from quadrachrome import AnchorPoint
from quadrachrome.anchor import as_anchor, as_anchors


def test_anchor_normalizes_inputs():
    """Position and color inputs are normalized on construction."""
    anchor = AnchorPoint([0.1, 0.9], 0xFF00FF)
    assert anchor.position == (0.1, 0.9)
    assert anchor.color == (1.0, 0.0, 1.0)
    assert anchor.hex == 0xFF00FF


def test_anchor_is_immutable():
    """Anchors reject attribute assignment after construction."""
    anchor = AnchorPoint((0.5, 0.5), (0.2, 0.4, 0.6))
    with pytest.raises(AttributeError):
        anchor._position = (0.0, 0.0)
    with pytest.raises(AttributeError):
        anchor.extra = 1


def test_anchor_equality_and_hash():
    a = AnchorPoint((0.2, 0.2), 0xFFFF00)
    b = AnchorPoint((0.2, 0.2), (1.0, 1.0, 0.0))
    assert a == b
    assert hash(a) == hash(b)
    assert a != AnchorPoint((0.2, 0.3), 0xFFFF00)
    assert len({a, b}) == 1


def test_with_position_and_color_return_copies():
    a = AnchorPoint((0.2, 0.2), 0xFFFF00)
    moved = a.with_position((0.3, 0.4))
    recolored = a.with_color("#0000ff")
    assert moved.position == (0.3, 0.4) and moved.color == a.color
    assert recolored.color == (0.0, 0.0, 1.0) and recolored.position == a.position
    assert a.position == (0.2, 0.2)


def test_as_anchor_accepts_pairs():
    anchor = AnchorPoint((0.1, 0.1), 0x00FF00)
    assert as_anchor(anchor) is anchor
    assert as_anchor(((0.1, 0.1), 0x00FF00)) == anchor
    assert as_anchors([anchor, ((0.1, 0.1), 0x00FF00)]) == (anchor, anchor)
    with pytest.raises(TypeError):
        as_anchor((0.1, 0.1, 0x00FF00))
