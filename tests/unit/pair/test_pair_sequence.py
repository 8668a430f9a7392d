from typing import Any

import pytest

from unpair import FormatError, UnorderedPair


def test_to_sequence_keeps_construction_order() -> None:
    assert UnorderedPair("a", "b").to_sequence() == ["a", "b"]
    assert UnorderedPair("b", "a").to_sequence() == ["b", "a"]


def test_from_sequence_round_trip() -> None:
    pair = UnorderedPair(4, 2)
    restored = UnorderedPair.from_sequence(pair.to_sequence())
    assert restored == pair
    assert restored.to_tuple() == (4, 2)


def test_from_sequence_in_either_order_is_equal() -> None:
    assert UnorderedPair.from_sequence(["a", "b"]) == UnorderedPair.from_sequence(
        ["b", "a"]
    )
    assert UnorderedPair.from_sequence(["b", "a"]) == UnorderedPair("a", "b")


def test_from_sequence_accepts_tuples() -> None:
    assert UnorderedPair.from_sequence((1, 2)).to_tuple() == (1, 2)


@pytest.mark.parametrize("data", [[], ["x"], ["x", "y", "z"]])
def test_from_sequence_wrong_element_count(data: list) -> None:
    with pytest.raises(FormatError) as exc_info:
        UnorderedPair.from_sequence(data)
    assert exc_info.value.position is None
    assert f"got {len(data)} elements" in str(exc_info.value)


@pytest.mark.parametrize("data", ["ab", b"ab", {"a": 1, "b": 2}, 12, None])
def test_from_sequence_rejects_non_sequences(data: Any) -> None:
    with pytest.raises(FormatError) as exc_info:
        UnorderedPair.from_sequence(data)
    assert type(data).__name__ in str(exc_info.value)


def test_from_sequence_checks_element_type() -> None:
    assert UnorderedPair.from_sequence([1, 2], element_type=int) == UnorderedPair(2, 1)
    with pytest.raises(FormatError) as exc_info:
        UnorderedPair.from_sequence([1, "2"], element_type=int)
    assert exc_info.value.position == 1
    assert "expected int, got str" in str(exc_info.value)


def test_from_sequence_rejects_bools_as_ints() -> None:
    with pytest.raises(FormatError) as exc_info:
        UnorderedPair.from_sequence([1, True], element_type=int)
    assert exc_info.value.position == 1
    assert "expected int, got bool" in str(exc_info.value)
    assert UnorderedPair.from_sequence([True, False], element_type=bool).to_tuple() == (
        True,
        False,
    )


def test_from_sequence_applies_decoder() -> None:
    pair = UnorderedPair.from_sequence(["1", "2"], decoder=int)
    assert pair.to_tuple() == (1, 2)


def test_from_sequence_wraps_decoder_errors() -> None:
    with pytest.raises(FormatError) as exc_info:
        UnorderedPair.from_sequence(["nope", "2"], decoder=int)
    assert exc_info.value.position == 0
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_from_sequence_checks_decoder_output() -> None:
    with pytest.raises(FormatError) as exc_info:
        UnorderedPair.from_sequence(["1", "2"], element_type=int, decoder=str.strip)
    assert exc_info.value.position == 0


def test_from_sequence_with_nested_pairs() -> None:
    pair = UnorderedPair.from_sequence(
        [[1, 2], [3, 4]], decoder=UnorderedPair.from_sequence
    )
    assert pair == UnorderedPair(UnorderedPair(4, 3), UnorderedPair(2, 1))


def test_from_sequence_reports_position_of_nested_failure() -> None:
    with pytest.raises(FormatError) as exc_info:
        UnorderedPair.from_sequence([[1, 2], [3]], decoder=UnorderedPair.from_sequence)
    assert exc_info.value.position == 1
    assert isinstance(exc_info.value.__cause__, FormatError)
