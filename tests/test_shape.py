import pytest

from srordle.models.shape import Row, Shape, default_shape

T, F = True, False


def test_segment_lengths_per_default_row() -> None:
    want = [[7], [4, 2], [3, 3], [2, 4], [3], [5]]
    assert [row.segment_lengths() for row in default_shape()] == want


def test_segment_start_offsets_per_default_row() -> None:
    want = [[0], [0, 5], [0, 4], [0, 3], [2], [1]]
    assert [row.segment_start_offsets() for row in default_shape()] == want


def test_split_guess_per_default_row() -> None:
    guesses = ["detract", "testin", "catdog", "onstop", "pet", "guess"]
    want = [["detract"], ["test", "in"], ["cat", "dog"], ["on", "stop"], ["pet"], ["guess"]]
    for row, guess, expected in zip(default_shape(), guesses, want):
        words, ok = row.split_guess(guess)
        assert ok, guess
        assert words == expected


def test_split_row_with_gap() -> None:
    row = Row([T, T, T, T, F, T, T])
    assert row.segment_lengths() == [4, 2]
    assert row.segment_start_offsets() == [0, 5]
    assert row.split_guess("testin") == (["test", "in"], True)


def test_all_false_row() -> None:
    row = Row([F] * 7)
    assert row.segment_lengths() == []
    assert row.segment_start_offsets() == []
    assert row.split_guess("") == ([], True)


def test_split_guess_too_short_fails() -> None:
    words, ok = Row.full(7).split_guess("telling"[:6])
    assert ok is False
    assert words == []


def test_split_guess_ignores_trailing_characters_by_default() -> None:
    row = Row([T, T, T, F, T, T, T])
    assert row.split_guess("catdogs") == (["cat", "dog"], True)


def test_split_guess_exact_rejects_trailing_characters() -> None:
    row = Row([T, T, T, F, T, T, T])
    assert row.split_guess("catdogs", exact=True) == ([], False)
    assert row.split_guess("catdog", exact=True) == (["cat", "dog"], True)


def test_rows_are_immutable_values() -> None:
    row = Row([T, F, T])
    assert row == Row((True, False, True))
    assert hash(row) == hash(Row([T, F, T]))
    with pytest.raises(AttributeError):
        row.slots = (F,)


def test_shape_rejects_mixed_widths() -> None:
    with pytest.raises(ValueError):
        Shape([[T, T, T], [T, T]])


def test_shape_round_trips_through_lists() -> None:
    shape = default_shape()
    assert Shape(shape.to_list()) == shape
    assert shape.width == 7
    assert len(shape) == 6
