import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.monotonic import (
    main,
    next_greater,
    next_smaller,
    previous_greater,
    previous_smaller,
)

EXAMPLE = [10, 4, 2, 20, 40, 12, 30]

positive_lists = st.lists(st.integers(min_value=0, max_value=100), max_size=40)


def test_next_greater_example():
    assert next_greater(EXAMPLE) == [20, 20, 20, 40, -1, 30, -1]


@pytest.mark.parametrize(
    "func", [next_greater, next_smaller, previous_greater, previous_smaller]
)
def test_empty_input(func):
    assert func([]) == []


@pytest.mark.parametrize("func", [next_greater, next_smaller])
def test_last_has_no_next(func):
    assert func(EXAMPLE)[-1] == -1


@pytest.mark.parametrize("func", [previous_greater, previous_smaller])
def test_first_has_no_previous(func):
    assert func(EXAMPLE)[0] == -1


@given(positive_lists)
def test_next_greater_invariant(values):
    result = next_greater(values)
    assert len(result) == len(values)
    for i, found in enumerate(result):
        later = values[i + 1:]
        if found == -1:
            assert all(v <= values[i] for v in later)
        else:
            assert found > values[i]
            first = next(v for v in later if v > values[i])
            assert found == first


@given(positive_lists)
def test_next_smaller_invariant(values):
    result = next_smaller(values)
    assert len(result) == len(values)
    for i, found in enumerate(result):
        later = values[i + 1:]
        if found == -1:
            assert all(v >= values[i] for v in later)
        else:
            assert found < values[i]
            assert found == next(v for v in later if v < values[i])


@given(positive_lists)
def test_previous_greater_is_mirror_of_next_greater(values):
    assert previous_greater(values) == list(reversed(next_greater(reversed(values))))


@given(positive_lists)
def test_previous_smaller_is_mirror_of_next_smaller(values):
    assert previous_smaller(values) == list(reversed(next_smaller(reversed(values))))


@given(positive_lists)
def test_strictly_increasing_has_next_greater_as_successor(values):
    increasing = sorted(set(values))
    assert next_greater(increasing) == increasing[1:] + [-1] if increasing else True
    assert next_smaller(increasing) == [-1] * len(increasing)


def test_equal_values_are_not_greater():
    assert next_greater([5, 5, 5]) == [-1, -1, -1]
    assert previous_smaller([5, 5, 5]) == [-1, -1, -1]


def test_main_default_example(capsys):
    assert main(["next-greater"]) == 0
    out = capsys.readouterr().out.strip()
    assert out == " ".join(str(v) for v in next_greater(EXAMPLE))


@pytest.mark.parametrize(
    "kind,func",
    [
        ("next-greater", next_greater),
        ("next-smaller", next_smaller),
        ("previous-greater", previous_greater),
        ("previous-smaller", previous_smaller),
    ],
)
def test_main_with_values(capsys, kind, func):
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    main([kind, *map(str, values)])
    out = capsys.readouterr().out.strip()
    assert out == " ".join(str(v) for v in func(values))


def test_main_rejects_unknown_kind():
    with pytest.raises(SystemExit) as info:
        main(["sideways"])
    assert info.value.code == 2