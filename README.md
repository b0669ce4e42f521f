# algokit

Plain-Python implementations of well-known algorithms on lists of integers.
It has no dependencies beyond the standard library.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

### `algokit.arrays`

- `three_sum(nums)`: every distinct triple of values that adds up to zero, each triple in ascending order
- `max_profit(prices)`: the best profit from one buy followed by one later sell, or `0`; raises `ValueError` on an empty list
- `can_ship(weights, days, capacity)`: whether the packages, taken in order, fit into `days` loads of at most `capacity`
- `ship_within_days(weights, days)`: the least capacity for which `can_ship` holds; raises `ValueError` on an empty list
- `find_kth_largest(nums, k)`: the k-th largest value, counting duplicates; raises `ValueError` unless `1 <= k <= len(nums)`
- `majority_element(nums)`: the values that occur more than `len(nums) // 3` times
- `max_sub_array(nums)`: the largest running total over the prefixes of `nums`, never less than zero
- `merge_intervals(intervals)`: overlapping `[start, end]` intervals merged, returned sorted
- `next_permutation(nums)`: rearranges the list in place into its next lexicographic permutation; the last one wraps round to ascending order
- `rotate(matrix)`: turns a square matrix a quarter turn clockwise, in place; raises `ValueError` if it is not square
- `search_rotated(nums, target)`: the index of `target` in a rotated sorted sequence, or `-1`
- `sort_colors(nums)`: sorts a list of 0s, 1s and 2s in place in one pass
- `two_sum(nums, target)`: a tuple of the indices of two values that add up to `target`, or `None`

```python
from algokit.arrays import three_sum, merge_intervals, two_sum

three_sum([-1, 0, 1, 2, -1, -4])           # [[-1, -1, 2], [-1, 0, 1]]
merge_intervals([[1, 3], [2, 6], [8, 10]])  # [[1, 6], [8, 10]]
two_sum([2, 7, 11, 15], 9)                  # (0, 1)
```

### `algokit.sorting`

`bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort` and `quick_sort`
each take an iterable of comparable values and return a new list in ascending
order; the input is left untouched. `ALGORITHMS` maps the names `bubble`,
`selection`, `insertion`, `merge` and `quick` to these functions.

```python
from algokit.sorting import quick_sort

quick_sort([10, 7, 8, 9, 1, 5])  # [1, 5, 7, 8, 9, 10]
```

### `algokit.monotonic`

`next_greater`, `next_smaller`, `previous_greater` and `previous_smaller` give,
for each position, the nearest value in that direction that is strictly greater
or smaller, or `-1` where there is none.

```python
from algokit.monotonic import next_greater, previous_smaller

next_greater([10, 4, 2, 20, 40, 12, 30])      # [20, 20, 20, 40, -1, 30, -1]
previous_smaller([10, 4, 2, 20, 40, 12, 30])  # [-1, -1, -1, 2, 20, 2, 12]
```

## Command line

`algokit-sort` reads from standard input a count followed by at least that
many integers, and prints the first `count` of them sorted. `-a/--algorithm`
picks one of `bubble` (the default), `insertion`, `merge`, `quick` or
`selection`:

    echo "4 5 3 9 1" | algokit-sort --algorithm quick

It prints its prompts, then `Sorted array: 1 3 5 9`. A missing count, a
negative count, too few numbers or a value that is not an integer ends the
command with a usage error.

`algokit-monotonic` takes the kind of neighbour to find (`next-greater`,
`next-smaller`, `previous-greater` or `previous-smaller`) and the integers to
examine; without integers it uses `10 4 2 20 40 12 30`:

    algokit-monotonic next-greater 10 4 2 20 40 12 30

This prints `20 20 20 40 -1 30 -1`.

Run either command with `--help` to see its options.