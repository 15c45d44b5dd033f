import pytest

from aocsolve.day05 import (
    count_fresh,
    count_fresh_ids,
    main,
    merge_ranges,
    overlaps,
    parse_database,
)

EXAMPLE = """\
3-5
10-14
16-20
12-18

1
5
8
11
17
32
"""

EXAMPLE_RANGES = [(3, 5), (10, 14), (16, 20), (12, 18)]
EXAMPLE_IDS = [1, 5, 8, 11, 17, 32]


def test_parse_database_example():
    assert parse_database(EXAMPLE) == (EXAMPLE_RANGES, EXAMPLE_IDS)


def test_parse_database_trims_lines():
    assert parse_database("  1-2  \n\n  7 \n") == ([(1, 2)], [7])


def test_parse_database_without_ids():
    assert parse_database("1-2\n4-6\n") == ([(1, 2), (4, 6)], [])


def test_parse_database_rejects_range_without_dash():
    with pytest.raises(ValueError):
        parse_database("15\n")


def test_parse_database_rejects_bad_number():
    with pytest.raises(ValueError):
        parse_database("1x-3\n")


def test_parse_database_rejects_bad_id():
    with pytest.raises(ValueError):
        parse_database("1-3\n\nabc\n")


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((1, 3), (3, 5), True),
        ((1, 2), (3, 4), False),
        ((2, 8), (4, 5), True),
        ((10, 20), (1, 9), False),
    ],
)
def test_overlaps(a, b, expected):
    assert overlaps(a, b) is expected
    assert overlaps(b, a) is expected


def test_merge_ranges_example():
    assert sorted(merge_ranges(EXAMPLE_RANGES)) == [(3, 5), (10, 20)]


def test_merge_ranges_keeps_disjoint_ranges():
    ranges = [(1, 2), (3, 4), (10, 12)]
    assert merge_ranges(ranges) == ranges


def test_merge_ranges_result_is_disjoint_and_covers_same_values():
    ranges = [(5, 9), (1, 3), (8, 12), (2, 4), (20, 25), (13, 13), (0, 30)]
    merged = merge_ranges(ranges)
    for i, a in enumerate(merged):
        for b in merged[i + 1 :]:
            assert not overlaps(a, b)
    covered = {v for lo, hi in ranges for v in range(lo, hi + 1)}
    assert {v for lo, hi in merged for v in range(lo, hi + 1)} == covered


def test_count_fresh_example():
    assert count_fresh(EXAMPLE_RANGES, EXAMPLE_IDS) == 3


def test_count_fresh_counts_duplicate_ids():
    ids = [2, 2, 4]
    assert count_fresh([(1, 5), (3, 4)], ids) == len(ids)


def test_count_fresh_matches_membership():
    ranges = [(1, 4), (3, 8), (12, 14)]
    ids = list(range(0, 16))
    inside = [i for i in ids if any(lo <= i <= hi for lo, hi in ranges)]
    assert count_fresh(ranges, ids) == len(inside)


def test_count_fresh_ids_example():
    assert count_fresh_ids(EXAMPLE_RANGES) == 14


def test_count_fresh_ids_matches_union_size():
    ranges = [(5, 9), (1, 3), (8, 12), (2, 4), (20, 25), (13, 13)]
    union = {v for lo, hi in ranges for v in range(lo, hi + 1)}
    assert count_fresh_ids(ranges) == len(union)


def test_count_fresh_ids_rejects_reversed_range():
    with pytest.raises(ValueError):
        count_fresh_ids([(9, 2)])


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == ["3", "14"]