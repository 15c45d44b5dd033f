import math

import pytest

from aocsolve.day06 import (
    main,
    parse_worksheet,
    parse_worksheet_columns,
    solve_columns,
    solve_rows,
)

EXAMPLE = (
    "\n".join(
        [
            "123 328  51 64 ",
            " 45 64  387 23 ",
            "  6 98  215 314",
            "*   +   *   +  ",
        ]
    )
    + "\n"
)


def test_parse_worksheet_example():
    matrix, operations = parse_worksheet(EXAMPLE)
    assert matrix == [[123, 328, 51, 64], [45, 64, 387, 23], [6, 98, 215, 314]]
    assert operations == ["*", "+", "*", "+"]


def test_parse_worksheet_skips_bad_tokens():
    matrix, operations = parse_worksheet("1 x 2\n+ ** *\n")
    assert matrix == [[1, 2]]
    assert operations == ["+", "*"]


def test_parse_worksheet_rejects_empty():
    with pytest.raises(ValueError):
        parse_worksheet("")


def test_parse_worksheet_columns_example():
    matrix, operations = parse_worksheet_columns(EXAMPLE)
    assert matrix == [
        ["123", "328", " 51", "64 "],
        [" 45", "64 ", "387", "23 "],
        ["  6", "98 ", "215", "314"],
    ]
    assert operations == ["*", "+", "*", "+"]


def test_parse_worksheet_columns_fields_align():
    matrix, operations = parse_worksheet_columns(EXAMPLE)
    for i in range(len(operations)):
        assert len({len(row[i]) for row in matrix}) == 1


def test_parse_worksheet_columns_rejects_short_line():
    with pytest.raises(ValueError):
        parse_worksheet_columns("1\n*   +   *\n")


def test_parse_worksheet_columns_rejects_empty():
    with pytest.raises(ValueError):
        parse_worksheet_columns("")


def test_solve_rows_example():
    assert solve_rows(*parse_worksheet(EXAMPLE)) == 4277556


def test_solve_rows_single_column():
    values = [7, 11, 13]
    matrix = [[v] for v in values]
    assert solve_rows(matrix, ["+"]) == sum(values)
    assert solve_rows(matrix, ["*"]) == math.prod(values)


def test_solve_rows_unknown_operator_contributes_nothing():
    assert solve_rows([[2], [3]], ["-"]) == 0


def test_solve_columns_example():
    assert solve_columns(*parse_worksheet_columns(EXAMPLE)) == 3263827


def test_solve_columns_single_row_reads_digits_right_to_left():
    matrix = [["12"]]
    assert solve_columns(matrix, ["+"]) == int("2") + int("1")
    assert solve_columns(matrix, ["*"]) == int("2") * int("1")


def test_solve_columns_stacked_digits_form_one_number():
    matrix = [["4"], ["5"], ["6"]]
    assert solve_columns(matrix, ["+"]) == int("456")


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == ["4277556", "3263827"]