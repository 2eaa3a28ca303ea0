import pytest

from bunnyhq.decompress import (
    Marker,
    decompressed_len,
    find_markers,
    main,
    read_compressed_data,
    rec_decomp_len,
)

EXAMPLES = [
    "ADVENT",
    "A(1x5)BC",
    "(3x3)XYZ",
    "A(2x2)BCD(2x2)EFG",
    "(6x1)(1x3)A",
    "X(8x2)(3x3)ABCY",
    "(27x12)(20x12)(13x14)(7x10)(1x12)A",
    "(25x3)(3x3)ABC(2x3)XY(5x2)PQRSTX(18x9)(3x2)TWO(5x7)SEVEN",
]


@pytest.mark.parametrize("content", EXAMPLES)
def test_read_compressed_data(tmp_path, content):
    path = tmp_path / "data.txt"
    path.write_text(content + "\n", encoding="utf-8")
    assert read_compressed_data(path) == content


@pytest.mark.parametrize(
    "data, expected",
    [
        ("ADVENT", []),
        ("A(1x5)BC", [(1, 5, 1, 5)]),
        ("(3x3)XYZ", [(0, 4, 3, 3)]),
        ("A(2x2)BCD(2x2)EFG", [(1, 5, 2, 2), (9, 13, 2, 2)]),
        ("(6x1)(1x3)A", [(0, 4, 6, 1), (5, 9, 1, 3)]),
        ("X(8x2)(3x3)ABCY", [(1, 5, 8, 2), (6, 10, 3, 3)]),
        (
            "(27x12)(20x12)(13x14)(7x10)(1x12)A",
            [(0, 6, 27, 12), (7, 13, 20, 12), (14, 20, 13, 14), (21, 26, 7, 10), (27, 32, 1, 12)],
        ),
        (
            "(25x3)(3x3)ABC(2x3)XY(5x2)PQRSTX(18x9)(3x2)TWO(5x7)SEVEN",
            [
                (0, 5, 25, 3),
                (6, 10, 3, 3),
                (14, 18, 2, 3),
                (21, 25, 5, 2),
                (32, 37, 18, 9),
                (38, 42, 3, 2),
                (46, 50, 5, 7),
            ],
        ),
    ],
)
def test_find_markers(data, expected):
    assert find_markers(data) == [Marker(*m) for m in expected]


def test_marker_reach():
    assert Marker(1, 5, 8, 2).reach == 13


def test_find_markers_nested_raises():
    with pytest.raises(ValueError, match="Nested"):
        find_markers("((1x2)A")


def test_find_markers_unmatched_raises():
    with pytest.raises(ValueError, match="Unmatched"):
        find_markers("A)B")


def test_find_markers_missing_number_raises():
    with pytest.raises(ValueError):
        find_markers("(x)A")


@pytest.mark.parametrize(
    "data, expected",
    [
        ("ADVENT", 6),
        ("A(1x5)BC", 7),
        ("(3x3)XYZ", 9),
        ("A(2x2)BCD(2x2)EFG", 11),
        ("(6x1)(1x3)A", 6),
        ("X(8x2)(3x3)ABCY", 18),
    ],
)
def test_decompressed_len(data, expected):
    assert decompressed_len(data) == expected


def test_decompressed_len_marker_past_end_raises():
    with pytest.raises(ValueError):
        decompressed_len("(5x2)AB")


def test_decompressed_len_touching_markers_raises():
    with pytest.raises(ValueError):
        decompressed_len("(1x2)(1x2)A")


@pytest.mark.parametrize(
    "data, expected",
    [
        ("(3x3)XYZ", 9),
        ("X(8x2)(3x3)ABCY", 20),
        ("(27x12)(20x12)(13x14)(7x10)(1x12)A", 241920),
        ("(25x3)(3x3)ABC(2x3)XY(5x2)PQRSTX(18x9)(3x2)TWO(5x7)SEVEN", 445),
        ("(3x3)XYZA", 10),
        ("ADVENT", 6),
    ],
)
def test_rec_decomp_len(data, expected):
    assert rec_decomp_len(data) == expected


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("X(8x2)(3x3)ABCY\n", encoding="utf-8")
    main([str(path)])
    assert capsys.readouterr().out == "Part 1 = 18\nPart 2 = 20\n"