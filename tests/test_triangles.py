import pytest

from bunnyhq.triangles import (
    count_valid_triangles,
    is_valid_triangle,
    main,
    read_triangles,
)

EXAMPLE_01 = (
    "  330  143  338\n"
    "  769  547   83\n"
    "  930  625  317\n"
    "  669  866  147\n"
    "   15  881  210\n"
)
EXAMPLE_02 = (
    "101 301 501\n"
    "102 302 502\n"
    "103 303 503\n"
    "201 401 601\n"
    "202 402 602\n"
    "203 403 603\n"
)


@pytest.fixture
def example_01(tmp_path):
    path = tmp_path / "example_01.txt"
    path.write_text(EXAMPLE_01)
    return path


@pytest.fixture
def example_02(tmp_path):
    path = tmp_path / "example_02.txt"
    path.write_text(EXAMPLE_02)
    return path


def test_read_triangles_01(example_01):
    assert read_triangles(example_01, False) == [
        (330, 143, 338),
        (769, 547, 83),
        (930, 625, 317),
        (669, 866, 147),
        (15, 881, 210),
    ]


def test_read_triangles_02(example_02):
    assert read_triangles(example_02, False) == [
        (101, 301, 501),
        (102, 302, 502),
        (103, 303, 503),
        (201, 401, 601),
        (202, 402, 602),
        (203, 403, 603),
    ]


def test_read_triangles_03(example_02):
    assert read_triangles(example_02, True) == [
        (101, 102, 103),
        (301, 302, 303),
        (501, 502, 503),
        (201, 202, 203),
        (401, 402, 403),
        (601, 602, 603),
    ]


def test_vertical_needs_multiple_of_three(example_01):
    assert read_triangles(example_01, True) == read_triangles(example_01, False)


def test_unmatched_lines_are_skipped(tmp_path):
    path = tmp_path / "noisy.txt"
    path.write_text("header\n 3 4 5\n")
    assert read_triangles(path) == [(3, 4, 5)]


@pytest.mark.parametrize(
    "triangle, expected",
    [
        ((330, 143, 338), True),
        ((769, 547, 83), False),
        ((930, 625, 317), True),
        ((669, 866, 147), False),
        ((15, 881, 210), False),
        ((5, 10, 25), False),
    ],
)
def test_is_valid_triangle(triangle, expected):
    assert is_valid_triangle(triangle) is expected


def test_count_valid_triangles_01(example_01):
    assert count_valid_triangles(read_triangles(example_01, False)) == 2


def test_count_valid_triangles_02(example_02):
    assert count_valid_triangles(read_triangles(example_02, False)) == 3


def test_main(example_01, capsys):
    main([str(example_01)])
    assert capsys.readouterr().out == "Part 1 = 2\nPart 2 = 2\n"