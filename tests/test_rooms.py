import pytest

from bunnyhq.rooms import (
    Room,
    find_north_pole_room,
    main,
    read_rooms,
    sum_real_rooms,
)

EXAMPLE_01 = (
    "aaaaa-bbb-z-y-x-123[abxyz]\n"
    "a-b-c-d-e-f-g-h-987[abcde]\n"
    "not-a-real-room-404[oarel]\n"
    "totally-real-room-200[decoy]\n"
)

EXAMPLE_ROOMS = [
    Room("aaaaa-bbb-z-y-x", 123, "abxyz"),
    Room("a-b-c-d-e-f-g-h", 987, "abcde"),
    Room("not-a-real-room", 404, "oarel"),
    Room("totally-real-room", 200, "decoy"),
]


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "example_01.txt"
    path.write_text(EXAMPLE_01)
    return path


def test_read_exp1_rooms(example_file):
    assert read_rooms(example_file) == EXAMPLE_ROOMS


def test_read_skips_bad_lines(tmp_path):
    path = tmp_path / "rooms.txt"
    path.write_text("garbage\nabc-12[abc]\n")
    assert read_rooms(path) == [Room("abc", 12, "abc")]


@pytest.mark.parametrize(
    "room, expected",
    [
        (EXAMPLE_ROOMS[0], True),
        (EXAMPLE_ROOMS[1], True),
        (EXAMPLE_ROOMS[2], True),
        (EXAMPLE_ROOMS[3], False),
    ],
)
def test_verify_room(room, expected):
    assert room.verify() is expected


def test_verify_with_too_few_letters_is_false():
    assert Room("aa", 1, "abcde").verify() is False


def test_verify_single_letters_sorted():
    assert Room("b-a", 1, "ab").verify() is True


def test_sum_real_example_01_rooms(example_file):
    assert sum_real_rooms(read_rooms(example_file)) == 1514


def test_decrypt_name():
    room = Room("qzmt-zixmtkozy-ivhz", 343, "ivhz")
    assert room.decrypt_name() == "very encrypted name"


def test_full_rotation_is_identity():
    assert Room("north-pole", 26, "nopr").decrypt_name() == "north pole"


def test_find_north_pole_room():
    rooms = [
        Room("qzmt-zixmtkozy-ivhz", 343, "ivhz"),
        Room("northpole-object-storage", 52, "abcde"),
    ]
    assert find_north_pole_room(rooms) == 52


def test_find_north_pole_room_missing():
    with pytest.raises(LookupError):
        find_north_pole_room(EXAMPLE_ROOMS)


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE_01 + "northpole-object-storage-26[oterb]\n")
    main([str(path)])
    out = capsys.readouterr().out
    assert out.splitlines()[1] == "Part 2 = 26"