import os

import pytest

from mariadbpp.data import Data


CONTENT = b"0123456789" * 10


def test_assign_copies_content():
    data = Data(CONTENT)
    assert len(data) == len(CONTENT)
    assert data.size == len(CONTENT)
    assert bytes(data) == CONTENT


def test_create_with_count_is_zero_filled():
    data = Data(5)
    assert bytes(data) == bytes(5)
    assert data.position == 0


def test_default_is_empty():
    data = Data()
    assert len(data) == 0
    assert data.read(10) == b""


def test_read_advances_position():
    data = Data(CONTENT)
    assert data.read(4) == CONTENT[:4]
    assert data.position == 4
    assert data.read(3) == CONTENT[4:7]


def test_read_past_end_is_truncated_then_empty():
    data = Data(b"abc")
    assert data.read(10) == b"abc"
    assert data.read(1) == b""


def test_read_all_remaining():
    data = Data(CONTENT)
    data.seek(90)
    assert data.read() == CONTENT[90:]


def test_write_overwrites_without_growing():
    data = Data(b"abcdef")
    data.seek(4)
    written = data.write(b"XYZ")
    assert written == 2
    assert bytes(data) == b"abcdXY"
    assert data.write(b"Q") == 0


def test_write_then_read_round_trip():
    data = Data(len(CONTENT))
    assert data.write(CONTENT) == len(CONTENT)
    data.seek(0)
    assert data.read() == CONTENT


def test_seek_directions():
    data = Data(CONTENT)
    assert data.seek(10) == 10
    assert data.seek(5, os.SEEK_CUR) == 15
    assert data.seek(-1, os.SEEK_END) == len(CONTENT) - 1
    assert data.read(1) == CONTENT[-1:]


def test_seek_bad_offset():
    data = Data(b"abc")
    with pytest.raises(ValueError, match="Bad seek offset"):
        data.seek(4)
    with pytest.raises(ValueError, match="Bad seek offset"):
        data.seek(-1)


def test_seek_bad_direction():
    data = Data(b"abc")
    with pytest.raises(ValueError, match="Bad seek direction"):
        data.seek(0, 99)


def test_resize_grow_keeps_prefix():
    data = Data(b"abc")
    data.resize(6)
    assert bytes(data)[:3] == b"abc"
    assert len(data) == 6


def test_resize_shrink_clamps_position():
    data = Data(CONTENT)
    data.seek(50)
    data.resize(20)
    assert bytes(data) == CONTENT[:20]
    assert data.position == 20


def test_destroy_empties():
    data = Data(CONTENT)
    data.read(3)
    data.destroy()
    assert len(data) == 0
    assert data.position == 0


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        Data(-1)
    with pytest.raises(ValueError):
        Data(b"x").resize(-1)


def test_equality_with_bytes():
    assert Data(b"abc") == b"abc"
    assert Data(b"abc") == Data(b"abc")
    assert not Data(b"abc") == Data(b"abd")