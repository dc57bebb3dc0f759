import pytest

from statekit.register import (
    CAPACITY,
    MAX_REG,
    Register,
    offset,
    register_with_all_closed,
)


@pytest.mark.parametrize(
    "index, want_word, want_bit",
    [
        (0, 0, 0),
        (1, 0, 1),
        (2, 0, 2),
        (63, 0, 63),
        (64, 1, 0),
        (65, 1, 1),
        (3000, 46, 56),
        (4095, 63, 63),
        (4096, 64, 0),
    ],
)
def test_offset(index, want_word, want_bit):
    assert offset(index) == (want_word, want_bit)


def test_offset_overflow():
    with pytest.raises(OverflowError):
        offset(4097)


def test_offset_negative():
    with pytest.raises(ValueError):
        offset(-1)


def test_max_index_cannot_be_stored():
    r = Register()
    with pytest.raises(IndexError):
        r.close(MAX_REG)
    assert r == Register()


def test_failed_close_leaves_register_unchanged():
    r = Register()
    with pytest.raises(OverflowError):
        r.close(1, 2, 4097)
    assert r == Register()


@pytest.mark.parametrize(
    "indices, check, want",
    [
        ((), (), True),
        ((1, 2, 3, 4, 5), (1, 2, 3, 4, 5), True),
        ((1, 2, 3, 4, 5), (1, 2, 3, 4, 5, 6), False),
    ],
)
def test_close_and_all_closed(indices, check, want):
    r = Register()
    r.close(*indices)
    assert r.all_closed(*check) is want


@pytest.mark.parametrize(
    "indices, check, want",
    [
        ((), (), True),
        ((1, 2, 3, 4, 5), (1, 2, 3, 4, 5), True),
        ((1, 2, 3, 4, 5), (1, 2, 3, 4, 5, 6), False),
    ],
)
def test_open_and_all_opened(indices, check, want):
    r = register_with_all_closed()
    r.open(*indices)
    assert r.all_opened(*check) is want


@pytest.mark.parametrize(
    "indices, check, want",
    [
        ((), (), False),
        ((1, 2, 3, 4, 5), (5, 6, 7, 8, 9), True),
        ((1, 2, 3, 4, 5), (6, 7, 8, 9), False),
    ],
)
def test_any_closed(indices, check, want):
    r = Register()
    r.close(*indices)
    assert r.any_closed(*check) is want


@pytest.mark.parametrize(
    "indices, check, want",
    [
        ((), (), False),
        ((1, 2, 3, 4, 5), (5, 6, 7, 8, 9), True),
        ((1, 2, 3, 4, 5), (6, 7, 8, 9), False),
    ],
)
def test_any_opened(indices, check, want):
    r = register_with_all_closed()
    r.open(*indices)
    assert r.any_opened(*check) is want


def _closed(*indices):
    r = Register()
    r.close(*indices)
    return r


def _opened(*indices):
    r = register_with_all_closed()
    r.open(*indices)
    return r


NINE = (1, 2, 3, 4, 5, 6, 7, 8, 9)


@pytest.mark.parametrize(
    "start, indices, want_closed, want_opened, want",
    [
        (Register, (), [], [], Register),
        (Register, (1,), [1], [], lambda: _closed(1)),
        (Register, NINE, list(NINE), [], lambda: _closed(*NINE)),
        (register_with_all_closed, (1,), [], [1], lambda: _opened(1)),
        (register_with_all_closed, NINE, [], list(NINE), lambda: _opened(*NINE)),
        (
            lambda: _closed(2, 4, 6, 8),
            NINE,
            [1, 3, 5, 7, 9],
            [2, 4, 6, 8],
            lambda: _closed(1, 3, 5, 7, 9),
        ),
        (
            lambda: _opened(2, 4, 6, 8),
            NINE,
            [2, 4, 6, 8],
            [1, 3, 5, 7, 9],
            lambda: _opened(1, 3, 5, 7, 9),
        ),
    ],
    ids=[
        "none",
        "one closed",
        "several closed",
        "one opened",
        "several opened",
        "mixed bag 1",
        "mixed bag 2",
    ],
)
def test_toggle(start, indices, want_closed, want_opened, want):
    r = start()
    closed, opened = r.toggle(*indices)
    assert r == want()
    assert closed == want_closed
    assert opened == want_opened


def test_close_reports_only_changes_in_order():
    r = Register()
    assert r.close(2, 1, 2, 3, 2, 3, 7, 1) == [2, 1, 3, 7]
    assert r.close(1, 2, 3) == []


def test_open_reports_only_changes_in_order():
    r = register_with_all_closed()
    assert r.open(9, 8, 9, 4) == [9, 8, 4]
    assert r.open(4) == []


def test_copy_is_independent():
    r = _closed(10)
    c = r.copy()
    c.close(11)
    assert r.is_opened(11)
    assert c.is_closed(11)
    assert c != r


def test_all_closed_register_words():
    r = register_with_all_closed()
    assert r.words == tuple([0xFFFFFFFFFFFFFFFF] * CAPACITY)
    assert r.all_closed(0, 4095)


def test_rejects_wrong_word_count():
    with pytest.raises(ValueError):
        Register([0] * 3)


def test_high_index_sets_top_bit():
    r = _closed(4095)
    assert r.words[63] == 1 << 63
    assert r.is_closed(4095)