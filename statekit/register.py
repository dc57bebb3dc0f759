"""A fixed-size bit register tracking open/closed states for up to 4096 indices."""

from __future__ import annotations

from collections.abc import Iterable

CAPACITY = 64
WORD_SIZE = 64
MAX_REG = CAPACITY * WORD_SIZE

_FULL_WORD = (1 << WORD_SIZE) - 1


def offset(index: int) -> tuple[int, int]:
    """Return the word index and the bit offset within that word for ``index``."""
    if index < 0:
        raise ValueError(f"state index must not be negative: {index}")
    if index > MAX_REG:
        raise OverflowError(
            f"state: overflow - a single switchboard can hold no more than {MAX_REG} indices"
        )
    return divmod(index, WORD_SIZE)


def register_with_all_closed() -> Register:
    """Return a register in which every state is closed."""
    return Register([_FULL_WORD] * CAPACITY)


class Register:
    """Open/closed flags packed into 64 words of 64 bits; a set bit means closed."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[int] | None = None) -> None:
        if words is None:
            self._words = [0] * CAPACITY
            return
        values = list(words)
        if len(values) != CAPACITY:
            raise ValueError(f"a register holds exactly {CAPACITY} words, got {len(values)}")
        for word in values:
            if not 0 <= word <= _FULL_WORD:
                raise ValueError(f"word out of range for {WORD_SIZE} bits: {word}")
        self._words = values

    @property
    def words(self) -> tuple[int, ...]:
        """The register's words, lowest index first."""
        return tuple(self._words)

    def copy(self) -> Register:
        """Return an independent copy of this register."""
        return Register(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Register):
            return NotImplemented
        return self._words == other._words

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        closed = sum(bin(word).count("1") for word in self._words)
        return f"Register(closed={closed})"

    @staticmethod
    def _locate(index: int) -> tuple[int, int]:
        word, bit = offset(index)
        if word >= CAPACITY:
            raise IndexError(f"state index out of range: {index}")
        return word, 1 << bit

    def _locate_all(self, indices: Iterable[int]) -> list[tuple[int, int, int]]:
        return [(index, *self._locate(index)) for index in indices]

    def close(self, *indices: int) -> list[int]:
        """Close the given indices; return those that were open before, in order."""
        changed = []
        for index, word, mask in self._locate_all(indices):
            if not self._words[word] & mask:
                changed.append(index)
            self._words[word] |= mask
        return changed

    def open(self, *indices: int) -> list[int]:
        """Open the given indices; return those that were closed before, in order."""
        changed = []
        for index, word, mask in self._locate_all(indices):
            if self._words[word] & mask:
                changed.append(index)
            self._words[word] &= ~mask
        return changed

    def toggle(self, *indices: int) -> tuple[list[int], list[int]]:
        """Flip the given indices; return the lists of newly closed and newly opened ones."""
        closed, opened = [], []
        for index, word, mask in self._locate_all(indices):
            if self._words[word] & mask:
                opened.append(index)
                self._words[word] &= ~mask
            else:
                closed.append(index)
                self._words[word] |= mask
        return closed, opened

    def is_closed(self, index: int) -> bool:
        """Return True if ``index`` is closed."""
        word, mask = self._locate(index)
        return bool(self._words[word] & mask)

    def is_opened(self, index: int) -> bool:
        """Return True if ``index`` is open."""
        return not self.is_closed(index)

    def all_closed(self, *indices: int) -> bool:
        """Return True if every given index is closed."""
        return all(self.is_closed(index) for index in indices)

    def any_closed(self, *indices: int) -> bool:
        """Return True if at least one given index is closed."""
        return any(self.is_closed(index) for index in indices)

    def all_opened(self, *indices: int) -> bool:
        """Return True if every given index is open."""
        return all(self.is_opened(index) for index in indices)

    def any_opened(self, *indices: int) -> bool:
        """Return True if at least one given index is open."""
        return any(self.is_opened(index) for index in indices)