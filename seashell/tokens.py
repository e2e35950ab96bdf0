"""
Token storage for a single command line.

Tokens are not copied out of the line. Each one is a Span of indices into
the line it came from, and the text is only sliced out when a caller asks
for it. The sequence keeps an explicit count and always holds the END
marker in the slot right after the last live token.
"""

import logging
from typing import Iterator, List, NamedTuple, Optional

from .exceptions import TokenAllocationError

logger = logging.getLogger(__name__)

INIT_TOKEN_CAPACITY = 8

# Marker stored after the last live token
END = None


class Span(NamedTuple):
    """Half-open [start, end) index range of a token inside its line."""

    start: int
    end: int


class TokenSequence:
    """
    Growable, ordered sequence of token spans over one line.

    Capacity starts at INIT_TOKEN_CAPACITY and doubles whenever only the
    END slot is left free. Removing a token shifts every later token one
    slot to the left and decrements the count.

    Example:
        >>> seq = TokenSequence("ls -l\\n")
        >>> seq.append(Span(0, 2))
        >>> seq.append(Span(3, 5))
        >>> list(seq)
        ['ls', '-l']
        >>> seq.get(2) is END
        True
    """

    def __init__(self, line: str, capacity: int = INIT_TOKEN_CAPACITY):
        self.line = line
        self.capacity = capacity
        self.count = 0
        self._slots: List[Optional[Span]] = self._allocate(capacity)

    def _allocate(self, capacity: int) -> List[Optional[Span]]:
        try:
            return [END] * capacity
        except MemoryError:
            raise TokenAllocationError(capacity, line=self.line) from None

    def _grow(self):
        new_capacity = self.capacity * 2
        self._slots.extend(self._allocate(new_capacity - self.capacity))
        logger.debug("token capacity grown %d -> %d", self.capacity, new_capacity)
        self.capacity = new_capacity

    def append(self, span: Span):
        """Add a token at the end, growing storage when needed."""
        if self.count >= self.capacity - 1:
            self._grow()
        self._slots[self.count] = span
        self.count += 1

    def remove(self, index: int):
        """
        Remove the token at index, shifting later tokens left.

        Out-of-range indices are ignored.
        """
        if index < 0 or index >= self.count:
            return
        for i in range(index, self.count):
            self._slots[i] = self._slots[i + 1]
        self.count -= 1
        self._slots[self.count] = END

    def span(self, index: int) -> Optional[Span]:
        """Return the span at index, or END past the last token."""
        if index < 0 or index >= self.count:
            return END
        return self._slots[index]

    def get(self, index: int) -> Optional[str]:
        """Return the token text at index, or END past the last token."""
        span = self.span(index)
        if span is END:
            return END
        return self.line[span.start:span.end]

    def __getitem__(self, index: int) -> str:
        if index < 0:
            index += self.count
        if index < 0 or index >= self.count:
            raise IndexError("token index out of range")
        return self.get(index)

    def __len__(self):
        return self.count

    def __iter__(self) -> Iterator[str]:
        for i in range(self.count):
            yield self.get(i)

    def to_list(self) -> List[str]:
        """Materialize the live tokens as a list of strings."""
        return list(self)

    def __repr__(self):
        return f"TokenSequence({self.to_list()!r}, capacity={self.capacity})"
