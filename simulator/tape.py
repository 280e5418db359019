import numpy as np

from simulator.turing_machine import Symbol

BLOCK_SHIFT = 6
BLOCK_BITS = 1 << BLOCK_SHIFT
BLOCK_MASK = BLOCK_BITS - 1


class Tape:
    """Unbounded two-way binary tape packed into 64-bit numpy blocks.

    Position p lives in block ``(p >> 6) + origin`` at bit ``p & 63``. Blocks
    are only materialized over the span that has been written, and every
    position outside that span reads as Symbol.ZERO.
    """

    def __init__(self):
        self.blocks = np.zeros(0, dtype=np.uint64)
        self.origin = 0

    def _block_index(self, position):
        return (position >> BLOCK_SHIFT) + self.origin

    def read_at(self, position) -> Symbol:
        idx = self._block_index(position)
        if idx < 0 or idx >= len(self.blocks):
            return Symbol.ZERO
        word = int(self.blocks[idx])
        return Symbol((word >> (position & BLOCK_MASK)) & 1)

    def write_at(self, position, symbol: Symbol):
        idx = self._ensure_block(self._block_index(position))
        bit = 1 << (position & BLOCK_MASK)
        word = int(self.blocks[idx])
        if symbol == Symbol.ONE:
            word |= bit
        else:
            word &= ~bit
        self.blocks[idx] = word

    def _ensure_block(self, idx):
        """Grow storage so block ``idx`` exists; return its (possibly shifted) index."""
        size = len(self.blocks)
        if size == 0:
            self.blocks = np.zeros(1, dtype=np.uint64)
            self.origin -= idx
            return 0
        if idx < 0:
            # Prepend at least as many blocks as we hold so repeated leftward growth stays amortized O(1)
            extra = max(-idx, size)
            self.blocks = np.concatenate([np.zeros(extra, dtype=np.uint64), self.blocks])
            self.origin += extra
            return idx + extra
        if idx >= size:
            extra = max(idx - size + 1, size)
            self.blocks = np.concatenate([self.blocks, np.zeros(extra, dtype=np.uint64)])
        return idx

    def span(self):
        """Inclusive (low, high) range of materialized positions, or None for an untouched tape."""
        if len(self.blocks) == 0:
            return None
        low = -self.origin * BLOCK_BITS
        return low, low + len(self.blocks) * BLOCK_BITS - 1

    def window(self, start, length):
        return [self.read_at(position) for position in range(start, start + length)]

    def count_ones(self):
        """Count the number of 1s on the tape"""
        return sum(bin(int(word)).count("1") for word in self.blocks)

    def __str__(self):
        bounds = self.span()
        if bounds is None:
            return ""
        low, high = bounds
        return "".join(str(int(self.read_at(p))) for p in range(low, high + 1))
