from typing import Any, MutableSequence, Sequence

_MASK64 = (1 << 64) - 1
_MULTIPLIER = 6364136223846793005
_INCREMENT = 1442695040888963407


class SeededRandomStream:
    """
    Reproducible random source keyed by a 64-bit seed.

    Uses a 64-bit linear congruential generator and pure integer arithmetic,
    so two streams built from the same seed yield the same sequence on every
    platform and in every process. Never touches the global `random` state.
    """

    def __init__(self, seed: int):
        self.seed = seed & _MASK64
        self._state = self.seed

    def next_uint64(self) -> int:
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _MASK64
        return self._state

    def next_below(self, bound: int) -> int:
        """Uniform integer in [0, bound) via multiply-shift with rejection."""
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        product = self.next_uint64() * bound
        low = product & _MASK64
        if low < bound:
            threshold = ((1 << 64) - bound) % bound
            while low < threshold:
                product = self.next_uint64() * bound
                low = product & _MASK64
        return product >> 64

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_below(i + 1)
            items[i], items[j] = items[j], items[i]

    def choice(self, items: Sequence[Any]) -> Any:
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[self.next_below(len(items))]

    def __repr__(self) -> str:
        return f"SeededRandomStream(seed={self.seed})"
