import hashlib
import threading
from abc import ABC, abstractmethod

from pypssig.utils.mcl import Fr

# Twice the Fr byte size, so the reduction bias is negligible
_WIDE_BYTES = 64


class RandomSource(ABC):
    @abstractmethod
    def random_fr(self) -> Fr:
        """
        Sample an element uniformly from the scalar field.
        """


class SystemRandom(RandomSource):
    """mcl's CSPRNG. Stateless, safe to share between threads."""

    def random_fr(self) -> Fr:
        return Fr.from_random()


class SeededRandom(RandomSource):
    """
    Deterministic scalar stream for tests and replay. Each scalar is the
    SHAKE-256 output of (seed, counter) reduced modulo r. Never use it for
    production keys.
    """

    def __init__(self, seed: bytes | str) -> None:
        if isinstance(seed, str):
            seed = seed.encode()
        elif not isinstance(seed, bytes):
            raise TypeError(f"Invalid {seed} type. Expected str/bytes")
        self._seed = seed
        self._counter = 0
        self._lock = threading.Lock()

    def random_fr(self) -> Fr:
        with self._lock:
            counter = self._counter
            self._counter += 1
        h = hashlib.shake_256()
        h.update(len(self._seed).to_bytes(8, "little"))
        h.update(self._seed)
        h.update(counter.to_bytes(8, "little"))
        return Fr.from_little_endian_mod(h.digest(_WIDE_BYTES))


DEFAULT: RandomSource = SystemRandom()
