"""Process-wide random state for big-integer draws.

The generator is seeded lazily on first use: from RINGS_SEED when that
environment variable holds an integer, otherwise from the current time.
Use set_seed(n) at test start for reproducibility.
"""

import logging
import os
import threading
import time

import gmpy2

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "RINGS_SEED"


class RandomState:
    """Seeded GMP random state. When seed is None, seeds itself on first draw."""

    def __init__(self, seed: int | None = None):
        self._seed = seed
        self._state = None
        self._lock = threading.Lock()

    @property
    def seed(self) -> int | None:
        return self._seed

    def _ensure_state(self):
        if self._state is None:
            with self._lock:
                if self._state is None:
                    if self._seed is None:
                        self._seed = _default_seed()
                    self._state = gmpy2.random_state(self._seed)
        return self._state

    def random_bits(self, bits: int):
        """Uniform mpz in [0, 2**bits)."""
        if bits < 0:
            raise ValueError(f"bit count must be non-negative, got {bits}")
        return gmpy2.mpz_urandomb(self._ensure_state(), bits)

    def random_below(self, n):
        """Uniform mpz in [0, n); n must be positive."""
        if n <= 0:
            raise ValueError(f"upper bound must be positive, got {n}")
        return gmpy2.mpz_random(self._ensure_state(), n)


def _default_seed() -> int:
    env = os.environ.get(SEED_ENV_VAR)
    if env is not None:
        try:
            seed = int(env, 0)
        except ValueError:
            logger.warning("ignoring non-integer %s=%r", SEED_ENV_VAR, env)
        else:
            logger.debug("random state seeded from %s", SEED_ENV_VAR)
            return seed
    seed = int(time.time())
    logger.debug("random state seeded from time (%d)", seed)
    return seed


# Global instance
_global_state = RandomState(seed=None)


def set_seed(seed: int | None):
    """Set global seed for reproducibility. None = reseed from time on next draw."""
    global _global_state
    _global_state = RandomState(seed=seed)


def get_state() -> RandomState:
    return _global_state


def random_bits(bits: int):
    return _global_state.random_bits(bits)


def random_below(n):
    return _global_state.random_below(n)
