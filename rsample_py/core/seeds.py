"""Seed resolution and derivation of independent sub-seeds."""

import numbers
import numpy as np
from typing import Optional

from ..exceptions import ConfigurationError

_SEED_MASK = (1 << 63) - 1


def resolve_seed(seed: Optional[int]) -> int:
    """Return `seed` as an int, drawing fresh entropy when it is None."""
    if seed is None:
        return int(np.random.SeedSequence().entropy) & _SEED_MASK
    if isinstance(seed, (bool, np.bool_)) or not isinstance(seed, numbers.Integral):
        raise ConfigurationError(f"'seed' must be an integer or None, got {seed!r}.", parameter="seed")
    if seed < 0:
        raise ConfigurationError(f"'seed' must be non-negative, got {seed}.", parameter="seed")
    return int(seed)


def derive_seed(seed: int, *keys: int) -> int:
    """
    Derive a sub-seed from a base seed and a path of run indices.

    Different key paths give statistically independent streams, so repeats,
    draws and nested inner runs can be computed in any order (or in parallel)
    and still reproduce the same output.
    """
    state = np.random.SeedSequence(entropy=seed, spawn_key=_keys(keys)).generate_state(2, dtype=np.uint32)
    return ((int(state[0]) << 32) | int(state[1])) & _SEED_MASK


def make_rng(seed: int, *keys: int) -> np.random.Generator:
    """Create a generator for the stream identified by (`seed`, `keys`)."""
    return np.random.default_rng(np.random.SeedSequence(entropy=seed, spawn_key=_keys(keys)))


def _keys(keys) -> tuple:
    return tuple(int(k) for k in keys)
