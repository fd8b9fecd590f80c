from __future__ import annotations

import random

import pytest


WIDTHS = {"u8": 8, "u16": 16, "u32": 32, "u64": 64}


def sample_values(width: int, n: int = 64, seed: int = 1234) -> list[int]:
    """
    Deterministic sample of W-bit values: the edges plus seeded random picks.
    """
    rng = random.Random(seed + width)
    top = (1 << width) - 1
    edges = [0, 1, 2, 5, top, top - 1, 1 << (width - 1), (1 << (width - 1)) - 1]
    return edges + [rng.randint(0, top) for _ in range(n)]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(0xB175)
