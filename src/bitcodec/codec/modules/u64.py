from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import numpy as np

from . import _core

WIDTH = 64
DTYPE = np.uint64


@dataclass(frozen=True)
class Config:
    """
    64-bit unsigned integers (numpy.uint64).
    Default module of the codec stage.
    """
    width: int = WIDTH


def extract_all(value: Any, *, cfg: Optional[Config] = None) -> List[bool]:
    _core.get_width(cfg or Config(), WIDTH)
    _core.check_value(value, width=WIDTH)
    # until == WIDTH is always in range
    return _core.extract_until_unchecked(value, WIDTH, width=WIDTH)


def extract_until(value: Any, until: int, *, cfg: Optional[Config] = None) -> List[bool]:
    _core.get_width(cfg or Config(), WIDTH)
    return _core.extract_until(value, until, width=WIDTH)


def extract_until_unchecked(value: Any, until: int, *, cfg: Optional[Config] = None) -> List[bool]:
    return _core.extract_until_unchecked(value, until, width=WIDTH)


def reconstruct(bits: Sequence[Any], *, cfg: Optional[Config] = None) -> np.uint64:
    _core.get_width(cfg or Config(), WIDTH)
    return _core.reconstruct(bits, width=WIDTH, dtype=DTYPE)


def reconstruct_unchecked(bits: Sequence[Any], *, cfg: Optional[Config] = None) -> np.uint64:
    return _core.reconstruct_unchecked(bits, width=WIDTH, dtype=DTYPE)
