from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np


# ============================
# Errors
# ============================

class OutOfRangeError(ValueError):
    """
    Raised by checked operations when an index, length or value does not fit
    the integer width.
    """
    def __init__(self, message: str, *, width: int, index: int):
        super().__init__(message)
        self.width = width
        self.index = index


# ============================
# Extraction
# ============================

def extract_until(value: Any, until: int, *, width: int) -> List[bool]:
    v = check_value(value, width=width)
    if isinstance(until, bool) or not isinstance(until, (int, np.integer)):
        raise TypeError("extract_until: until must be int")
    until = int(until)
    if not (0 <= until <= width):
        raise OutOfRangeError(
            f"extract_until: until={until} out of range [0,{width}]",
            width=width,
            index=until,
        )
    return extract_until_unchecked(v, until, width=width)


def extract_until_unchecked(value: Any, until: int, *, width: int) -> List[bool]:
    """
    No validation. Caller guarantees 0 <= until <= width.

    Shifting past the width is undefined; the assert below only exists in
    non-optimized runs.
    """
    assert 0 <= until <= width, f"until={until} exceeds width={width}"

    v = int(value)
    bits = []
    for i in range(until):
        # Select bit i and move it back down:
        #   x = 0110, i = 2  ->  (x >> 2) & 1 = 1
        bits.append((v >> i) & 1 == 1)
    return bits


# ============================
# Reconstruction
# ============================

def reconstruct(bits: Sequence[Any], *, width: int, dtype: Any) -> Any:
    n = _bits_len(bits)
    if n > width:
        raise OutOfRangeError(
            f"reconstruct: {n} bits do not fit in width={width}",
            width=width,
            index=n,
        )
    return reconstruct_unchecked(bits, width=width, dtype=dtype)


def reconstruct_unchecked(bits: Sequence[Any], *, width: int, dtype: Any) -> Any:
    """
    No validation. Caller guarantees len(bits) <= width.
    """
    assert len(bits) <= width, f"{len(bits)} bits exceed width={width}"

    val = 0
    for i, bit in enumerate(bits):
        # Push ones into place:
        #   x = 0000, i = 2  ->  x | (1 << 2) = 0100
        if bit:
            val |= 1 << i
    return dtype(val)


# ============================
# Helpers
# ============================

def check_value(value: Any, *, width: int) -> int:
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("value must be an unsigned integer, not bool")
    if not isinstance(value, (int, np.integer)):
        raise TypeError(f"value must be int, got {type(value).__name__}")
    v = int(value)
    if not (0 <= v < (1 << width)):
        raise OutOfRangeError(
            f"value {v} does not fit in {width} unsigned bits",
            width=width,
            index=v.bit_length(),
        )
    return v


def _bits_len(bits: Any) -> int:
    if isinstance(bits, (str, bytes, bytearray)):
        raise TypeError("bits must be a sequence of booleans")
    if isinstance(bits, np.ndarray) and bits.ndim != 1:
        raise ValueError(f"bits must be 1-D, got shape {bits.shape}")
    try:
        return len(bits)
    except TypeError:
        raise TypeError("bits must be a sized sequence") from None


def get_width(cfg: Any, expected: int) -> int:
    w = getattr(cfg, "width", None)
    if w is None:
        raise AttributeError("cfg missing required int attribute: width")
    if isinstance(w, bool) or not isinstance(w, int):
        raise TypeError("cfg.width must be int")
    if w != expected:
        raise ValueError(f"cfg.width must be {expected}, got {w}")
    return w
