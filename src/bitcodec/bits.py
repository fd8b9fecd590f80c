from __future__ import annotations

from functools import lru_cache
from typing import Any, List, Sequence

import numpy as np

from bitcodec.codec import stage as codec_stage
from bitcodec.codec.stage import OutOfRangeError  # noqa: F401  (re-export)

# Width modules shipped under codec/modules
_MODULE_NAMES = ("u8", "u16", "u32", "u64")


def module_for_dtype(dtype: Any) -> str:
    """
    Map an unsigned numpy dtype to its width module name, e.g. uint16 -> "u16".
    """
    try:
        dt = np.dtype(dtype)
    except TypeError:
        raise TypeError(f"not a numpy dtype: {dtype!r}") from None
    if dt.kind != "u":
        raise TypeError(f"dtype must be unsigned integer, got {dt}")
    name = f"u{dt.itemsize * 8}"
    if name not in _MODULE_NAMES:
        raise TypeError(f"unsupported dtype {dt}")
    return name


@lru_cache(maxsize=None)
def _width_module(name: str):
    """
    Cached (module, module_cfg) for a width module name.

    Resolved once per name, so conversions do not re-import or re-check the module.
    """
    return codec_stage._resolve_module_and_cfg(codec_stage.Config(module=name))


def _module_for_value(value: Any):
    # A plain int has no width, so only numpy scalars are accepted here.
    if not isinstance(value, np.unsignedinteger):
        raise TypeError(f"value must be a numpy unsigned scalar, got {type(value).__name__}")
    return _width_module(module_for_dtype(value.dtype))


def as_bits(value: Any) -> List[bool]:
    """
    Extract all bits of a numpy unsigned scalar, LSB first.

    >>> as_bits(np.uint8(5))
    [True, False, True, False, False, False, False, False]
    """
    mod, module_cfg = _module_for_value(value)
    return mod.extract_all(value, cfg=module_cfg)


def as_bits_until(value: Any, until: int) -> List[bool]:
    """
    Extract bits [0, until) of a numpy unsigned scalar, LSB first.

    Raises OutOfRangeError if until exceeds the bit width of value's dtype.

    >>> as_bits_until(np.uint64(5), 4)
    [True, False, True, False]
    """
    mod, module_cfg = _module_for_value(value)
    return mod.extract_until(value, until, cfg=module_cfg)


def as_bits_until_unchecked(value: Any, until: int) -> List[bool]:
    """
    Same as as_bits_until() but does not check until against the width.

    until larger than the width is undefined behavior. Only use this when
    until has already been validated.
    """
    mod, module_cfg = _module_for_value(value)
    return mod.extract_until_unchecked(value, until, cfg=module_cfg)


def from_bits(bits: Sequence[Any], dtype: Any) -> Any:
    """
    Put LSB-first bits back into an unsigned integer of the given dtype.
    Missing high bits default to 0.

    Raises OutOfRangeError if len(bits) exceeds the width of dtype.

    >>> int(from_bits([True], np.uint64))
    1
    """
    mod, module_cfg = _width_module(module_for_dtype(dtype))
    return mod.reconstruct(bits, cfg=module_cfg)


def from_bits_unchecked(bits: Sequence[Any], dtype: Any) -> Any:
    """
    Same as from_bits() but does not check len(bits) against the width.

    len(bits) larger than the width is undefined behavior. Only use this when
    the length has already been validated.
    """
    mod, module_cfg = _width_module(module_for_dtype(dtype))
    return mod.reconstruct_unchecked(bits, cfg=module_cfg)
