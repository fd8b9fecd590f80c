import numpy as np
import pytest

from bitcodec.codec.modules import u8, u16, u32, u64
from bitcodec.codec.stage import OutOfRangeError


def test_u8_extract_all_five():
    assert u8.extract_all(5) == [True, False, True, False, False, False, False, False]


def test_u8_reconstruct_five():
    bits = [True, False, True, False, False, False, False, False]
    assert u8.reconstruct(bits) == 5


def test_u64_reconstruct_single_bit():
    assert u64.reconstruct([True]) == 1


def test_u64_extract_until_four():
    assert u64.extract_until(5, 4) == [True, False, True, False]


def test_u8_reconstruct_fifteen():
    assert u8.reconstruct([True, True, True, True]) == 15


@pytest.mark.parametrize(
    "mod, dtype",
    [(u8, np.uint8), (u16, np.uint16), (u32, np.uint32), (u64, np.uint64)],
)
def test_reconstruct_returns_width_dtype(mod, dtype):
    out = mod.reconstruct([True, False, True])
    assert type(out) is dtype
    assert int(out) == 5


def test_reconstruct_sets_top_bit():
    assert int(u64.reconstruct([False] * 63 + [True])) == 1 << 63
    assert int(u8.reconstruct([False] * 7 + [True])) == 0x80


def test_reconstruct_empty_is_zero():
    assert int(u32.reconstruct([])) == 0


def test_reconstruct_accepts_ints_and_numpy_arrays():
    assert int(u16.reconstruct([1, 0, 1, 1])) == 0b1101
    assert int(u16.reconstruct(np.array([1, 0, 1, 1], dtype=np.uint8))) == 0b1101
    assert int(u16.reconstruct(np.array([True, True], dtype=np.bool_))) == 3


def test_reconstruct_rejects_2d_array():
    with pytest.raises(ValueError):
        u16.reconstruct(np.zeros((2, 2), dtype=np.bool_))


def test_reconstruct_rejects_strings():
    with pytest.raises(TypeError):
        u8.reconstruct("1010")


def test_extract_accepts_numpy_scalars():
    assert u32.extract_until(np.uint32(6), 3) == [False, True, True]
    assert u8.extract_all(np.uint64(255)) == [True] * 8


def test_extract_rejects_value_out_of_width():
    with pytest.raises(OutOfRangeError):
        u8.extract_all(256)
    with pytest.raises(OutOfRangeError):
        u16.extract_until(-1, 4)


def test_extract_rejects_bad_types():
    with pytest.raises(TypeError):
        u8.extract_all(True)
    with pytest.raises(TypeError):
        u8.extract_all(5.0)
    with pytest.raises(TypeError):
        u8.extract_until(5, 2.0)


def test_extract_until_rejects_negative_until():
    with pytest.raises(OutOfRangeError):
        u32.extract_until(5, -1)


def test_out_of_range_is_a_value_error():
    with pytest.raises(ValueError):
        u8.reconstruct([False] * 9)


def test_module_config_width_is_checked():
    with pytest.raises(ValueError):
        u8.extract_all(1, cfg=u16.Config())
    with pytest.raises(AttributeError):
        u8.extract_all(1, cfg=object())


@pytest.mark.skipif(not __debug__, reason="asserts are stripped under python -O")
def test_unchecked_asserts_in_debug_runs():
    with pytest.raises(AssertionError):
        u8.extract_until_unchecked(5, 9)
    with pytest.raises(AssertionError):
        u8.reconstruct_unchecked([True] * 9)
