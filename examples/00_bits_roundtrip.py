import numpy as np

from bitcodec.bits import as_bits, as_bits_until, from_bits
from bitcodec.codec import stage as codec_stage
from bitcodec.codec.stage import OutOfRangeError


def fmt_bits(bits: list[bool]) -> str:
    return " ".join("1" if b else "0" for b in bits)


if __name__ == "__main__":
    five = np.uint8(5)
    bits = as_bits(five)
    print(f"{five!r} -> {fmt_bits(bits)}  (LSB first)")
    print(f"{fmt_bits(bits)} -> {from_bits(bits, np.uint8)!r}")

    print(f"low 4 bits of uint64 5: {fmt_bits(as_bits_until(np.uint64(5), 4))}")

    # Stage API: pick the width by module name
    for name in codec_stage.available_modules():
        cfg = codec_stage.Config(module=name)
        v = codec_stage.reconstruct([True, True, True, True], cfg=cfg)
        print(f"{name}: 1111 -> {int(v)}")

    try:
        as_bits_until(np.uint8(5), 9)
    except OutOfRangeError as e:
        print(f"rejected: {e}")
