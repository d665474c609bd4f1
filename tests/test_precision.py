import numpy as np
import pytest

from fpcomponents import FP16, FP32, FP64, PRECISIONS, DoubleComponents, HalfComponents, SingleComponents

# (precision, bias, max literal exponent, implicit bit, min logical exp, max finite logical exp, max logical exp)
CONSTANTS = [
    (FP16, 15, 31, 1 << 10, -24, 5, 6),
    (FP32, 127, 255, 1 << 23, -149, 104, 105),
    (FP64, 1023, 2047, 1 << 52, -1074, 971, 972),
]


@pytest.mark.parametrize(
    "p, bias, max_exp, implicit, min_log, max_finite_log, max_log",
    CONSTANTS,
    ids=lambda v: v.name if hasattr(v, "name") else None,
)
def test_constants(p, bias, max_exp, implicit, min_log, max_finite_log, max_log):
    assert p.exponent_bias == bias
    assert p.max_literal_exponent == max_exp
    assert p.max_finite_literal_exponent == max_exp - 1
    assert p.implicit_mantissa_bit == implicit
    assert p.max_literal_mantissa == implicit - 1
    assert p.max_logical_mantissa == 2 * implicit - 1
    assert p.min_logical_exponent == min_log
    assert p.max_finite_logical_exponent == max_finite_log
    assert p.max_logical_exponent == max_log


def test_bit_lengths():
    assert [(p.exponent_bit_length, p.mantissa_bit_length) for p in (FP16, FP32, FP64)] == [
        (5, 10),
        (8, 23),
        (11, 52),
    ]
    assert sorted(PRECISIONS) == [16, 32, 64]
    for width, p in PRECISIONS.items():
        assert p.bit_length == width
        assert p.bits_dtype.itemsize * 8 == width
        assert np.dtype(p.dtype).itemsize * 8 == width


def test_max_finite_matches_numpy(precision):
    top = precision.components(False, precision.max_finite_literal_exponent, precision.max_literal_mantissa)
    assert top.to_native() == np.finfo(precision.dtype).max


def test_to_bits():
    assert FP16.to_bits(1.0) == 0x3C00
    assert FP32.to_bits(-2.0) == 0xC0000000
    assert FP64.to_bits(-0.0) == 0x8000000000000000
    assert FP32.to_bits(np.float32("inf")) == 0x7F800000


def test_from_bits():
    assert FP16.from_bits(0x3C00) == 1.0
    assert FP16.from_bits(0x3C00).dtype == np.float16
    assert FP64.from_bits(0x4000000000000000) == 2.0
    assert np.signbit(FP32.from_bits(0x80000000))


@pytest.mark.parametrize("bits", [-1, 1 << 32])
def test_from_bits_out_of_range(bits):
    with pytest.raises(ValueError):
        FP32.from_bits(bits)


def test_decompose_dispatch():
    assert type(FP16.decompose(1.0)) is HalfComponents
    assert type(FP32.decompose(1.0)) is SingleComponents
    assert type(FP64.decompose(1.0)) is DoubleComponents
    assert FP32.components(True, 127, 0) == SingleComponents.from_value(-1.0)


def test_repr():
    assert repr(FP32) == "Precision { name: binary32, exponent: 8, mantissa: 23, bias: 127 }"


def test_subclass_does_not_replace_registered_type():
    class Tagged(SingleComponents):
        __slots__ = ()

    assert Tagged.precision is FP32
    assert type(Tagged.from_value(1.0)) is Tagged
    assert type(FP32.decompose(1.0)) is SingleComponents
    assert type(FP32.components(False, 127, 0)) is SingleComponents
    assert FP32.decompose(1.0) == SingleComponents(False, 127, 0)
