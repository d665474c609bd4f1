"""Bit-layout constants for the IEEE-754 binary interchange formats."""

import logging
import operator
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

# Precision -> components class, filled in by the components module.
_COMPONENT_TYPES = {}


@dataclass(frozen=True)
class Precision:
    """
    The field widths and bias of one binary floating-point format, together
    with the numpy dtype that stores it natively.

    >>> FP32.max_literal_exponent, FP32.min_logical_exponent
    (255, -149)
    """

    name: str
    exponent_bit_length: int
    mantissa_bit_length: int
    exponent_bias: int
    dtype: type

    def __repr__(self):
        return (
            f"Precision {{ name: {self.name}, exponent: {self.exponent_bit_length}, "
            f"mantissa: {self.mantissa_bit_length}, bias: {self.exponent_bias} }}"
        )

    @property
    def bit_length(self) -> int:
        return 1 + self.exponent_bit_length + self.mantissa_bit_length

    @property
    def sign_bit(self) -> int:
        return 1 << (self.bit_length - 1)

    @property
    def bits_dtype(self):
        return np.dtype(f"uint{self.bit_length}")

    @property
    def max_literal_exponent(self) -> int:
        """The reserved exponent of infinities and NaNs."""
        return (1 << self.exponent_bit_length) - 1

    @property
    def max_finite_literal_exponent(self) -> int:
        return self.max_literal_exponent - 1

    @property
    def implicit_mantissa_bit(self) -> int:
        """The leading significand bit that normal values leave unstored."""
        return 1 << self.mantissa_bit_length

    @property
    def max_literal_mantissa(self) -> int:
        return self.implicit_mantissa_bit - 1

    @property
    def max_logical_mantissa(self) -> int:
        return self.max_literal_mantissa | self.implicit_mantissa_bit

    @property
    def min_logical_exponent(self) -> int:
        """
        Shared by zero, the subnormal range and the smallest normal exponent.
        """
        # Subnormals use the exponent of the smallest normal, literal 1.
        return 1 - self.exponent_bias - self.mantissa_bit_length

    @property
    def max_finite_logical_exponent(self) -> int:
        return self.max_finite_literal_exponent - self.exponent_bias - self.mantissa_bit_length

    @property
    def max_logical_exponent(self) -> int:
        """Only non-finite values have this logical exponent."""
        return self.max_literal_exponent - self.exponent_bias - self.mantissa_bit_length

    def to_bits(self, value) -> int:
        """Reinterpret a value of this precision as an unsigned integer."""
        return int(np.asarray(value, dtype=self.dtype).view(self.bits_dtype))

    def from_bits(self, bits: int):
        """Reinterpret an unsigned integer bit pattern as a value of this precision."""
        bits = operator.index(bits)
        if not 0 <= bits < (1 << self.bit_length):
            logger.debug("%s: rejected bit pattern %#x", self.name, bits)
            raise ValueError(f"{bits:#x} is not a {self.bit_length}-bit pattern")
        return np.asarray(bits, dtype=self.bits_dtype).view(self.dtype)[()]

    def decompose(self, value):
        """Split a value of this precision into its sign, exponent and mantissa."""
        return _COMPONENT_TYPES[self].from_value(value)

    def components(self, is_negative, literal_exponent, literal_mantissa):
        return _COMPONENT_TYPES[self](is_negative, literal_exponent, literal_mantissa)


# Parameters match the IEEE 754 binary16/32/64 interchange formats
FP16 = Precision("binary16", 5, 10, 15, np.float16)  # Half precision
FP32 = Precision("binary32", 8, 23, 127, np.float32)  # Single precision
FP64 = Precision("binary64", 11, 52, 1023, np.float64)  # Double precision

PRECISIONS = {p.bit_length: p for p in (FP16, FP32, FP64)}
