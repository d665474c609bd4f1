"""
Sign, exponent and mantissa views of binary floating-point values.

The three stored fields are the literal bit fields of the encoding. The
logical view removes the bias and restores the implicit leading bit, so that a
finite value equals ``sign * mantissa * 2**exponent`` with integer mantissa and
exponent. The normalized logical view additionally strips the trailing zero
bits of the mantissa.
"""

import logging
import operator
from fractions import Fraction
from typing import NamedTuple

from ._precision import FP16, FP32, FP64, _COMPONENT_TYPES

logger = logging.getLogger(__name__)


class LogicalComponents(NamedTuple):
    """
    A logical (or normalized logical) decomposition of a value.

    ``sign * mantissa * 2**exponent`` is the represented value only when
    ``is_finite`` is true.
    """

    is_finite: bool
    sign: int
    exponent: int
    mantissa: int

    def as_fraction(self) -> Fraction:
        if not self.is_finite:
            raise ValueError("a non-finite value has no exact rational value")
        if self.exponent >= 0:
            return Fraction(self.sign * (self.mantissa << self.exponent))
        return Fraction(self.sign * self.mantissa, 1 << -self.exponent)


class FloatComponents:
    """
    A floating-point value of some precision as exponent, mantissa and sign bit.

    Subclasses bind ``precision``; this class is not instantiated directly.
    """

    __slots__ = ("_is_negative", "_literal_exponent", "_literal_mantissa")

    precision = None

    def __init__(self, is_negative, literal_exponent, literal_mantissa):
        if self.precision is None:
            raise TypeError(f"{type(self).__name__} has no precision; use a precision-bound subclass")
        literal_exponent = operator.index(literal_exponent)
        literal_mantissa = operator.index(literal_mantissa)
        p = self.precision
        if not 0 <= literal_exponent <= p.max_literal_exponent:
            logger.debug("%s: rejected literal exponent %d", p.name, literal_exponent)
            raise ValueError(
                f"literal exponent {literal_exponent} does not fit in "
                f"{p.exponent_bit_length} bits"
            )
        if not 0 <= literal_mantissa <= p.max_literal_mantissa:
            logger.debug("%s: rejected literal mantissa %d", p.name, literal_mantissa)
            raise ValueError(
                f"literal mantissa {literal_mantissa} does not fit in "
                f"{p.mantissa_bit_length} bits"
            )
        object.__setattr__(self, "_is_negative", bool(is_negative))
        object.__setattr__(self, "_literal_exponent", literal_exponent)
        object.__setattr__(self, "_literal_mantissa", literal_mantissa)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Only classes that bind their own precision own the registry entry.
        if cls.__dict__.get("precision") is not None:
            _COMPONENT_TYPES[cls.precision] = cls

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return type(self), self.literal()

    @classmethod
    def from_bits(cls, bits):
        """Splits a raw bit pattern of this precision into its fields."""
        p = cls.precision
        bits = operator.index(bits)
        if not 0 <= bits < (1 << p.bit_length):
            raise ValueError(f"{bits:#x} is not a {p.bit_length}-bit pattern")
        return cls(
            bits & p.sign_bit != 0,
            (bits >> p.mantissa_bit_length) & p.max_literal_exponent,
            bits & p.max_literal_mantissa,
        )

    @classmethod
    def from_value(cls, value):
        """
        Decomposes a native value of this precision.

        Every bit pattern is accepted, including both zeros and any NaN payload.
        """
        return cls.from_bits(cls.precision.to_bits(value))

    # Stored

    @property
    def is_negative(self) -> bool:
        return self._is_negative

    @property
    def literal_exponent(self) -> int:
        """The biased exponent field as stored."""
        return self._literal_exponent

    @property
    def literal_mantissa(self) -> int:
        """The fraction field as stored, without the implicit bit."""
        return self._literal_mantissa

    @property
    def bits(self) -> int:
        p = self.precision
        return (
            (p.sign_bit if self._is_negative else 0)
            | self._literal_exponent << p.mantissa_bit_length
            | self._literal_mantissa
        )

    # Logical components

    @property
    def logical_sign(self) -> int:
        return -1 if self._is_negative else 1

    @property
    def logical_exponent(self) -> int:
        p = self.precision
        return (self._literal_exponent or 1) - (p.exponent_bias + p.mantissa_bit_length)

    @property
    def logical_mantissa(self) -> int:
        """
        The literal mantissa with the implicit 1-bit added on the left, unless
        the literal exponent is 0 (zero and the subnormal range).
        """
        if self._literal_exponent == 0:
            return self._literal_mantissa
        return self._literal_mantissa | self.precision.implicit_mantissa_bit

    @property
    def _normalization_shift(self) -> int:
        mantissa = self.logical_mantissa
        # Index of the lowest set bit
        return (mantissa & -mantissa).bit_length() - 1 if mantissa else 0

    @property
    def normalized_logical_exponent(self) -> int:
        """The logical exponent after normalization; 0 for zero values."""
        return self._normalized(self._normalization_shift)[0]

    @property
    def normalized_logical_mantissa(self) -> int:
        """The logical mantissa without trailing 0 bits."""
        return self._normalized(self._normalization_shift)[1]

    def _normalized(self, shift):
        mantissa = self.logical_mantissa
        if mantissa == 0:
            return 0, 0
        return self.logical_exponent + shift, mantissa >> shift

    # Characterization

    @property
    def is_zero(self) -> bool:
        return self._literal_exponent == 0 and self._literal_mantissa == 0

    @property
    def is_subnormal(self) -> bool:
        """Whether this is a nonzero value in the subnormal range."""
        return self._literal_exponent == 0 and self._literal_mantissa != 0

    @property
    def is_infinity(self) -> bool:
        return (
            self._literal_exponent == self.precision.max_literal_exponent
            and self._literal_mantissa == 0
        )

    @property
    def is_nan(self) -> bool:
        return (
            self._literal_exponent == self.precision.max_literal_exponent
            and self._literal_mantissa != 0
        )

    @property
    def is_finite(self) -> bool:
        return self._literal_exponent != self.precision.max_literal_exponent

    @property
    def is_normal(self) -> bool:
        return self.is_finite and self._literal_exponent != 0

    @property
    def is_positive(self) -> bool:
        return not self._is_negative

    # Deconstruction

    def literal(self):
        """Returns ``(is_negative, literal_exponent, literal_mantissa)``."""
        return self._is_negative, self._literal_exponent, self._literal_mantissa

    def try_get_logical(self) -> LogicalComponents:
        return LogicalComponents(
            self.is_finite, self.logical_sign, self.logical_exponent, self.logical_mantissa
        )

    def try_get_normalized_logical(self) -> LogicalComponents:
        exponent, mantissa = self._normalized(self._normalization_shift)
        return LogicalComponents(self.is_finite, self.logical_sign, exponent, mantissa)

    # Conversion

    def to_native(self):
        """The value represented by this instance, as the precision's numpy type."""
        return self.precision.from_bits(self.bits)

    # Equality

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.literal() == other.literal()

    def __hash__(self):
        return hash((self.precision.bit_length, self.literal()))

    def __repr__(self):
        p = self.precision
        return (
            f"{type(self).__name__}(is_negative={self._is_negative}, "
            f"literal_exponent=0x{self._literal_exponent:0{-(-p.exponent_bit_length // 4)}X}, "
            f"literal_mantissa=0x{self._literal_mantissa:0{-(-p.mantissa_bit_length // 4)}X})"
        )


class HalfComponents(FloatComponents):
    """Represents a ``numpy.float16`` as exponent, mantissa and sign bit."""

    __slots__ = ()
    precision = FP16

    def to_half(self):
        return self.to_native()


class SingleComponents(FloatComponents):
    """Represents a ``numpy.float32`` as exponent, mantissa and sign bit."""

    __slots__ = ()
    precision = FP32

    def to_float(self):
        return self.to_native()


class DoubleComponents(FloatComponents):
    """Represents a ``numpy.float64`` (a Python ``float``) as exponent, mantissa and sign bit."""

    __slots__ = ()
    precision = FP64

    def to_double(self):
        return self.to_native()
