#!/usr/bin/env python3
"""
FPComponents: IEEE-754 Floating-Point Bit Fields

This library splits half, single and double precision floating-point values
into their sign, exponent and mantissa bit fields, and rebuilds the exact value
from those fields. It also exposes the unbiased "logical" form of a value, in
which a finite value is an integer mantissa times a power of two, and
categorizes values as zero, subnormal, normal, infinite or NaN.

Examples:
    >>> from fpcomponents import SingleComponents, FP32
    >>> one = SingleComponents.from_value(1.0)
    >>> one
    SingleComponents(is_negative=False, literal_exponent=0x7F, literal_mantissa=0x000000)
    >>> one.literal_exponent == FP32.exponent_bias
    True

    >>> DoubleComponents.from_value(0.75).try_get_normalized_logical()
    LogicalComponents(is_finite=True, sign=1, exponent=-2, mantissa=3)

    >>> half = FP16.components(True, 0, 1)
    >>> half.is_subnormal, float(half.to_half())
    (True, -5.960464477539063e-08)

Constants:
    FP16, FP32, FP64: The IEEE 754 binary16, binary32 and binary64 layouts
    FloatComponents: Base class of HalfComponents, SingleComponents and DoubleComponents
    split, join: Array versions of decomposition and reconstruction
"""

import logging

from ._precision import Precision, FP16, FP32, FP64, PRECISIONS
from ._components import (
    FloatComponents,
    HalfComponents,
    SingleComponents,
    DoubleComponents,
    LogicalComponents,
)
from ._arrays import split, join

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Precision",
    "FP16",
    "FP32",
    "FP64",
    "PRECISIONS",
    "FloatComponents",
    "HalfComponents",
    "SingleComponents",
    "DoubleComponents",
    "LogicalComponents",
    "split",
    "join",
]

version = "0.1.0"
