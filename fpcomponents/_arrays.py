"""Bulk sign/exponent/mantissa splitting of numpy arrays."""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def split(values, precision):
    """
    Split an array of floats into sign, literal exponent and literal mantissa arrays.

    The values are first converted to the precision's dtype.
    """
    bits = np.asarray(values, dtype=precision.dtype).view(precision.bits_dtype)
    logger.debug("split %d %s values", bits.size, precision.name)
    width = precision.bits_dtype.type
    signs = (bits >> width(precision.bit_length - 1)) != 0
    exponents = (bits >> width(precision.mantissa_bit_length)) & width(precision.max_literal_exponent)
    mantissas = bits & width(precision.max_literal_mantissa)
    return signs, exponents, mantissas


def join(signs, exponents, mantissas, precision):
    """Inverse of :func:`split`; the arrays are broadcast against each other."""
    width = precision.bits_dtype.type
    signs = np.asarray(signs, dtype=bool)
    exponents = np.asarray(exponents)
    mantissas = np.asarray(mantissas)
    if not (np.issubdtype(exponents.dtype, np.integer) and np.issubdtype(mantissas.dtype, np.integer)):
        raise TypeError("literal exponents and mantissas must be integer arrays")
    if np.any(exponents < 0) or np.any(exponents > precision.max_literal_exponent):
        raise ValueError(f"literal exponents must fit in {precision.exponent_bit_length} bits")
    if np.any(mantissas < 0) or np.any(mantissas > precision.max_literal_mantissa):
        raise ValueError(f"literal mantissas must fit in {precision.mantissa_bit_length} bits")
    bits = (
        signs.astype(precision.bits_dtype) << width(precision.bit_length - 1)
        | exponents.astype(precision.bits_dtype) << width(precision.mantissa_bit_length)
        | mantissas.astype(precision.bits_dtype)
    )
    logger.debug("joined %d %s values", bits.size, precision.name)
    return bits.view(precision.dtype)
