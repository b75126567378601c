# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

"""Conversion of raw integer output into floating-point numbers

Every function in this module takes the `generate` method of a generator
(any callable that returns a new unsigned integer each time it is called)
and the width in bits of the integers it returns. The numerical constants
are part of the output contract: two implementations fed the same integers
must return bit-identical floats.

-   32-bit generators multiply the raw value by a single reciprocal.
-   64-bit generators split the value in an upper 32-bit chunk and a lower
    chunk whose two least significant bits are dropped.
-   128-bit generators do the same with the two topmost 32-bit words, and
    ignore the bottom 64 bits.
"""

from typing import Callable, Tuple

# Reciprocals used by `generate_real`
_RECIP32_OPEN = 1.0 / 4294967295.0
_RECIP64_OPEN = 1.0 / 18446744073709551615.0

# Reciprocals used by `generate_real_closed`
_RECIP32_CLOSED = 1.0 / 4294967296.0
_RECIP64_CLOSED = 1.0 / 18446744073709551616.0

SUPPORTED_WIDTHS = (32, 64, 128)


def _split(value: int, width: int) -> Tuple[int, int]:
    """Return the (upper, lower) chunks used to build a double from `value`"""
    if width == 64:
        return value >> 32, value & 0xFFFFFFFC
    if width == 128:
        return value >> 96, (value >> 64) & 0xFFFFFFFC

    raise ValueError(f"unsupported integer width {width}, expected one of {SUPPORTED_WIDTHS}")


def to_real(value: int, width: int) -> float:
    """Convert a raw integer into a float using the «open» constants"""
    if width == 32:
        return value * _RECIP32_OPEN

    upper, lower = _split(value, width)
    return upper * _RECIP32_OPEN + lower * _RECIP64_OPEN


def to_real_closed(value: int, width: int) -> float:
    """Convert a raw integer into a float using the «closed» constants"""
    if width == 32:
        return value * _RECIP32_CLOSED

    upper, lower = _split(value, width)
    return upper * _RECIP32_CLOSED + lower * _RECIP64_CLOSED


def generate_real(generate: Callable[[], int], width: int) -> float:
    """Draw a new integer through `generate` and return it as a float in [0, 1)

    The upper chunk is scaled by 1/(2³² - 1), so when the upper 32 bits are all
    set (or, for 64- and 128-bit generators, nearly so) the result is 1.0, and
    for wider generators it can be slightly above 1.0."""
    return to_real(generate(), width)


def generate_real_closed(generate: Callable[[], int], width: int) -> float:
    """Draw a new integer through `generate` and return it as a float in [0, 1]

    The upper chunk is scaled by 2⁻³² instead of 1/(2³² - 1)."""
    return to_real_closed(generate(), width)


def generate_real_in_range(generate: Callable[[], int], width: int, lo: float, hi: float) -> float:
    """Return a float in [lo, hi)

    The value is computed through the affine map ``lo + (hi - lo) * x``,
    where `x` is the result of :func:`generate_real`. When `x` reaches 1.0 the
    result is `hi`, or marginally past it for 64- and 128-bit generators.
    If ``lo > hi`` the interval is traversed backwards and the result lies in
    (hi, lo], with the same edge case at `hi`; if ``lo == hi`` the result is
    always `lo`."""
    return lo + (hi - lo) * generate_real(generate, width)
