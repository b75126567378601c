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

"""Permuted Congruential Generators (PCG)

See M. E. O'Neill, «PCG: A Family of Simple Fast Space-Efficient
Statistically Good Algorithms for Random Number Generation»,
HMC-CS-2014-0905.

A PCG generator is made of two independent pieces:

-   An *advance* rule that moves the state forward. It is either a linear
    congruential step (``state * MULTIPLIER + INCREMENT``) or a purely
    multiplicative one (``state * MULTIPLIER``);
-   A *permutation* that folds the state into a narrower output number.

The permutation is always applied to the state *before* it is advanced, so
the first number returned by a freshly seeded generator depends only on the
seed.
"""

from dataclasses import dataclass

from tinyprng.generator import Generator
from tinyprng.misc import to_uint32, to_uint64, to_uint128, rotr32, rotr64

MULTIPLIER = 1957840684519283055
INCREMENT = 3571826365018266039
MULTIPLIER128 = 0x1957840684519283055
INCREMENT128 = 0x3571826365018266039


def lcg64(state: int) -> int:
    """Advance a 64-bit state using a linear congruential step"""
    return to_uint64(state * MULTIPLIER + INCREMENT)


def mcg64(state: int) -> int:
    """Advance a 64-bit state using a multiplicative congruential step"""
    return to_uint64(state * MULTIPLIER)


def lcg128(state: int) -> int:
    """Advance a 128-bit state using a linear congruential step"""
    return to_uint128(state * MULTIPLIER128 + INCREMENT128)


def mcg128(state: int) -> int:
    """Advance a 128-bit state using a multiplicative congruential step"""
    return to_uint128(state * MULTIPLIER128)


def xsh_rr_64_32(state: int) -> int:
    """XSH-RR permutation: xorshift high, then random rotation (64-bit state, 32-bit output)"""
    # 32-bit
    count = state >> 59

    # 64-bit
    x = state ^ (state >> 18)

    # 32-bit
    return rotr32(to_uint32(x >> 27), count)


def xsh_rs_64_32(state: int) -> int:
    """XSH-RS permutation: xorshift high, then random shift (64-bit state, 32-bit output)"""
    # 32-bit
    count = 22 + (state >> 61)

    # 64-bit
    x = state ^ (state >> 22)

    # 32-bit
    return to_uint32(x >> count)


def xsl_rr_128_64(state: int) -> int:
    """XSL-RR permutation: xorshift low, then random rotation (128-bit state, 64-bit output)"""
    # 64-bit
    count = state >> 122

    # 128-bit
    x = state ^ (state >> 64)

    # 64-bit
    return rotr64(to_uint64(x), count)


@dataclass
class Pcg(Generator):
    """PCG Uniform Pseudo-random Number Generator

    This is an abstract class: derived classes pick the advance rule and the
    permutation by setting the static methods `advance` and `permute`, together
    with `to_state` (the function that clips a seed to the width of the state)
    and `width` (the width of the output)."""

    state: int = 0

    width = 32
    to_state = staticmethod(to_uint64)

    @staticmethod
    def advance(state: int) -> int:
        raise NotImplementedError("Unable to call Pcg.advance, it is an abstract method")

    @staticmethod
    def permute(state: int) -> int:
        raise NotImplementedError("Unable to call Pcg.permute, it is an abstract method")

    @classmethod
    def with_seed(cls, seed: int):
        """Create a generator whose state is the seed itself (no warm-up)"""
        return cls(state=cls.to_state(seed))

    def generate(self) -> int:
        """Return a new random number and advance PCG's internal state"""
        oldstate = self.state
        self.state = self.advance(oldstate)
        return self.permute(oldstate)


class PcgXshRr6432(Pcg):
    """PCG-XSH-RR-64/32 with a linear congruential step"""

    advance = staticmethod(lcg64)
    permute = staticmethod(xsh_rr_64_32)


class PcgXshRr6432Mcg(Pcg):
    """PCG-XSH-RR-64/32 with a multiplicative congruential step"""

    advance = staticmethod(mcg64)
    permute = staticmethod(xsh_rr_64_32)


class PcgXshRs6432(Pcg):
    """PCG-XSH-RS-64/32 with a linear congruential step"""

    advance = staticmethod(lcg64)
    permute = staticmethod(xsh_rs_64_32)


class PcgXshRs6432Mcg(Pcg):
    """PCG-XSH-RS-64/32 with a multiplicative congruential step"""

    advance = staticmethod(mcg64)
    permute = staticmethod(xsh_rs_64_32)


class PcgXslRr12864(Pcg):
    """PCG-XSL-RR-128/64 with a linear congruential step"""

    width = 64
    to_state = staticmethod(to_uint128)
    advance = staticmethod(lcg128)
    permute = staticmethod(xsl_rr_128_64)


class PcgXslRr12864Mcg(Pcg):
    """PCG-XSL-RR-128/64 with a multiplicative congruential step"""

    width = 64
    to_state = staticmethod(to_uint128)
    advance = staticmethod(mcg128)
    permute = staticmethod(xsl_rr_128_64)
