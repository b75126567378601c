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

"""Bulk entry points for host applications

These functions take a small seed, stretch it into the state of a generator,
and return a list of `count` consecutive outputs. Each list is identical to
what `count` sequential calls to `generate` would return.
"""

from typing import List, Sequence

from tinyprng.misc import to_uint32, to_uint64, to_uint128
from tinyprng.mt64 import Mt64
from tinyprng.pcg import PcgXslRr12864
from tinyprng.xorshift import Xorshift64

SEED_MULTIPLIER = 0xA081FC3719
SEED_MODULUS = 0x91828376


def mix_seed(value: int, bits: int) -> int:
    """Spread the bits of `value` over a `bits`-wide integer"""
    mask = (1 << bits) - 1
    return (((value << 32) & mask) ^ ((value % SEED_MODULUS) ^ (value >> 1))) & mask


def pcg(seed: int, count: int) -> List[int]:
    """Return `count` 64-bit numbers produced by PCG-XSL-RR-128/64"""
    if count <= 0:
        return []

    value = to_uint32(seed)
    value = (value << 58) ^ value
    value = to_uint128(value * SEED_MULTIPLIER)

    return PcgXslRr12864.with_seed(mix_seed(value, 128)).generate_many(count)


def xorshift64(seed: int, count: int) -> List[int]:
    """Return `count` 64-bit numbers produced by Xorshift64"""
    value = to_uint32(seed)
    value = to_uint64((value << 21) + ((value << 12) ^ value))
    value = to_uint64(value * SEED_MULTIPLIER)

    return Xorshift64.with_seed(mix_seed(value, 64)).generate_many(count)


def mt64(seed: Sequence[int], count: int) -> List[int]:
    """Return `count` 64-bit numbers produced by a Mersenne Twister seeded with an array"""
    return Mt64.with_array(seed).generate_many(count)
