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

# The routines to_uint32, to_uint64 and to_uint128 are needed in Python, as
# it does not have the concept of "typed integers". In other languages like
# C++ it is enough to declare a variable as `uint32_t` or `uint64_t`, and
# clipping will be done automatically by the CPU/virtual machine.

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF
MASK128 = (1 << 128) - 1


def to_uint32(x: int) -> int:
    """Clip an integer so that it occupies 32 bits"""
    return x & MASK32


def to_uint64(x: int) -> int:
    """Clip an integer so that it occupies 64 bits"""
    return x & MASK64


def to_uint128(x: int) -> int:
    """Clip an integer so that it occupies 128 bits"""
    return x & MASK128


def rotr32(x: int, r: int) -> int:
    """Rotate the 32-bit integer `x` to the right by `r` bits"""
    return to_uint32((x >> r) | (x << ((32 - r) & 31)))


def rotr64(x: int, r: int) -> int:
    """Rotate the 64-bit integer `x` to the right by `r` bits"""
    return to_uint64((x >> r) | (x << ((64 - r) & 63)))
