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

"""The xorshift family of generators

See G. Marsaglia, «Xorshift RNGs», J. Stat. Softw. 8 (14), 2003, and
S. Vigna, «An experimental exploration of Marsaglia's xorshift generators,
scrambled», ACM Trans. Math. Softw. 42 (4), 2016.

An all-zero state is a fixed point of every recurrence in this module: a
generator seeded with zero returns zero forever.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from tinyprng.generator import Generator, InvalidSeed
from tinyprng.misc import to_uint32, to_uint64

XORSHIFT64STAR_MULTIPLIER = 0xA738F8117CA1D037
XORSHIFT1024STAR_MULTIPLIER = 0xAAC17D8EFA43CAB7


@dataclass
class Xorshift32(Generator):
    """Xorshift generator with a 32-bit state and the (13, 17, 5) triplet"""

    state: int = 0
    width = 32

    @classmethod
    def with_seed(cls, seed: int):
        return cls(state=to_uint32(seed))

    def generate(self) -> int:
        x = self.state
        x ^= to_uint32(x << 13)
        x ^= x >> 17
        x ^= to_uint32(x << 5)
        self.state = x
        return x


@dataclass
class Xorshift64(Generator):
    """Xorshift generator with a 64-bit state and the (13, 7, 17) triplet"""

    state: int = 0
    width = 64

    @classmethod
    def with_seed(cls, seed: int):
        return cls(state=to_uint64(seed))

    def generate(self) -> int:
        x = self.state
        x ^= to_uint64(x << 13)
        x ^= x >> 7
        x ^= to_uint64(x << 17)
        self.state = x
        return x


@dataclass
class Xorshift128(Generator):
    """Xorshift generator with a state made of four 32-bit words

    The value returned by :meth:`.Xorshift128.generate` is the whole state,
    packed in a 128-bit integer with `state[0]` in the most significant word."""

    state: List[int] = field(default_factory=lambda: [0, 0, 0, 0])
    width = 128

    @classmethod
    def with_seed(cls, seed: int):
        """Create a generator slicing a 128-bit seed into four words, high to low"""
        return cls(state=[
            to_uint32(seed >> 96),
            to_uint32(seed >> 64),
            to_uint32(seed >> 32),
            to_uint32(seed),
        ])

    def generate(self) -> int:
        state = self.state
        t = state[3]
        s = state[0]
        state[3] = state[2]
        state[2] = state[1]
        state[1] = s
        t ^= to_uint32(t << 11)
        t ^= t >> 8
        state[0] = t ^ s ^ (s >> 19)

        return (state[0] << 96) | (state[1] << 64) | (state[2] << 32) | state[3]


@dataclass
class Xorshift64Star(Generator):
    """Xorshift64* generator

    The 64-bit state follows a plain xorshift recurrence; the number returned
    to the caller is the state multiplied by an odd constant, which hides the
    linear artifacts of the recurrence. The state itself is never scrambled."""

    state: int = 0
    width = 64

    @classmethod
    def with_seed(cls, seed: int):
        return cls(state=to_uint64(seed))

    def generate(self) -> int:
        x = self.state
        x ^= x >> 12
        x ^= to_uint64(x << 25)
        x ^= x >> 27
        self.state = x
        return to_uint64(x * XORSHIFT64STAR_MULTIPLIER)


@dataclass
class Xorshift1024Star(Generator):
    """Xorshift1024* generator

    The state is a ring of sixteen 64-bit words plus a cursor. Each call moves
    the cursor one slot forward (wrapping after 16 calls), mixes the word the
    cursor left into the word it reaches, and returns the new word multiplied
    by an odd constant."""

    state: List[int] = field(default_factory=lambda: [0] * 16)
    index: int = 0
    width = 64

    @classmethod
    def with_seed(cls, seed: Sequence[int]):
        """Create a generator whose state is a copy of the 16 words in `seed`"""
        if len(seed) != 16:
            raise InvalidSeed(f"Xorshift1024* needs exactly 16 seed words, got {len(seed)}")

        return cls(state=[to_uint64(x) for x in seed], index=0)

    def generate(self) -> int:
        s = self.state[self.index]
        self.index = (self.index + 1) & 15

        t = self.state[self.index]
        t ^= to_uint64(t << 31)
        t ^= t >> 11
        t ^= s ^ (s >> 30)
        self.state[self.index] = t

        return to_uint64(t * XORSHIFT1024STAR_MULTIPLIER)
