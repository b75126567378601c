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

"""A 64-bit Mersenne Twister (MT19937)

See M. Matsumoto and T. Nishimura, «Mersenne Twister: A 623-dimensionally
equidistributed uniform pseudorandom number generator», ACM Trans. Model.
Comput. Simul. 8 (1), 1998.

This implementation departs from the published 64-bit reference in three
places:

-   :meth:`.Mt64.init_genrand` masks every state word but the first with
    ``0x5555555555555555`` instead of keeping all 64 bits;
-   :meth:`.Mt64.with_array` mixes the key using 32-bit words;
-   the tempering transform uses the shifts and masks of the 32-bit
    MT19937.
"""

from typing import List, Sequence

from tinyprng.generator import Generator, InvalidSeed
from tinyprng.misc import to_uint64

N = 312
M = 156
MATRIX_A = 0xB5026F5AA96619E9
UPPER_MASK = 0xFFFFFFFF80000000
LOWER_MASK = 0x7FFFFFFF

INIT_MASK = 0x5555555555555555
DEFAULT_SEED = 5489
ARRAY_SEED = 19650218

# Value of `Mt64.index` for a generator that has never been seeded
UNSEEDED = N + 1

_MAG01 = (0x0, MATRIX_A)


class Mt64(Generator):
    """Mersenne Twister with a state of 312 64-bit words

    The class has the following members:

    -   `state` (list of int): the 312 words of the state
    -   `index` (int): the position of the next word to extract. When it
        reaches 312, the whole state is regenerated by :meth:`.Mt64.twist`.
        The value 313 marks a generator that has not been seeded yet: the
        first call to :meth:`.Mt64.generate` seeds it with 5489.

    Use :meth:`.Mt64.with_seed` or :meth:`.Mt64.with_array` to build a
    seeded generator.
    """

    width = 64

    state: List[int]
    index: int

    def __init__(self):
        self.state = [0] * N
        self.index = UNSEEDED

    @classmethod
    def with_seed(cls, seed: int):
        """Create a generator seeded with a single integer"""
        mt = cls()
        mt.init_genrand(seed)
        return mt

    @classmethod
    def with_array(cls, key: Sequence[int]):
        """Create a generator seeded with a sequence of integers of any length

        The sequence must not be empty; if it is, :class:`.InvalidSeed` is raised."""
        if len(key) == 0:
            raise InvalidSeed("impossible to seed a Mersenne Twister with an empty array")

        mt = cls()
        mt.init_genrand(ARRAY_SEED)
        state = mt.state
        key_len = len(key)

        i, j = 1, 0
        for _ in range(max(N, key_len)):
            prev = state[i - 1]
            state[i] = ((state[i] ^ ((prev ^ (prev >> 30)) * 1664525)) + key[j] + j) & 0xFFFFFFFF
            i += 1
            j += 1
            if i >= N:
                state[0] = state[N - 1]
                i = 1
            if j >= key_len:
                j = 0

        for _ in range(N - 1):
            prev = state[i - 1]
            state[i] = ((state[i] ^ ((prev ^ (prev >> 30)) * 1566083941)) - i) & 0xFFFFFFFF
            i += 1
            if i >= N:
                state[0] = state[N - 1]
                i = 1

        return mt

    def init_genrand(self, seed: int):
        """Initialize the state from a single integer"""
        state = self.state
        state[0] = to_uint64(seed)
        for i in range(1, N):
            prev = state[i - 1]
            state[i] = (6364136223846793005 * (prev ^ (prev >> 30)) + i) & INIT_MASK

        self.index = N

    def twist(self):
        """Regenerate all the 312 words of the state in one pass"""
        state = self.state

        for kk in range(N - M):
            y = (state[kk] & UPPER_MASK) | (state[kk + 1] & LOWER_MASK)
            state[kk] = state[kk + M] ^ (y >> 1) ^ _MAG01[y & 1]

        for kk in range(N - M, N - 1):
            y = (state[kk] & UPPER_MASK) | (state[kk + 1] & LOWER_MASK)
            state[kk] = state[kk + M - N] ^ (y >> 1) ^ _MAG01[y & 1]

        y = (state[N - 1] & UPPER_MASK) | (state[0] & LOWER_MASK)
        state[N - 1] = state[M - 1] ^ (y >> 1) ^ _MAG01[y & 1]

        self.index = 0

    def generate(self) -> int:
        """Return a new 64-bit random number"""
        if self.index >= N:
            if self.index == UNSEEDED:
                self.init_genrand(DEFAULT_SEED)
            self.twist()

        y = self.state[self.index]
        self.index += 1

        # Tempering
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18

        return y
