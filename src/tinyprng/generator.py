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

from typing import List

from tinyprng import real


class InvalidSeed(Exception):
    """Seed material that cannot be used to initialize a generator"""
    pass


class Generator:
    """A pseudo-random number generator.

    This is an abstract class; you should use a derived concrete class. Derived
    classes must implement :meth:`.Generator.generate` and set the class
    attribute `width` to the number of bits of the integers it returns
    (32, 64 or 128). Everything else is built on top of these two."""

    width = 64

    def generate(self) -> int:
        """Return a new random integer and advance the internal state"""
        raise NotImplementedError("Unable to call Generator.generate, it is an abstract method")

    def generate_real(self) -> float:
        """Return a new random number uniformly distributed over [0, 1)

        When the upper 32 bits of the raw number are all set (or nearly so) the
        result is 1.0, or slightly above it for 64- and 128-bit generators."""
        return real.generate_real(self.generate, self.width)

    def generate_real_closed(self) -> float:
        """Return a new random number uniformly distributed over [0, 1]"""
        return real.generate_real_closed(self.generate, self.width)

    def generate_real_in_range(self, lo: float, hi: float) -> float:
        """Return a new random number uniformly distributed over [lo, hi)

        When the upper 32 bits of the raw number are all set (or nearly so) the
        result is `hi`, or marginally past it for 64- and 128-bit generators.
        If ``lo > hi`` the result lies in (hi, lo], with the same edge case at `hi`."""
        return real.generate_real_in_range(self.generate, self.width, lo, hi)

    def generate_many(self, count: int) -> List[int]:
        """Return a list of `count` integers, as if `generate` were called `count` times"""
        return [self.generate() for _ in range(count)]

    def generate_real_many(self, count: int) -> List[float]:
        return [self.generate_real() for _ in range(count)]

    def generate_real_closed_many(self, count: int) -> List[float]:
        return [self.generate_real_closed() for _ in range(count)]

    def generate_real_in_range_many(self, count: int, lo: float, hi: float) -> List[float]:
        return [self.generate_real_in_range(lo, hi) for _ in range(count)]
