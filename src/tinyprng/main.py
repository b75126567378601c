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

from time import process_time
from typing import Dict, List, Sequence
import sys

from tinyprng.generator import Generator, InvalidSeed
from tinyprng.mt64 import Mt64
from tinyprng.pcg import (
    PcgXshRr6432,
    PcgXshRr6432Mcg,
    PcgXshRs6432,
    PcgXshRs6432Mcg,
    PcgXslRr12864,
    PcgXslRr12864Mcg,
)
from tinyprng.xorshift import Xorshift32, Xorshift64, Xorshift128, Xorshift64Star, Xorshift1024Star

import click

ALGORITHMS: Dict[str, type] = {
    "xorshift32": Xorshift32,
    "xorshift64": Xorshift64,
    "xorshift128": Xorshift128,
    "xorshift64star": Xorshift64Star,
    "xorshift1024star": Xorshift1024Star,
    "pcg-xsh-rr-64-32": PcgXshRr6432,
    "pcg-xsh-rr-64-32-mcg": PcgXshRr6432Mcg,
    "pcg-xsh-rs-64-32": PcgXshRs6432,
    "pcg-xsh-rs-64-32-mcg": PcgXshRs6432Mcg,
    "pcg-xsl-rr-128-64": PcgXslRr12864,
    "pcg-xsl-rr-128-64-mcg": PcgXslRr12864Mcg,
    "mt64": Mt64,
}

MODES = ["int", "real", "closed", "range"]

DEFAULT_SEED = "0x1818729182367349"


@click.group()
def cli():
    pass


def parse_seeds(seeds: Sequence[str]) -> List[int]:
    """Parse the list of `--seed` switches, accepting both decimal and hexadecimal literals"""

    result = []
    for seed in seeds:
        try:
            result.append(int(seed, 0))
        except ValueError:
            print(f"error, invalid seed «{seed}», it must be a decimal or 0x-prefixed hexadecimal integer")
            sys.exit(1)

    return result


def build_generator(algorithm: str, seeds: List[int]) -> Generator:
    """Create a generator of the given kind, seeded with `seeds`

    The Mersenne Twister uses the whole list as its seed array. Xorshift1024*
    needs 16 words, but a single word is accepted and copied in every slot.
    All the other generators need exactly one seed."""

    cls = ALGORITHMS[algorithm]

    if cls is Mt64:
        return Mt64.with_array(seeds)

    if cls is Xorshift1024Star:
        if len(seeds) == 1:
            seeds = seeds * 16
        return Xorshift1024Star.with_seed(seeds)

    if len(seeds) != 1:
        raise InvalidSeed(f"{algorithm} needs exactly one seed, got {len(seeds)}")

    return cls.with_seed(seeds[0])


def _make_generator(algorithm: str, seed: Sequence[str]) -> Generator:
    seeds = parse_seeds(seed if seed else (DEFAULT_SEED,))
    try:
        return build_generator(algorithm, seeds)
    except InvalidSeed as e:
        print(f"error, {e}")
        sys.exit(1)


@click.command("list")
def list_algorithms():
    for name, cls in ALGORITHMS.items():
        print(f"{name:24s}{cls.width:4d} bits")


@click.command("generate")
@click.option("--algorithm", type=click.Choice(list(ALGORITHMS)), default="xorshift64",
              help="Name of the pseudo-random number generator")
@click.option(
    "--seed",
    "-s",
    type=str,
    multiple=True,
    help="Seed of the generator (decimal or 0x-prefixed hexadecimal). Repeat it to build a seed array.",
)
@click.option("--count", "-n", type=int, default=10, help="Number of values to print")
@click.option("--mode", type=click.Choice(MODES), default="int",
              help="Print raw integers, floats in [0, 1) («real»), in [0, 1] («closed»), or in [low, high)")
@click.option("--low", type=float, default=0.0, help="Lower bound of the range (only applicable with --mode=range)")
@click.option("--high", type=float, default=1.0, help="Upper bound of the range (only applicable with --mode=range)")
@click.option("--hex", "as_hex", is_flag=True, help="Print integers in hexadecimal form")
def generate(algorithm, seed, count, mode, low, high, as_hex):
    generator = _make_generator(algorithm, seed)

    if mode == "int":
        values = generator.generate_many(count)
        if as_hex:
            values = [f"0x{x:x}" for x in values]
    elif mode == "real":
        values = generator.generate_real_many(count)
    elif mode == "closed":
        values = generator.generate_real_closed_many(count)
    else:
        values = generator.generate_real_in_range_many(count, low, high)

    for value in values:
        print(value)


@click.command("bench")
@click.option("--algorithm", type=click.Choice(list(ALGORITHMS)), default="xorshift64",
              help="Name of the pseudo-random number generator")
@click.option("--seed", "-s", type=str, multiple=True, help="Seed of the generator (see the «generate» command)")
@click.option("--count", "-n", type=int, default=1_000_000, help="Number of values to generate")
def bench(algorithm, seed, count):
    generator = _make_generator(algorithm, seed)
    print(f"Generating {count} numbers with {algorithm}")

    start_time = process_time()
    value = 0
    for _ in range(count):
        value = generator.generate()
    elapsed_time = process_time() - start_time

    print(f"Last value: 0x{value:x}")
    print(f"Generation completed in {elapsed_time:.3f} s")


cli.add_command(list_algorithms)
cli.add_command(generate)
cli.add_command(bench)

if __name__ == "__main__":
    cli()
