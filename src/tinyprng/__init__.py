"""Deterministic pseudo-random number generators: xorshift, PCG and a 64-bit Mersenne Twister"""

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

__version__ = "0.1.0"

__all__ = [
    "Generator",
    "InvalidSeed",
    "Mt64",
    "PcgXshRr6432",
    "PcgXshRr6432Mcg",
    "PcgXshRs6432",
    "PcgXshRs6432Mcg",
    "PcgXslRr12864",
    "PcgXslRr12864Mcg",
    "Xorshift32",
    "Xorshift64",
    "Xorshift128",
    "Xorshift64Star",
    "Xorshift1024Star",
]
