"""pypssig, Pointcheval-Sanders key generation over mcl pairings"""

__all__ = [
    "generator",
    "key",
    "Params",
    "keygen",
    "keygen_2018",
    "rsskeygen",
    "Sigkey",
    "Verkey",
    "SKrss",
    "PKrss",
    "RandomSource",
    "SystemRandom",
    "SeededRandom",
    "load_library",
]

from .definitions import generator, key
from .params import Params
from .schemes.ps16 import Sigkey, Verkey, keygen
from .schemes.ps18 import keygen_2018
from .schemes.rss import PKrss, SKrss, rsskeygen
from .utils.constants import load_library
from .utils.rng import RandomSource, SeededRandom, SystemRandom
