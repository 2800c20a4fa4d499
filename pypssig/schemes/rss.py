"""
Redactable structure-preserving variant of Pointcheval-Sanders. The public
key publishes powers of a single secret y in both groups:

    Y_tilde_i = g_tilde^(y^i)   i = 1..n
    Y_j       = g^(y^j)         j = 1..n
    Y_k       = g^(y^k)         k = n+2..2n

g^(y^(n+1)) is never published. Verifiers of a redacted message set rely
on that gap, so the family sizes are n, n and n-1.
"""

import logging
from typing import TypeVar

from pypssig.interfaces import Container
from pypssig.params import Params
from pypssig.schemes.ps16 import _check_count
from pypssig.utils.helpers import (
    B64Mixin,
    InfoMixin,
    MetadataPublicKeyMixin,
    MetadataSecretKeyMixin,
    ReprMixin,
)
from pypssig.utils.mcl import G1, G2, GT, Fr
from pypssig.utils.rng import DEFAULT, RandomSource

_logger = logging.getLogger(__name__)

GroupT = TypeVar("GroupT", G1, G2)


class MetadataMixin:
    _name = "rss"


class SKrss(
    B64Mixin,
    InfoMixin,
    ReprMixin,
    MetadataSecretKeyMixin,
    MetadataMixin,
    Container,
):
    x: Fr
    y: Fr

    def __init__(self) -> None:
        self.x = Fr()
        self.y = Fr()  # Base of every published power


class PKrss(
    B64Mixin,
    InfoMixin,
    ReprMixin,
    MetadataPublicKeyMixin,
    MetadataMixin,
    Container,
):
    g: G1
    g_tilde: G2
    Y_tilde_i: list[G2]
    Y_j_1_to_n: list[G1]
    Y_k_nplus2_to_2n: list[G1]
    X_tilde: G2

    def __init__(self) -> None:
        self.g = G1()
        self.g_tilde = G2()
        self.Y_tilde_i = []
        self.Y_j_1_to_n = []
        self.Y_k_nplus2_to_2n = []
        self.X_tilde = G2()

    @property
    def count_messages(self) -> int:
        return len(self.Y_tilde_i)


def _powers(base: GroupT, y: Fr, first: int, last: int) -> list[GroupT]:
    """
    [base^(y^first), ..., base^(y^last)], empty when first > last.
    """
    family: list[GroupT] = []
    one = Fr.one()
    exponent = Fr.from_int(first)
    for _ in range(first, last + 1):
        family.append(base.mul_ct(y**exponent))
        exponent = exponent + one
    return family


def _build_public_key(count_messages: int, params: Params, sk: SKrss) -> PKrss:
    n = count_messages
    pk = PKrss()
    # Copies of the generators, the exponent is public
    pk.g = params.g * Fr.one()
    pk.g_tilde = params.g_tilde * Fr.one()
    pk.Y_tilde_i = _powers(params.g_tilde, sk.y, 1, n)
    pk.Y_j_1_to_n = _powers(params.g, sk.y, 1, n)
    pk.Y_k_nplus2_to_2n = _powers(params.g, sk.y, n + 2, 2 * n)
    pk.X_tilde = params.g_tilde.mul_ct(sk.x)
    return pk


def rsskeygen(
    count_messages: int, params: Params, rng: RandomSource | None = None
) -> tuple[SKrss, PKrss]:
    _check_count(count_messages)
    rng = rng or DEFAULT
    sk = SKrss()
    sk.x = rng.random_fr()
    sk.y = rng.random_fr()
    pk = _build_public_key(count_messages, params, sk)
    _logger.debug(
        "Generated rss key pair for %d messages (%d, %d, %d)",
        count_messages,
        len(pk.Y_tilde_i),
        len(pk.Y_j_1_to_n),
        len(pk.Y_k_nplus2_to_2n),
    )
    return sk, pk


def check_public_key(pk: PKrss) -> bool:
    """
    Structural check using only public values: every family must be made
    of consecutive powers of the same y, in both groups.
    """
    n = pk.count_messages
    if len(pk.Y_j_1_to_n) != n:
        _logger.debug("len(Y_j) != n")
        return False
    if len(pk.Y_k_nplus2_to_2n) != max(n - 1, 0):
        _logger.debug("len(Y_k) != n - 1")
        return False
    for Y_j, Y_tilde_j in zip(pk.Y_j_1_to_n, pk.Y_tilde_i):
        # e(g^(y^j), g_tilde) == e(g, g_tilde^(y^j))
        if GT.pairing(Y_j, pk.g_tilde) != GT.pairing(pk.g, Y_tilde_j):
            _logger.debug("e(Y_j, g_tilde) != e(g, Y_tilde_j)")
            return False
    if n == 0:
        return True
    Y_tilde_1 = pk.Y_tilde_i[0]
    for Y_j, Y_next in zip(pk.Y_j_1_to_n, pk.Y_j_1_to_n[1:]):
        # e(g^(y^(j+1)), g_tilde) == e(g^(y^j), g_tilde^y)
        if GT.pairing(Y_next, pk.g_tilde) != GT.pairing(Y_j, Y_tilde_1):
            _logger.debug("e(Y_j+1, g_tilde) != e(Y_j, Y_tilde_1)")
            return False
    Y_tilde_n = pk.Y_tilde_i[-1]
    # Y_k_nplus2_to_2n[0] is k = n + 2, paired with Y_j_1_to_n[1] (j = 2)
    for Y_k, Y_j in zip(pk.Y_k_nplus2_to_2n, pk.Y_j_1_to_n[1:]):
        # e(g^(y^k), g_tilde) == e(g^(y^(k-n)), g_tilde^(y^n))
        if GT.pairing(Y_k, pk.g_tilde) != GT.pairing(Y_j, Y_tilde_n):
            _logger.debug("e(Y_k, g_tilde) != e(Y_k-n, Y_tilde_n)")
            return False
    return True


def check_keypair(params: Params, sk: SKrss, pk: PKrss) -> bool:
    """
    Recompute the public key from sk and compare it element by element.
    Also rejects a public key exposing g^(y^(n+1)).
    """
    n = pk.count_messages
    expected = _build_public_key(n, params, sk)
    for name in vars(expected):
        ours = getattr(expected, name)
        theirs = getattr(pk, name)
        if isinstance(ours, list):
            if len(ours) != len(theirs) or any(
                a != b for a, b in zip(ours, theirs)
            ):
                _logger.debug("%s mismatch", name)
                return False
        elif ours != theirs:
            _logger.debug("%s mismatch", name)
            return False
    (pivot,) = _powers(params.g, sk.y, n + 1, n + 1)
    if any(el == pivot for el in pk.Y_j_1_to_n + pk.Y_k_nplus2_to_2n):
        _logger.debug("g^(y^(n+1)) is published")
        return False
    return True
