"""
Pointcheval-Sanders signatures, CT-RSA 2016 (Short Randomizable
Signatures). One secret scalar y[i] per message slot.
"""

import logging

from pypssig.interfaces import Container
from pypssig.params import Params
from pypssig.utils.helpers import (
    B64Mixin,
    InfoMixin,
    MetadataPublicKeyMixin,
    MetadataSecretKeyMixin,
    ReprMixin,
)
from pypssig.utils.mcl import G2, GT, Fr
from pypssig.utils.rng import DEFAULT, RandomSource

_logger = logging.getLogger(__name__)


class MetadataMixin:
    _name = "ps16"


class Sigkey(
    B64Mixin,
    InfoMixin,
    ReprMixin,
    MetadataSecretKeyMixin,
    MetadataMixin,
    Container,
):
    x: Fr
    y: list[Fr]

    def __init__(self) -> None:
        self.x = Fr()
        self.y = []  # One per message slot


class Verkey(
    B64Mixin,
    InfoMixin,
    ReprMixin,
    MetadataPublicKeyMixin,
    MetadataMixin,
    Container,
):
    X_tilde: G2
    Y_tilde: list[G2]

    def __init__(self) -> None:
        self.X_tilde = G2()  # g_tilde^x
        self.Y_tilde = []  # g_tilde^y[i], aligned with Sigkey.y


def _check_count(count_messages: int) -> None:
    if isinstance(count_messages, bool) or not isinstance(count_messages, int):
        raise TypeError(f"Invalid {count_messages} type. Expected int")
    if count_messages < 0:
        raise ValueError(f"Invalid message count: {count_messages}")


def _generate(
    sk: Sigkey,
    vk: Verkey,
    count_messages: int,
    params: Params,
    rng: RandomSource,
) -> None:
    sk.x = rng.random_fr()
    vk.X_tilde = params.g_tilde.mul_ct(sk.x)
    for _ in range(count_messages):
        y_i = rng.random_fr()
        vk.Y_tilde.append(params.g_tilde.mul_ct(y_i))
        sk.y.append(y_i)


def keygen(
    count_messages: int, params: Params, rng: RandomSource | None = None
) -> tuple[Sigkey, Verkey]:
    """
    Generate signing and verification keys for the 2016 scheme.
    """
    _check_count(count_messages)
    sk = Sigkey()
    vk = Verkey()
    _generate(sk, vk, count_messages, params, rng or DEFAULT)
    _logger.debug("Generated ps16 key pair for %d messages", count_messages)
    return sk, vk


def check_keypair(params: Params, sk: Sigkey, vk: Verkey) -> bool:
    """
    Check that both keys encode the same secrets: e(g, g_tilde^s) must
    equal e(g^s, g_tilde) for x and every y[i].
    """
    if len(sk.y) != len(vk.Y_tilde):
        _logger.debug("len(y) != len(Y_tilde)")
        return False
    e = GT.pairing(params.g, params.g_tilde)
    pairs = [(sk.x, vk.X_tilde)] + list(zip(sk.y, vk.Y_tilde))
    for s, S_tilde in pairs:
        e_s = e**s
        # e(g, g_tilde^s) == e(g, g_tilde)^s
        if GT.pairing(params.g, S_tilde) != e_s:
            _logger.debug("e(g, g_tilde^s) != e(g, g_tilde)^s")
            return False
        if GT.pairing(params.g.mul_ct(s), params.g_tilde) != e_s:
            _logger.debug("e(g^s, g_tilde) != e(g, g_tilde)^s")
            return False
    return True
