"""
Pointcheval-Sanders signatures, CT-RSA 2018 (Reassessing Security of
Randomizable Signatures). Same keys as the 2016 scheme with one extra
slot for m'.
"""

import logging

from pypssig.params import Params
from pypssig.schemes.ps16 import Sigkey, Verkey, _check_count, keygen
from pypssig.utils.rng import RandomSource

_logger = logging.getLogger(__name__)


def keygen_2018(
    count_messages: int, params: Params, rng: RandomSource | None = None
) -> tuple[Sigkey, Verkey]:
    """
    Generate signing and verification keys for the 2018 scheme. The last
    slot (index count_messages) is reserved for m'.
    """
    _check_count(count_messages)
    _logger.debug("Generating ps18 key pair for %d messages", count_messages)
    return keygen(count_messages + 1, params, rng)
