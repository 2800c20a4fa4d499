import logging

import pypssig.utils.constants as ct
from pypssig.interfaces import Container
from pypssig.utils.helpers import (
    B64Mixin,
    InfoMixin,
    MetadataParamsMixin,
    ReprMixin,
)
from pypssig.utils.mcl import G1, G2

_logger = logging.getLogger(__name__)


class Params(B64Mixin, InfoMixin, ReprMixin, MetadataParamsMixin, Container):
    """
    Public parameters shared by the signer and every verifier. Both
    generators are hashed from a label, so parties only need to agree on
    the label to agree on the parameters.
    """

    _name = "params"

    g: G1
    g_tilde: G2

    def __init__(self) -> None:
        self.g = G1()
        self.g_tilde = G2()

    @classmethod
    def new(cls, label: bytes | bytearray | memoryview | str) -> "Params":
        if isinstance(label, str):
            label = label.encode()
        elif isinstance(label, (bytes, bytearray, memoryview)):
            label = bytes(label)
        else:
            raise TypeError(f"Invalid {label} type. Expected str/bytes")
        ret = cls()
        ret.g.set_hash(label + ct.G1_LABEL_SUFFIX)
        ret.g_tilde.set_hash(label + ct.G2_LABEL_SUFFIX)
        _logger.debug("Derived params from a %d byte label", len(label))
        return ret
