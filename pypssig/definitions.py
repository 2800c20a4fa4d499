# mypy: disable-error-code="misc"

from typing import Any, Callable, Literal, Type, TypeAlias

from typing_extensions import overload

from pypssig.interfaces import Container
from pypssig.schemes.ps16 import Sigkey, Verkey, keygen
from pypssig.schemes.ps18 import keygen_2018
from pypssig.schemes.rss import PKrss, SKrss, rsskeygen

KeygenT: TypeAlias = Callable[..., tuple[Any, Any]]

SCHEMES: dict[str, tuple[KeygenT, Type[Container], Type[Container]]] = {
    "ps16": (keygen, Sigkey, Verkey),
    # 2018 keys share the 2016 containers, with one extra slot
    "ps18": (keygen_2018, Sigkey, Verkey),
    "rss": (rsskeygen, SKrss, PKrss),
}
KEY_TYPES = ("secret", "public")

str_PS16: TypeAlias = Literal["ps16"]
str_PS18: TypeAlias = Literal["ps18"]
str_RSS: TypeAlias = Literal["rss"]
str_Secret: TypeAlias = Literal["secret"]
str_Public: TypeAlias = Literal["public"]


def generator(scheme_name: str) -> KeygenT:
    try:
        return SCHEMES[scheme_name][0]
    except KeyError:
        raise ValueError(f"Unknown scheme: {scheme_name}")


# PS16 / PS18
@overload
def key(
    scheme_name: str_PS16 | str_PS18, key_type: str_Secret
) -> Type[Sigkey]: ...
@overload
def key(
    scheme_name: str_PS16 | str_PS18, key_type: str_Public
) -> Type[Verkey]: ...


# RSS
@overload
def key(scheme_name: str_RSS, key_type: str_Secret) -> Type[SKrss]: ...
@overload
def key(scheme_name: str_RSS, key_type: str_Public) -> Type[PKrss]: ...


def key(scheme_name: str, key_type: str) -> Type[Container]:
    try:
        sch_data = SCHEMES[scheme_name]
    except KeyError:
        raise ValueError(f"Unknown scheme: {scheme_name}")
    try:
        return sch_data[1 + KEY_TYPES.index(key_type)]
    except ValueError:
        raise ValueError(f"Unknown key type: {key_type}")
