# mypy: disable-error-code="misc"

import json
from base64 import b64decode, b64encode
from typing import Any, KeysView, Type, TypeVar, get_args, get_type_hints

from pypssig.interfaces import Container

T = TypeVar("T", bound="Container")


class ReprMixin:
    _container_name: str

    def __repr__(self) -> str:
        if self._container_name == "secret":
            rep = json.dumps({k: "<redacted>" for k in vars(self)})
        else:
            rep = json.dumps(
                {
                    k: [str(el) for el in v] if isinstance(v, list) else str(v)
                    for k, v in vars(self).items()
                }
            )
        return f"{self.__class__} {rep}"


class InfoMixin:
    _name: str
    _container_name: str

    def info(self) -> tuple[str, str, KeysView]:
        return self._name, self._container_name, vars(self).keys()


# noinspection PyUnresolvedReferences
class B64Mixin:
    def to_b64(self) -> str:
        scheme_name, container_name, var = self.info()  # type: ignore
        dump: dict[str, Any] = {}
        for v in var:
            obj = getattr(self, v)
            if isinstance(obj, list):
                dump[v] = [el.to_b64() for el in obj]
            else:
                dump[v] = obj.to_b64()
        data = b64encode(json.dumps(dump).encode()).decode()
        msg = {"scheme": scheme_name, "type": container_name, "key": data}
        return b64encode(json.dumps(msg).encode()).decode()

    def set_b64(self, s: str | bytes) -> None:
        if isinstance(s, str):
            s = s.encode()
        elif not isinstance(s, bytes):
            raise TypeError(f"Invalid {s} type. Expected str/bytes")
        data = json.loads(b64decode(s))
        scheme_name, container_name, var = self.info()  # type: ignore
        if data.get("scheme") != scheme_name or data.get("type") != container_name:
            raise ValueError(
                f"Expected {scheme_name} {container_name} key, got "
                f"{data.get('scheme')} {data.get('type')}"
            )
        it = json.loads(b64decode(data["key"].encode()))
        missing = set(var) - set(it)
        if missing:
            raise ValueError(f"Missing fields {sorted(missing)}")
        hints = get_type_hints(self.__class__)
        for k, v in it.items():
            if k not in var:
                raise ValueError(f"Unknown field {k}")
            obj = getattr(self, k)
            if isinstance(v, list):
                (el_cls,) = get_args(hints[k])
                obj.clear()
                obj.extend([el_cls.from_b64(el) for el in v])
            else:
                obj.set_b64(v)

    @classmethod
    def from_b64(cls: Type[T], s: str | bytes) -> T:
        ret = cls()
        ret.set_b64(s)
        return ret


class MetadataSecretKeyMixin:
    _container_name = "secret"


class MetadataPublicKeyMixin:
    _container_name = "public"


class MetadataParamsMixin:
    _container_name = "params"
