# mypy: disable-error-code="misc,attr-defined,type-var,operator"

import ctypes
from base64 import b64decode, b64encode
from typing import Any, Type, TypeVar

from typing_extensions import Self

import pypssig.utils.constants as ct

T = TypeVar("T", bound="Base")


class Base(ctypes.Structure):
    # ffi/go/lib/lib.go
    BUFFER_SZ: int = 2048
    MCL: str = "mclBn{}_{}"

    def __str__(self) -> str:
        return f"{self.__class__} {self.to_hex()}"

    def __repr__(self) -> str:
        return str(self)

    def is_zero(self) -> bool:
        return bool(self._call("isZero"))

    def __eq__(self, y: Self) -> bool:  # type: ignore
        return bool(self._call("isEqual", y))

    def __add__(self, y: Self) -> Self:
        return self._call("add", y, ret=True)

    def __mul__(self, y: Self) -> Self:
        return self._call("mul", y, ret=True)

    def to_bytes(self) -> bytes:
        func = self._func(
            "serialize",
            [
                ctypes.c_char_p,
                ctypes.c_size_t,
                ctypes.POINTER(self.__class__),
            ],
            ctypes.c_size_t,
        )
        buffer = ctypes.create_string_buffer(self.BUFFER_SZ)
        sz = func(buffer, self.BUFFER_SZ, self)
        if not sz:
            raise RuntimeError(
                f"Failed to call {self.__class__.__name__}.serialize()"
            )
        return buffer.raw[:sz]

    def set_bytes(self, buffer: bytes) -> None:
        func = self._func(
            "deserialize",
            [
                ctypes.POINTER(self.__class__),
                ctypes.c_char_p,
                ctypes.c_size_t,
            ],
            ctypes.c_size_t,
        )
        if not func(self, buffer, len(buffer)):
            raise RuntimeError(
                f"Failed to call {self.__class__.__name__}.deserialize()"
            )

    @classmethod
    def from_bytes(cls: Type[T], buffer: bytes) -> T:
        ret = cls()
        ret.set_bytes(buffer)
        return ret

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    def to_b64(self) -> str:
        return b64encode(self.to_bytes()).decode()

    def set_b64(self, s: str | bytes) -> None:
        if isinstance(s, str):
            s = s.encode()
        elif not isinstance(s, bytes):
            raise TypeError(f"Invalid {s} type. Expected str/bytes")
        return self.set_bytes(b64decode(s))

    @classmethod
    def from_b64(cls: Type[T], s: str | bytes) -> T:
        ret = cls()
        ret.set_b64(s)
        return ret

    def _call(self, fn: str, y: Self | None = None, ret: bool = False) -> Any:
        argtypes = [ctypes.POINTER(self.__class__)] * (1 if y is None else 2)
        restype = None if ret else ctypes.c_int
        if ret:
            argtypes.append(ctypes.POINTER(self.__class__))
        func = self._func(fn, argtypes, restype)
        if ret:
            obj = self.__class__()
            if y is None:
                func(obj, self)
            else:
                func(obj, self, y)
            return obj
        else:
            if y is None:
                return func(self)
            return func(self, y)

    def _func(
        self, fn: str, argtypes: list[Any], restype: Any | None = None
    ) -> Any:
        if ct.lib is None:
            raise RuntimeError("mcl library not loaded, call load_library()")
        func = getattr(ct.lib, self.MCL.format(self.__class__.__name__, fn))
        func.argtypes = argtypes
        func.restype = restype
        return func


# noinspection PyUnresolvedReferences
class RandomMixin:
    def set_random(self) -> None:
        func = self._func(
            "setByCSPRNG",
            [ctypes.POINTER(self.__class__)],
            ctypes.c_int,
        )
        if func(self):
            raise RuntimeError(
                f"Failed to call {self.__class__.__name__}.setByCSPRNG()"
            )

    @classmethod
    def from_random(cls: Type[T]) -> T:
        ret = cls()
        ret.set_random()
        return ret

    def set_little_endian_mod(self, buffer: bytes) -> None:
        """
        Set the element to the little endian integer in buffer reduced
        modulo the field order. buffer may be up to twice the byte size.
        """
        if not isinstance(buffer, bytes):
            raise TypeError(f"Invalid {buffer} type. Expected bytes")
        func = self._func(
            "setLittleEndianMod",
            [
                ctypes.POINTER(self.__class__),
                ctypes.c_char_p,
                ctypes.c_size_t,
            ],
            ctypes.c_int,
        )
        if func(self, buffer, len(buffer)):
            raise RuntimeError(
                f"Failed to call {self.__class__.__name__}.setLittleEndianMod()"
            )

    @classmethod
    def from_little_endian_mod(cls: Type[T], buffer: bytes) -> T:
        ret = cls()
        ret.set_little_endian_mod(buffer)
        return ret


# noinspection PyUnresolvedReferences
class MulFrMixin:
    def _mul_fr(self, fn: str, y: "Fr") -> Self:
        if not isinstance(y, Fr):
            raise TypeError(f"Invalid {y} type. Expected Fr")
        func = self._func(
            fn, [ctypes.POINTER(self.__class__)] * 2 + [ctypes.POINTER(Fr)]
        )
        ret = self.__class__()
        func(ret, self, y)
        return ret

    def __mul__(self, y: "Fr") -> Self:
        # Variable time, only for public scalars
        return self._mul_fr("mul", y)

    def mul_ct(self, y: "Fr") -> Self:
        """
        Constant time scalar multiplication, use it whenever y is secret.
        """
        return self._mul_fr("mulCT", y)


# noinspection PyUnresolvedReferences
class PowMixin:
    def __pow__(self, y: Self) -> Self:
        return self._call("pow", y, ret=True)


# noinspection PyUnresolvedReferences
class PowFrMixin:
    def __pow__(self, y: "Fr") -> Self:
        func = self._func(
            "pow", [ctypes.POINTER(self.__class__)] * 2 + [ctypes.POINTER(Fr)]
        )
        ret = self.__class__()
        func(ret, self, y)
        return ret


# noinspection PyUnresolvedReferences
class HashAndMapMixin:
    def set_hash(self, s: bytes) -> None:
        if not isinstance(s, bytes):
            raise TypeError(f"Invalid {s} type. Expected bytes")
        func = self._func(
            "hashAndMapTo",
            [
                ctypes.POINTER(self.__class__),
                ctypes.c_char_p,
                ctypes.c_size_t,
            ],
            ctypes.c_int,
        )
        if func(self, s, len(s)):
            raise RuntimeError(
                f"Failed to call {self.__class__.__name__}.hashAndMapTo()"
            )

    @classmethod
    def from_hash(cls: Type[T], s: bytes) -> T:
        ret = cls()
        ret.set_hash(s)
        return ret


# noinspection PyUnresolvedReferences
class IntMixin:
    def set_int(self, i: int) -> None:
        if not isinstance(i, int):
            raise TypeError(f"Invalid {i} type. Expected int")
        func = self._func(
            "setInt", [ctypes.POINTER(self.__class__), ctypes.c_int64]
        )
        func(self, i)

    @classmethod
    def from_int(cls: Type[T], i: int) -> T:
        ret = cls()
        ret.set_int(i)
        return ret


class Fp(Base):
    _fields_ = [("d", ctypes.c_uint64 * ct.MCLBN_FP_UNIT_SIZE)]  # noqa


class Fr(RandomMixin, PowMixin, IntMixin, Base):
    _fields_ = [("d", ctypes.c_uint64 * ct.MCLBN_FR_UNIT_SIZE)]  # noqa

    @classmethod
    def one(cls) -> "Fr":
        return cls.from_int(1)


class Fp2(Base):
    D: int = 2
    _fields_ = [("d", Fp * D)]


class G1(MulFrMixin, HashAndMapMixin, Base):
    _fields_ = [("x", Fp), ("y", Fp), ("z", Fp)]


class G2(MulFrMixin, HashAndMapMixin, Base):
    _fields_ = [("x", Fp2), ("y", Fp2), ("z", Fp2)]


class GT(PowFrMixin, Base):
    D: int = 12
    _fields_ = [("d", Fp * D)]

    @classmethod
    def pairing(cls: Type[T], e1: "G1", e2: "G2") -> T:
        if ct.lib is None:
            raise RuntimeError("mcl library not loaded, call load_library()")
        func = getattr(ct.lib, "mclBn_pairing")
        func.argtypes = [
            ctypes.POINTER(cls),
            ctypes.POINTER(G1),
            ctypes.POINTER(G2),
        ]
        func.restype = None
        ret = cls()
        func(ret, e1, e2)
        return ret
