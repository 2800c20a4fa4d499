from abc import ABC, abstractmethod
from typing import KeysView, Type


class Container(ABC):
    _name: str
    _container_name: str

    @abstractmethod
    def info(self) -> tuple[str, str, KeysView]:
        """
        Listing of internal properties
        """

    @abstractmethod
    def to_b64(self) -> str:
        """
        Export internal properties to base64
        """

    @abstractmethod
    def set_b64(self, s: str | bytes) -> None:
        """
        Import base64 to internal properties
        """

    @classmethod
    @abstractmethod
    def from_b64(cls: Type["Container"], s: str | bytes) -> "Container":
        """
        Create new object from base64
        """
