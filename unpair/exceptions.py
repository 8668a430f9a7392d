"""
Global unpair exception classes.
"""
import json
from typing import Any, Optional

from .util.subclasses import get_all_subclasses


class UnpairError(Exception):
    """Base class for all unpair related errors."""

    def _to_json_dict(self) -> dict[str, Any]:
        """Returns a json serializable dictionary"""
        return self.__dict__

    @classmethod
    def _from_json_dict(cls, json_dict: dict[str, Any]) -> "UnpairError":
        """Returns a new error from the serialized json compatible dictionary"""
        return cls(**json_dict)

    def to_json(self) -> str:
        """Returns a string with the serialized error"""
        return json.dumps(self._to_json_dict())

    @classmethod
    def from_json(cls, error_name: str, serialized: str) -> "UnpairError":
        """Returns the child class from a serialized error"""
        for subcls in [cls, *get_all_subclasses(cls)]:
            if subcls.__name__ == error_name:
                return subcls._from_json_dict(json_dict=json.loads(serialized))
        raise ValueError(f"Unknown error type: {error_name}")


class FormatError(UnpairError):
    """
    Error raised when data cannot be turned into an unordered pair.

    It covers inputs that are not a two element sequence, elements that fail to
    decode into the expected element type and text that the serializer cannot parse.

    :param str message: Description of the problem.
    :param Optional[int] position: Index (0 or 1) of the element that failed, if any.
    """

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        self.message = message
        self.position = position
        super().__init__(message)

    def __str__(self) -> str:
        if self.position is None:
            return f"{self.__class__.__name__}: {self.message}"
        return f"{self.__class__.__name__}(position={self.position}): {self.message}"


class ConfigurationError(UnpairError):
    """Error raised when the codec configuration is not valid."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
