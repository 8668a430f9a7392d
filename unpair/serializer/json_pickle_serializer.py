from typing import Any

import jsonpickle

from unpair.serializer.base_serializer import BaseSerializer


class JsonPickleSerializer(BaseSerializer):
    """
    Serializer using jsonpickle to preserve Python element types (tuples, NamedTuple, etc.).

    Note: jsonpickle can execute arbitrary code on load for some object types.
    Only use for trusted internal data.
    """

    decode_errors = (ValueError, TypeError, RecursionError)

    @staticmethod
    def encode(items: list[Any]) -> str:
        return jsonpickle.encode(items)

    @staticmethod
    def decode(text: str) -> Any:
        return jsonpickle.decode(text)
