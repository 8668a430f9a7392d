import json
from typing import Any

from unpair.pair import UnorderedPair
from unpair.serializer.base_serializer import BaseSerializer


class PairJSONEncoder(json.JSONEncoder):
    """
    A JSON encoder that also understands unordered pairs.

    Pairs found inside the elements (a pair of pairs, for example) are written as
    nested JSON arrays.
    """

    def default(self, obj: Any) -> Any:
        """
        Overrides the default method to encode nested pairs.

        :param Any obj: The object to be serialized.
        :returns:
            The two element list of 'obj' if it is a pair.
            For other types, it falls back to the superclass's default method.
        """
        if isinstance(obj, UnorderedPair):
            return obj.to_sequence()
        return super().default(obj)


class JsonSerializer(BaseSerializer):
    """
    Serializes pairs as JSON arrays, e.g. ``["a", "b"]``.

    ``json.JSONDecodeError`` is a ``ValueError``; non string inputs raise ``TypeError``
    and arrays nested too deep raise ``RecursionError``.
    """

    decode_errors = (ValueError, TypeError, RecursionError)

    @staticmethod
    def encode(items: list[Any]) -> str:
        return json.dumps(items, cls=PairJSONEncoder)

    @staticmethod
    def decode(text: str) -> Any:
        return json.loads(text)
