import binascii
import codecs
import pickle
from typing import Any

from unpair.serializer.base_serializer import BaseSerializer


class PickleSerializer(BaseSerializer):
    """
    Serializes the two element sequence of a pair with pickle.

    The pickled bytes are base64 encoded so the result is safe text.
    Only use for trusted data, unpickling can execute arbitrary code.
    """

    decode_errors = (
        ValueError,
        TypeError,
        EOFError,
        binascii.Error,
        pickle.UnpicklingError,
        ImportError,
        AttributeError,
        IndexError,
        KeyError,
    )

    @staticmethod
    def encode(items: list[Any]) -> str:
        return codecs.encode(pickle.dumps(items), "base64").decode()

    @staticmethod
    def decode(text: str) -> Any:
        return pickle.loads(codecs.decode(text.encode(), "base64"))
