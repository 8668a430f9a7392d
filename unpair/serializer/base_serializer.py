from abc import ABC, abstractmethod
from typing import Any, Optional

from unpair.exceptions import FormatError
from unpair.pair import UnorderedPair
from unpair.types import Decoder, T


class BaseSerializer(ABC):
    """
    BaseSerializer is an abstract class that defines how pairs are turned into text and back.

    A pair always travels as its two element sequence (see :meth:`UnorderedPair.to_sequence`),
    so implementers only need to provide the format specific ``encode`` and ``decode``
    of that sequence. Parsing errors of the format are reported as :class:`FormatError`.
    """

    #: Exceptions the format raises on malformed input
    decode_errors: tuple[type[Exception], ...] = (ValueError,)

    @staticmethod
    @abstractmethod
    def encode(items: list[Any]) -> str:
        """
        Encodes the structured form of a pair into a string.

        :param list[Any] items: The two element list of a pair.
        :return: The string representation in the serializer format.
        """

    @staticmethod
    @abstractmethod
    def decode(text: str) -> Any:
        """
        Decodes a string into the data it represents, without validating it.

        :param str text: The string representation in the serializer format.
        :return: The decoded data, expected to be a two element sequence.
        """

    @classmethod
    def serialize(cls, pair: UnorderedPair[Any]) -> str:
        """
        Serializes a pair, keeping the order the elements were given in.

        :param UnorderedPair pair: The pair to serialize.
        :return: A string representation of the pair.
        """
        return cls.encode(pair.to_sequence())

    @classmethod
    def deserialize(
        cls,
        text: str,
        element_type: Optional[type[T]] = None,
        decoder: Optional[Decoder[T]] = None,
    ) -> UnorderedPair[T]:
        """
        Deserializes a string back into a pair.

        :param str text: The string representation of the pair.
        :param Optional[type[T]] element_type: Expected type of both elements.
        :param Optional[Decoder[T]] decoder: Callable applied to each element.
        :return: The deserialized pair.
        :raises FormatError: If the text cannot be parsed or is not a valid pair.
        """
        try:
            data = cls.decode(text)
        except cls.decode_errors as ex:
            raise FormatError(f"{cls.__name__} cannot decode input: {ex}") from ex
        return UnorderedPair.from_sequence(data, element_type, decoder)
