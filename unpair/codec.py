from functools import cached_property
from typing import Any, Optional

from unpair.conf.config_unpair import ConfigUnpair
from unpair.exceptions import ConfigurationError, FormatError
from unpair.pair import UnorderedPair
from unpair.serializer.base_serializer import BaseSerializer
from unpair.types import Decoder, T
from unpair.util.log import CodecLogAdapter, create_logger
from unpair.util.subclasses import get_subclass


class PairCodec:
    """
    Turns unordered pairs into text and back with a configurable serializer.

    The serializer, the logging level and the codec id come from a
    :class:`~unpair.conf.ConfigUnpair`, which reads defaults, config files,
    environment variables and the explicit ``config_values``.

    :param Optional[str] codec_id:
        The id of the codec, overrides the configured one.
    :param Optional[dict[str, Any]] config_values:
        A dictionary of configuration values.
    :param Optional[str] config_filepath:
        A path to a configuration file.
    """

    def __init__(
        self,
        codec_id: Optional[str] = None,
        config_values: Optional[dict[str, Any]] = None,
        config_filepath: Optional[str] = None,
    ) -> None:
        self._codec_id = codec_id
        self.config_values = config_values
        self.config_filepath = config_filepath

    @property
    def codec_id(self) -> str:
        return self._codec_id or self.conf.codec_id

    @cached_property
    def conf(self) -> ConfigUnpair:
        return ConfigUnpair(
            config_values=self.config_values, config_filepath=self.config_filepath
        )

    @cached_property
    def logger(self) -> CodecLogAdapter:
        return CodecLogAdapter(create_logger(self), self.codec_id)

    @cached_property
    def serializer(self) -> BaseSerializer:
        try:
            serializer_cls = get_subclass(
                BaseSerializer, self.conf.serializer_cls  # type: ignore[type-abstract]
            )
        except KeyError as ex:
            raise ConfigurationError(
                f"Unknown serializer class: {self.conf.serializer_cls}"
            ) from ex
        return serializer_cls()

    @property
    def serializer_name(self) -> str:
        return type(self.serializer).__name__

    def dumps(self, pair: UnorderedPair[Any]) -> str:
        """
        Serializes a pair with the configured serializer.

        :param UnorderedPair pair: The pair to serialize.
        :return: The text form of the pair.
        """
        text = self.serializer.serialize(pair)
        self.logger.debug(f"Serialized {pair!r} with {self.serializer_name}")
        return text

    def loads(
        self,
        text: str,
        element_type: Optional[type[T]] = None,
        decoder: Optional[Decoder[T]] = None,
    ) -> UnorderedPair[T]:
        """
        Deserializes a pair with the configured serializer.

        :param str text: The text form of the pair.
        :param Optional[type[T]] element_type: Expected type of both elements.
        :param Optional[Decoder[T]] decoder: Callable applied to each element.
        :return: The deserialized pair.
        :raises FormatError: If the text is not a valid pair.
        """
        try:
            pair = self.serializer.deserialize(text, element_type, decoder)
        except FormatError as ex:
            self.logger.warning(f"Cannot load pair with {self.serializer_name}: {ex}")
            raise
        self.logger.debug(f"Deserialized {pair!r} with {self.serializer_name}")
        return pair
