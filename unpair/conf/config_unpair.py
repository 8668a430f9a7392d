from cistell import ConfigField

from unpair.conf.config_base import ConfigUnpairBase


class ConfigUnpair(ConfigUnpairBase):
    """
    Main config of a pair codec.

    :cvar str codec_id:
        The id of the codec, used to name its logger.
    :cvar str serializer_cls:
        Name of the :class:`~unpair.serializer.BaseSerializer` subclass used to
        turn pairs into text and back.
    :cvar str logging_level:
        The logging level of the codec ('debug', 'info', 'warning', etc.).
    :cvar bool log_use_colors:
        If True, log records are colored with ANSI codes.
    """

    codec_id = ConfigField("unpair")
    serializer_cls = ConfigField("JsonSerializer")
    logging_level = ConfigField("info")
    log_use_colors = ConfigField(True)
