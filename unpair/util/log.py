import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any, Literal

from unpair.exceptions import ConfigurationError

if TYPE_CHECKING:
    from logging import LogRecord

    from unpair.codec import PairCodec


class Colors:
    """ANSI color codes for terminal coloring."""

    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"
    RED_BG = "\033[41m"
    WHITE = "\033[37m"


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors the level, the logger name and the message of each record.
    """

    LEVEL_COLORS = {
        "DEBUG": Colors.CYAN,
        "INFO": Colors.GREEN,
        "WARNING": Colors.YELLOW,
        "ERROR": Colors.RED,
        "CRITICAL": f"{Colors.WHITE}{Colors.RED_BG}",
    }

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: Literal["%", "{", "$"] = "%",
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)

    def format(self, record: "LogRecord") -> str:
        color = self.LEVEL_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)
        # the record is shared with other handlers, restore it after formatting
        levelname, name, msg = record.levelname, record.name, record.msg
        record.levelname = f"{color}{levelname:<8}{Colors.RESET}"
        record.name = f"{Colors.BLUE}{name}{Colors.RESET}"
        record.msg = f"{color}{msg}{Colors.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname, record.name, record.msg = levelname, name, msg


def create_logger(codec: "PairCodec") -> logging.Logger:
    """
    Creates the logger of a codec, with timestamps and optional colored output.

    :param PairCodec codec: The codec instance for which the logger is created.
    :return: The created logger.
    :raises ConfigurationError: If the logging level is invalid.
    """
    logger = logging.getLogger(f"unpair.{codec.codec_id}")
    handler = logging.StreamHandler()
    if codec.conf.log_use_colors:
        formatter: logging.Formatter = ColoredFormatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)-8s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    handler.setFormatter(formatter)
    logger.handlers = [handler]

    if level_name := codec.conf.logging_level:
        numeric_level = getattr(logging, level_name.upper(), None)
        if not isinstance(numeric_level, int):
            raise ConfigurationError(f"Invalid log level: {level_name}")
        logger.setLevel(numeric_level)

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False
    return logger


class CodecLogAdapter(logging.LoggerAdapter):
    """
    Logger adapter that prefixes messages with the codec id.

    :param logging.Logger logger: The logger instance.
    :param str codec_id: The ID of the codec.
    """

    def __init__(self, logger: logging.Logger, codec_id: str):
        super().__init__(logger, {})
        self.codec_id = codec_id

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple:
        return f"[codec: {self.codec_id}] {msg}", kwargs
