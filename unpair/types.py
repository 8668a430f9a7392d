import typing

T = typing.TypeVar("T")
Decoder: typing.TypeAlias = typing.Callable[[typing.Any], T]
