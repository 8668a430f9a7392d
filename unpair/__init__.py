from unpair.codec import PairCodec
from unpair.exceptions import ConfigurationError, FormatError, UnpairError
from unpair.pair import UnorderedPair

__all__ = [
    "ConfigurationError",
    "FormatError",
    "PairCodec",
    "UnorderedPair",
    "UnpairError",
]
