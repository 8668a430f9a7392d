from .config_base import ConfigUnpairBase
from .config_unpair import ConfigUnpair

__all__ = ["ConfigUnpairBase", "ConfigUnpair"]
