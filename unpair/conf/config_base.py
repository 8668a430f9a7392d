from cistell import ConfigBase

from unpair.conf import constants


class ConfigUnpairBase(ConfigBase):
    """Base Config for the unpair library"""

    TOML_CONFIG_ID: str = constants.TOML_CONFIG_ID
    ENV_PREFIX: str = constants.ENV_PREFIX
    ENV_SEP: str = constants.ENV_SEPARATOR
    ENV_FILEPATH: str = constants.ENV_FILEPATH
    IGNORE_CLASS_NAME_SUBSTR: str = constants.IGNORE_CLASS_NAME_SUBSTR
