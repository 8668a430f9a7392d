TOML_CONFIG_ID = "unpair"
ENV_PREFIX = "UNPAIR"
ENV_SEPARATOR = "__"
ENV_FILEPATH = "FILEPATH"
IGNORE_CLASS_NAME_SUBSTR = "Config"
