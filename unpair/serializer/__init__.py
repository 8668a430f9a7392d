from unpair.serializer.base_serializer import BaseSerializer
from unpair.serializer.json_pickle_serializer import JsonPickleSerializer
from unpair.serializer.json_serializer import JsonSerializer
from unpair.serializer.pickle_serializer import PickleSerializer

__all__ = [
    "BaseSerializer",
    "JsonPickleSerializer",
    "JsonSerializer",
    "PickleSerializer",
]
