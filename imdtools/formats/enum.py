from enum import Enum


class Format(str, Enum):
    IMD_JSON = "imd-json"
