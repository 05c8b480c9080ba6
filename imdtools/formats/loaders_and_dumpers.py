from typing import Dict

from . import imd_json
from .enum import Format
from .typing import Dumper, Loader

LOADERS: Dict[Format, Loader] = {
    Format.IMD_JSON: imd_json.load_imd_json,
}

DUMPERS: Dict[Format, Dumper] = {
    Format.IMD_JSON: imd_json.dump_imd_json,
}
