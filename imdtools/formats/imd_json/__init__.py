"""
imd-json
■━━━┓
    ■

A json rendition of IMD charts, written in authoring order. Hold chains are
stored as a single entry (start position and list of durations) and are
rebuilt through build_hold_chain when loading, the same way an editor
would create them.
"""

from .dump import dump_imd_json
from .load import load_imd_json
