"""Pygame presentation of generated systems.

Only :mod:`panels` and :mod:`share` avoid pygame; import the rest lazily.
"""

from .panels import planet_lines, star_lines, system_lines
from .share import decode_share_code, encode_share_code, universe_from_share_code

__all__ = [
    "decode_share_code",
    "encode_share_code",
    "planet_lines",
    "star_lines",
    "system_lines",
    "universe_from_share_code",
]
