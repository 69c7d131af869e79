"""Preset patterns and grid file formats."""

from .patterns import (
    glider,
    r_pentomino,
    light_weight_spaceship,
    get_pattern,
    get_all_patterns,
    place_pattern,
    PATTERN_CATEGORIES
)
from .formats import (
    encode_ascii,
    decode_ascii,
    encode_binary,
    decode_binary,
    load_ascii,
    save_ascii,
    load_binary,
    save_binary,
    load_grid,
    save_grid
)

__all__ = [
    'glider',
    'r_pentomino',
    'light_weight_spaceship',
    'get_pattern',
    'get_all_patterns',
    'place_pattern',
    'PATTERN_CATEGORIES',
    'encode_ascii',
    'decode_ascii',
    'encode_binary',
    'decode_binary',
    'load_ascii',
    'save_ascii',
    'load_binary',
    'save_binary',
    'load_grid',
    'save_grid',
]
