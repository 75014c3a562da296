from .num_utils import (
    uint32,
    uint8,
    np_uint32,
    np_uint8,
    round_half_up,
    finite,
)
from .strings import kebab_case

__all__ = [
    'uint32',
    'uint8',
    'np_uint32',
    'np_uint8',
    'round_half_up',
    'finite',
    'kebab_case',
]
