# vectors3d/__init__.py

from .complexmath import I, mul_i, exp_i
from .vector3d import Vec3, I3, R3, C3
from .errors import NullVectorError
from . import r3util

__all__ = [
    'I', 'mul_i', 'exp_i',
    'Vec3', 'I3', 'R3', 'C3',
    'NullVectorError',
    'r3util',
]
