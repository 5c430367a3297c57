"""Definitions for homogeneous vectors in 3D space.

Points and directions share one representation, a float32 array of shape (4,), and are told apart only by w: exactly
1 for a point, exactly 0 for a direction. Anything else is a raw vector, which is legal (e.g. the sum of two points)
but neither. Nothing is enforced except in the converters.

No function here writes into its arguments.
"""
from typing import Sequence
import numpy as np
from .types import Vec, Point, Direction
from . import backend

__all__ = ['TypeMismatchError', 'is_vec', 'is_point', 'is_direction', 'alloc_vec', 'make_vec', 'make_point',
    'make_direction', 'to_point', 'to_direction', 'point_to_direction', 'direction_to_point', 'vec_equals', 'copy_vec',
    'xhat', 'yhat', 'zhat', 'origin', 'unit_vectors']

DTYPE = np.float32


class TypeMismatchError(TypeError):
    """Homogeneous component is not what an operation requires."""


def is_vec(x) -> bool:
    return isinstance(x, np.ndarray) and x.shape == (4,) and x.dtype == DTYPE


def is_point(x) -> bool:
    return is_vec(x) and bool(x[3] == 1.)


def is_direction(v) -> bool:
    return is_vec(v) and bool(v[3] == 0.)


def alloc_vec() -> Vec:
    return np.zeros(4, DTYPE)


def make_vec(a: float, b: float, c: float, d: float) -> Vec:
    return np.array((a, b, c, d), DTYPE)


def make_point(x: float, y: float, z: float) -> Point:
    return make_vec(x, y, z, 1.)


def make_direction(a: float, b: float, c: float) -> Direction:
    return make_vec(a, b, c, 0.)


def _from_sequence(x: Sequence[float], w: float, kind: str) -> Vec:
    x = np.array(x, DTYPE)
    if x.shape == (3,):
        return make_vec(*x, w)
    if x.shape != (4,):
        raise ValueError(f'Expected 3 or 4 components, got shape {x.shape}.')
    if x[3] != w:
        raise TypeMismatchError(f'Expected {kind} (w = {w:g}), got w = {x[3]:g}.')
    return x


def to_point(x: Sequence[float]) -> Point:
    """Make point from xyz or xyzw sequence.

    A 4-sequence must already have w = 1.
    """
    return _from_sequence(x, 1., 'point')


def to_direction(x: Sequence[float]) -> Direction:
    """Make direction from xyz or xyzw sequence.

    A 4-sequence must already have w = 0.
    """
    return _from_sequence(x, 0., 'direction')


def _describe(x) -> str:
    if is_vec(x):
        return f'w = {x[3]:g}'
    return f'{type(x).__name__}, not a float32 4-vector'


def point_to_direction(p: Point) -> Direction:
    """Direction from origin to point p.

    Raises:
        TypeMismatchError: If p is not a point.
    """
    if not is_point(p):
        raise TypeMismatchError(f'Expected point (w = 1), got {_describe(p)}.')
    return make_direction(p[0], p[1], p[2])


def direction_to_point(v: Direction) -> Point:
    """Point reached by displacing the origin by v.

    Raises:
        TypeMismatchError: If v is not a direction.
    """
    if not is_direction(v):
        raise TypeMismatchError(f'Expected direction (w = 0), got {_describe(v)}.')
    return make_point(v[0], v[1], v[2])


def vec_equals(a: Vec, b: Vec) -> bool:
    """Exact equality of all four components. NaN is unequal to everything."""
    return bool(backend.get_backend().equals(a, b))


def copy_vec(v: Vec) -> Vec:
    r = alloc_vec()
    r[:] = v
    return r


def _constant(x: Vec) -> Vec:
    x.flags.writeable = False
    return x


xhat = _constant(make_direction(1, 0, 0))
yhat = _constant(make_direction(0, 1, 0))
zhat = _constant(make_direction(0, 0, 1))
origin = _constant(make_point(0, 0, 0))
unit_vectors = xhat, yhat, zhat
