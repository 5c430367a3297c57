"""Arithmetic on homogeneous 4-vectors.

Every operation allocates its result and acts on all four components, w included. So point + direction is a point,
point - point is a direction, but point + point has w = 2 and is neither. Division by zero (including normalizing a
zero vector) gives inf/nan rather than raising.

Numeric work is delegated to the active backend - see hvec.backend.
"""
import numpy as np
from .types import Vec, Point, Direction, Scalar
from .v4h import alloc_vec, copy_vec, make_direction, DTYPE
from . import backend

__all__ = ['add', 'sub', 'scale', 'divide', 'dot', 'hadamard', 'length', 'length_squared', 'normalize', 'lerp',
    'vmin', 'vmax', 'cross', 'triple', 'distance']


def add(a: Vec, b: Vec) -> Vec:
    r = alloc_vec()
    backend.get_backend().add(r, a, b)
    return r


def sub(a: Vec, b: Vec) -> Vec:
    r = alloc_vec()
    backend.get_backend().sub(r, a, b)
    return r


def scale(a: Vec, f: Scalar) -> Vec:
    r = alloc_vec()
    backend.get_backend().scale(r, a, DTYPE(f))
    return r


def divide(a: Vec, f: Scalar) -> Vec:
    r = alloc_vec()
    backend.get_backend().divide(r, a, DTYPE(f))
    return r


def dot(a: Vec, b: Vec) -> float:
    """Sum of products of all four components.

    Only meaningful for two directions.
    """
    return backend.get_backend().dot_sum(a, b)


def hadamard(a: Vec, b: Vec) -> Vec:
    r = alloc_vec()
    backend.get_backend().hadamard(r, a, b)
    return r


def length(a: Vec) -> float:
    """Euclidean length including w, so convert points to directions first."""
    return backend.get_backend().length(a)


def length_squared(a: Vec) -> float:
    return dot(a, a)


def normalize(a: Vec) -> Vec:
    r = alloc_vec()
    backend.get_backend().normalize(r, a)
    return r


def lerp(a: Vec, b: Vec, f: Scalar) -> Vec:
    """Linear interpolation, a at f = 0 and b at f = 1."""
    r = alloc_vec()
    backend.get_backend().lerp(r, a, b, DTYPE(f))
    return r


def vmin(v: Vec, *rest: Vec) -> Vec:
    """Elementwise minimum of one or more vectors."""
    r = copy_vec(v)
    for x in rest:
        np.minimum(r, x, out=r)
    return r


def vmax(v: Vec, *rest: Vec) -> Vec:
    """Elementwise maximum of one or more vectors."""
    r = copy_vec(v)
    for x in rest:
        np.maximum(r, x, out=r)
    return r


def cross(a: Direction, b: Direction) -> Direction:
    """Cross product of xyz parts. Operands are not checked to be directions."""
    return make_direction(a[1]*b[2] - a[2]*b[1], a[2]*b[0] - a[0]*b[2], a[0]*b[1] - a[1]*b[0])


def triple(a: Direction, b: Direction, c: Direction) -> float:
    """a dot (b cross c)"""
    return dot(a, cross(b, c))


def distance(p: Point, q: Point) -> float:
    return length(sub(p, q))
