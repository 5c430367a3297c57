"""Buffer kernels built on numpy ufuncs.

All functions take float32 arrays of shape (4,). Results are written to out, which must not alias an input.
"""
import numpy as np

__all__ = ['equals', 'add', 'sub', 'scale', 'divide', 'dot_sum', 'length', 'hadamard', 'normalize', 'lerp']


def equals(a, b) -> bool:
    # array_equal treats NaN as unequal.
    return bool(np.array_equal(a, b))


def add(out, a, b):
    np.add(a, b, out=out)


def sub(out, a, b):
    np.subtract(a, b, out=out)


def scale(out, a, f):
    np.multiply(a, f, out=out)


def divide(out, a, f):
    with np.errstate(divide='ignore', invalid='ignore'):
        np.divide(a, f, out=out)


def dot_sum(a, b):
    return (a*b).sum()


def length(a):
    return np.sqrt(dot_sum(a, a))


def hadamard(out, a, b):
    np.multiply(a, b, out=out)


def normalize(out, a):
    divide(out, a, length(a))


def lerp(out, a, b, f):
    np.subtract(b, a, out=out)
    np.multiply(out, f, out=out)
    np.add(a, out, out=out)
