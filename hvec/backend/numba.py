"""Buffer kernels compiled with numba.

Same contract as npscalar. Compiled with error_model='numpy' so division by zero gives inf/nan instead of raising.
"""
import numpy as np
from numba import njit

__all__ = ['equals', 'add', 'sub', 'scale', 'divide', 'dot_sum', 'length', 'hadamard', 'normalize', 'lerp']


@njit(error_model='numpy')
def equals(a, b):
    for i in range(4):
        if a[i] != b[i]:
            return False
    return True


@njit(error_model='numpy')
def add(out, a, b):
    for i in range(4):
        out[i] = a[i] + b[i]


@njit(error_model='numpy')
def sub(out, a, b):
    for i in range(4):
        out[i] = a[i] - b[i]


@njit(error_model='numpy')
def scale(out, a, f):
    for i in range(4):
        out[i] = a[i]*f


@njit(error_model='numpy')
def divide(out, a, f):
    for i in range(4):
        out[i] = a[i]/f


@njit(error_model='numpy')
def dot_sum(a, b):
    s = np.float32(0.)
    for i in range(4):
        s += a[i]*b[i]
    return s


@njit(error_model='numpy')
def length(a):
    return np.sqrt(dot_sum(a, a))


@njit(error_model='numpy')
def hadamard(out, a, b):
    for i in range(4):
        out[i] = a[i]*b[i]


@njit(error_model='numpy')
def normalize(out, a):
    divide(out, a, length(a))


@njit(error_model='numpy')
def lerp(out, a, b, f):
    for i in range(4):
        out[i] = a[i] + (b[i] - a[i])*f
