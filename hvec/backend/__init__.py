"""Raw buffer kernels behind the vector operations.

A backend is a module providing, on float32 arrays of shape (4,):

    equals(a, b) -> bool
    add(out, a, b), sub(out, a, b)
    scale(out, a, f), divide(out, a, f)
    dot_sum(a, b) -> scalar
    length(a) -> scalar
    hadamard(out, a, b)
    normalize(out, a)
    lerp(out, a, b, f)

Inputs are never written. Division by zero follows IEEE754 i.e. gives inf/nan without raising.

The active backend is npscalar until changed with set_backend, or with configure_backend, which applies the
'backend' key of hvec.yml (see hvec._utility.load_config).
"""
import logging
from .._utility import load_config
from . import npscalar

logger = logging.getLogger(__name__)

__all__ = ['BACKEND_NAMES', 'load_backend', 'set_backend', 'get_backend', 'configure_backend']

BACKEND_NAMES = 'npscalar', 'numba'

DEFAULT_BACKEND = 'npscalar'

_active = npscalar


def load_backend(name: str):
    """Import backend module by name."""
    if name == 'npscalar':
        from . import npscalar as module
    elif name == 'numba':
        from . import numba as module
    else:
        raise ValueError(f'Unknown backend {name}. Expected one of {BACKEND_NAMES}.')
    return module


def set_backend(module):
    global _active
    logger.info(f'Set hvec buffer backend to {module.__name__}.')
    _active = module


def get_backend():
    return _active


def configure_backend():
    """Set the backend named in hvec.yml, or the default if it names none."""
    module = load_backend(load_config().get('backend', DEFAULT_BACKEND))
    set_backend(module)
    return module
