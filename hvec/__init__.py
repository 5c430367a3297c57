"""Homogeneous-coordinate vector algebra for 3D geometry."""
from .v4h import *
from .v4 import *
from .backend import set_backend, get_backend, load_backend, configure_backend
