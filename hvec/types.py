"""Define type aliases purely for documentation purposes."""
import numpy as np
from typing import Union

# float32 arrays of shape (4,).
Vec = np.ndarray
# Vec with w == 1.
Point = np.ndarray
# Vec with w == 0.
Direction = np.ndarray

Scalar = Union[float, np.float32]
