"""
Grid State Store

Holds the two live concentration fields (A, B) and the staging buffers
(next_a, next_b) that one update step writes into. All four arrays are
float32 of shape (height, width), indexed field[y, x]. Public accessors
take (x, y).

The outermost ring of cells is never written by the stepper or the noise
injector. Staging buffers are synced from the live fields after seeding,
so committing a step keeps the seeded border values.
"""

import numpy as np

from .errors import ConfigurationError


class GridState:
    """Live and staged concentration fields for one run."""

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ConfigurationError(
                f"Grid dimensions must be positive, got {width}x{height}")
        self.a = np.ones((height, width), dtype=np.float32)
        self.b = np.zeros((height, width), dtype=np.float32)
        self.next_a = self.a.copy()
        self.next_b = self.b.copy()

    @property
    def width(self):
        return self.a.shape[1]

    @property
    def height(self):
        return self.a.shape[0]

    @property
    def shape(self):
        """(height, width), the numpy shape of every field."""
        return self.a.shape

    def _check(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Cell ({x}, {y}) outside {self.width}x{self.height} grid")

    def get(self, x, y):
        """Return (a, b) at cell (x, y) as Python floats."""
        self._check(x, y)
        return float(self.a[y, x]), float(self.b[y, x])

    def set(self, x, y, a, b):
        """Write both concentrations at cell (x, y), live and staged."""
        self._check(x, y)
        self.a[y, x] = self.next_a[y, x] = a
        self.b[y, x] = self.next_b[y, x] = b

    def fill(self, a, b):
        self.a[:] = a
        self.b[:] = b
        self.sync_buffers()

    def load(self, a, b):
        """Bulk overwrite of the live fields, then sync the staging buffers."""
        a = np.asarray(a, dtype=np.float32)
        b = np.asarray(b, dtype=np.float32)
        if a.shape != self.shape or b.shape != self.shape:
            raise ConfigurationError(
                f"Field shapes {a.shape}/{b.shape} do not match grid {self.shape}")
        self.a[:] = a
        self.b[:] = b
        self.sync_buffers()

    def sync_buffers(self):
        """Copy the live fields into the staging buffers."""
        np.copyto(self.next_a, self.a)
        np.copyto(self.next_b, self.b)

    def commit(self):
        """Copy the staging buffers over the whole live grid."""
        np.copyto(self.a, self.next_a)
        np.copyto(self.b, self.next_b)

    @staticmethod
    def interior():
        """Index of the interior cells (everything but the outer ring)."""
        return (slice(1, -1), slice(1, -1))

    def border_mask(self):
        mask = np.ones(self.shape, dtype=bool)
        mask[self.interior()] = False
        return mask
