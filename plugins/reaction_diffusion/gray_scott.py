"""
Gray-Scott Reaction-Diffusion Stepper

Two chemical species (A, B) react and diffuse on a 2D grid:
  A + 2B -> 3B  (autocatalytic reaction)
  A is continuously fed in, B is continuously removed.

Equations (unit diffusion for both species):
  dA/dt = laplacian(A) - A*B^2 + F*(1-A)
  dB/dt = laplacian(B) + A*B^2 - (F+K)*B

Integrated with one forward-Euler step per call, dt=0.05 by default.
The laplacian is the 4-neighbour stencil (+1 per neighbour, -4 centre).

Only interior cells are updated. Results go into the staging buffers and
are committed once every interior cell is done, so no freshly computed
value leaks into a neighbour's stencil. The border ring is left as it
was seeded, which acts as a fixed-value boundary.

There is no stability control: with unit diffusion the explicit scheme
needs 4*dt < 0.5, so a larger dt must be re-validated by hand.

References:
  Pearson, "Complex Patterns in a Simple System" (1993)
"""

import numpy as np
from scipy import ndimage


class GrayScott:

    def __init__(self, feed=0.03, kill=0.06, dt=0.05):
        self.feed = feed
        self.kill = kill
        self.dt = dt
        # Work buffers, (re)allocated for the grid shape on first step
        self._shape = None

    def _allocate(self, shape):
        h, w = shape
        inner = (max(h - 2, 0), max(w - 2, 0))
        self._lap_a = np.empty(shape, dtype=np.float32)
        self._lap_b = np.empty(shape, dtype=np.float32)
        self._abb = np.empty(inner, dtype=np.float32)
        self._tmp = np.empty(inner, dtype=np.float32)
        self._shape = shape

    def step(self, state):
        """Advance the grid by one time step and commit it."""
        if state.shape != self._shape:
            self._allocate(state.shape)

        inner = state.interior()
        a = state.a[inner]
        b = state.b[inner]
        if a.size == 0:
            state.commit()
            return state

        F = np.float32(self.feed)
        FK = np.float32(self.feed + self.kill)
        dt = np.float32(self.dt)

        # Interior laplacian values do not depend on the boundary mode
        ndimage.laplace(state.a, output=self._lap_a, mode="nearest")
        ndimage.laplace(state.b, output=self._lap_b, mode="nearest")
        lap_a = self._lap_a[inner]
        lap_b = self._lap_b[inner]

        # abb = A * B * B
        np.multiply(b, b, out=self._abb)
        self._abb *= a

        # next_a = a + dt * (lap_a - abb + F*(1-a))
        tmp = self._tmp
        np.subtract(np.float32(1.0), a, out=tmp)
        tmp *= F
        tmp += lap_a
        tmp -= self._abb
        tmp *= dt
        np.add(a, tmp, out=state.next_a[inner])

        # next_b = b + dt * (lap_b + abb - (F+K)*b)
        np.multiply(b, FK, out=tmp)
        np.subtract(lap_b, tmp, out=tmp)
        tmp += self._abb
        tmp *= dt
        np.add(b, tmp, out=state.next_b[inner])

        state.commit()
        return state

    def step_n(self, state, n):
        """Advance n steps without noise."""
        for _ in range(n):
            self.step(state)
        return state

    def set_params(self, feed=None, kill=None, dt=None, **kwargs):
        if feed is not None:
            self.feed = feed
        if kill is not None:
            self.kill = kill
        if dt is not None:
            self.dt = dt

    def get_params(self):
        return {
            "feed": self.feed,
            "kill": self.kill,
            "dt": self.dt,
        }
