"""
Simulation — one owned reaction-diffusion run

Ties together the grid, seed strategy, noise and stepper with zero
pygame dependency. Everything a run mutates lives on the instance;
there is no module-level state.

Per frame the driver calls, in order:
    inject_noise() -> step() -> render()
`frame()` does the first two.

Usage:
    from reaction_diffusion.simulation import Simulation
    sim = Simulation(width=256, height=256)
    sim.frame()
    rgba = sim.render()  # (H, W, 4) uint8
"""

import numpy as np

from .config import SimulationConfig
from .errors import ConfigurationError
from .gray_scott import GrayScott
from .grid import GridState
from .noise import inject_noise
from .render import to_rgba
from .seeding import make_seed


class Simulation:
    """Session handle owning the fields, stepper and random source."""

    def __init__(self, config=None, rng=None, **overrides):
        """
        Args:
            config: SimulationConfig (defaults if None)
            rng: numpy Generator; unseeded if None, so runs vary
            **overrides: config fields to replace

        Raises:
            ConfigurationError: invalid config
            AssetLoadError: image seeding with an unreadable image
        """
        if config is None:
            config = SimulationConfig(**overrides)
        elif overrides:
            config = SimulationConfig(**{**config.get_params(), **overrides})
        self.config = config.validate()
        self.rng = rng if rng is not None else np.random.default_rng()

        self.state = GridState(config.width, config.height)
        self.stepper = GrayScott(feed=config.feed, kill=config.kill, dt=config.dt)
        self.seeder = make_seed(config)
        self.generation = 0
        self.initialize()

    @property
    def width(self):
        return self.state.width

    @property
    def height(self):
        return self.state.height

    def initialize(self):
        """(Re)seed the grid and reset the generation counter."""
        self.seeder.apply(self.state, self.rng)
        self.generation = 0

    def inject_noise(self):
        return inject_noise(self.state, self.rng,
                            prob=self.config.noise_prob,
                            amp=self.config.noise_amp)

    def step(self):
        """Advance one time step. Returns the GridState."""
        self.stepper.step(self.state)
        self.generation += 1
        return self.state

    def frame(self):
        """One driver frame minus rendering: noise, then step."""
        self.inject_noise()
        return self.step()

    def step_n(self, n, noise=True):
        """Advance n frames (with or without noise). Returns final state."""
        for _ in range(n):
            if noise:
                self.inject_noise()
            self.step()
        return self.state

    def render(self):
        return to_rgba(self.state.a, self.state.b)

    def set_params(self, feed=None, kill=None, dt=None, noise_prob=None,
                   noise_amp=None, **kwargs):
        """Update rates between frames. Grid size and seeding are fixed."""
        if kwargs:
            raise ConfigurationError(
                f"Cannot change between frames: {', '.join(sorted(kwargs))}")
        updates = {
            k: v for k, v in (("feed", feed), ("kill", kill), ("dt", dt),
                              ("noise_prob", noise_prob), ("noise_amp", noise_amp))
            if v is not None
        }
        if not updates:
            return
        candidate = SimulationConfig(**{**self.config.get_params(), **updates})
        self.config = candidate.validate()
        self.stepper.set_params(feed=feed, kill=kill, dt=dt)

    def get_params(self):
        return self.config.get_params()

    @property
    def stats(self):
        """Return current field statistics."""
        a, b = self.state.a, self.state.b
        return {
            "generation": self.generation,
            "mean_a": float(a.mean()),
            "mean_b": float(b.mean()),
            "min_b": float(b.min()),
            "max_b": float(b.max()),
        }
