"""
Simulation Configuration

SimulationConfig is the single record of everything a run can tune:
grid size, reaction rates, integration step, noise and seeding options.
Values are checked up front; nothing is clamped silently.

Defaults reproduce the reference run:
    600x600 grid, F=0.03, K=0.06, dt=0.05,
    5% noise of +/-0.1, 100 pools of 20x20.
"""

from .errors import ConfigurationError
from .presets import get_preset

DEFAULTS = {
    "width": 600,
    "height": 600,
    "feed": 0.03,
    "kill": 0.06,
    "dt": 0.05,
    "noise_prob": 0.05,
    "noise_amp": 0.1,
    "patch_count": 100,
    "patch_size": 20,
    "seed": "pools",
    "image": None,
    "threshold": 128,
}

SEED_TYPES = ("pools", "image")

# Preset keys that describe the preset rather than configure the run
_PRESET_META = {"name", "description"}


class SimulationConfig:
    """Validated parameter set for one simulation run."""

    def __init__(self, **params):
        for key, value in DEFAULTS.items():
            setattr(self, key, value)
        self.set_params(**params)

    @classmethod
    def from_preset(cls, key, **overrides):
        """Build a config from a named preset plus explicit overrides.

        Overrides whose value is None are ignored, so CLI flags that were
        not given do not mask the preset.
        """
        preset = get_preset(key)
        if preset is None:
            raise ConfigurationError(f"Unknown preset: {key}")
        params = {k: v for k, v in preset.items() if k not in _PRESET_META}
        params.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**params)

    def set_params(self, **params):
        unknown = set(params) - set(DEFAULTS)
        if unknown:
            raise ConfigurationError(
                f"Unknown config keys: {', '.join(sorted(unknown))}")
        for key, value in params.items():
            setattr(self, key, value)

    def get_params(self):
        return {key: getattr(self, key) for key in DEFAULTS}

    def validate(self):
        """Raise ConfigurationError on the first invalid field.

        Returns self so construction and checking can be chained.
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if self.dt <= 0:
            raise ConfigurationError(f"dt must be positive, got {self.dt}")
        if not 0.0 <= self.noise_prob <= 1.0:
            raise ConfigurationError(
                f"noise_prob must be in [0, 1], got {self.noise_prob}")
        if self.noise_amp < 0:
            raise ConfigurationError(
                f"noise_amp must be non-negative, got {self.noise_amp}")
        if self.seed not in SEED_TYPES:
            raise ConfigurationError(
                f"Unknown seed type: {self.seed} (expected one of {', '.join(SEED_TYPES)})")

        if self.seed == "pools":
            if self.patch_count < 0:
                raise ConfigurationError(
                    f"patch_count must be non-negative, got {self.patch_count}")
            if self.patch_size <= 0:
                raise ConfigurationError(
                    f"patch_size must be positive, got {self.patch_size}")
            if self.patch_size > self.width or self.patch_size > self.height:
                raise ConfigurationError(
                    f"patch_size {self.patch_size} does not fit a "
                    f"{self.width}x{self.height} grid")
        elif self.seed == "image":
            if not self.image:
                raise ConfigurationError("Image seeding needs an image path")
            if not 0 <= self.threshold <= 255:
                raise ConfigurationError(
                    f"threshold must be in [0, 255], got {self.threshold}")
        return self

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self.get_params().items())
        return f"SimulationConfig({fields})"
