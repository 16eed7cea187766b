"""
Reaction-Diffusion Error Types

Only two things can go wrong before the first frame: a bad configuration
or a seed image that cannot be read. Once a run is going, nothing raises;
out-of-range concentrations are normal transients.
"""


class ReactionDiffusionError(Exception):
    """Base class for all simulation errors."""


class ConfigurationError(ReactionDiffusionError, ValueError):
    """Grid dimensions, rates or seeding options are invalid."""


class AssetLoadError(ReactionDiffusionError):
    """The seed image is missing or cannot be decoded."""

    def __init__(self, path, reason=""):
        self.path = path
        self.reason = reason
        msg = f"Cannot load seed image: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
