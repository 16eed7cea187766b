"""Gray-Scott reaction-diffusion simulation with a pygame viewer."""

from .config import SimulationConfig
from .errors import AssetLoadError, ConfigurationError, ReactionDiffusionError
from .simulation import Simulation
