"""
Seeding Strategies

Every run starts from exactly one seed pattern. Strategies share one
interface so the session can pick them by name from the config:

  pools  - A=1, B=0 everywhere, then square pools painted with B=1
  image  - two-tone seed from a picture: dark red channel -> A, bright -> B

After writing the live fields, every strategy syncs the staging buffers
so the border ring keeps its seeded value once stepping starts.
"""

from abc import ABC, abstractmethod

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import AssetLoadError, ConfigurationError


class SeedStrategy(ABC):
    """Base class for seed patterns."""

    seed_name = ""   # e.g. "pools"
    seed_label = ""  # e.g. "Random pools"

    @abstractmethod
    def apply(self, state, rng):
        """Write the starting configuration into a GridState."""


class UniformPatches(SeedStrategy):

    seed_name = "pools"
    seed_label = "Random pools"

    def __init__(self, count=100, size=20):
        self.count = count
        self.size = size

    def apply(self, state, rng):
        """Paint `count` size x size pools of B=1 over a uniform A=1 grid.

        Origins are uniform over every position where the pool fits.
        Pools may overlap; painting only ever sets B to 1, and A is left
        at 1 inside pools too.

        Returns:
            List of (x, y) top-left origins, in painting order.
        """
        s = self.size
        if s <= 0 or s > state.width or s > state.height:
            raise ConfigurationError(
                f"Pool size {s} does not fit a {state.width}x{state.height} grid")

        state.fill(1.0, 0.0)
        xs = rng.integers(0, state.width - s + 1, size=self.count)
        ys = rng.integers(0, state.height - s + 1, size=self.count)
        origins = []
        for x0, y0 in zip(xs, ys):
            x0, y0 = int(x0), int(y0)
            state.b[y0:y0 + s, x0:x0 + s] = 1.0
            origins.append((x0, y0))
        state.sync_buffers()
        return origins


def load_seed_image(path, width, height):
    """Load a picture and resample it to exactly width x height.

    Returns:
        (height, width, 3) uint8 RGB array.

    Raises:
        AssetLoadError: the file is missing or not a decodable image.
    """
    try:
        with Image.open(path) as img:
            img = img.convert("RGB")
            if img.size != (width, height):
                img = img.resize((width, height), Image.Resampling.BICUBIC)
            return np.asarray(img, dtype=np.uint8)
    except FileNotFoundError as e:
        raise AssetLoadError(path, "file not found") from e
    except UnidentifiedImageError as e:
        raise AssetLoadError(path, "not a recognised image format") from e
    except OSError as e:
        raise AssetLoadError(path, str(e)) from e


class ImageThreshold(SeedStrategy):

    seed_name = "image"
    seed_label = "Image threshold"

    def __init__(self, path, threshold=128):
        self.path = path
        self.threshold = threshold

    def apply(self, state, rng=None):
        """Seed A/B from the red channel of the image.

        red < threshold -> A=1, B=0; otherwise A=0, B=1.
        Returns the boolean mask of B cells.
        """
        rgb = load_seed_image(self.path, state.width, state.height)
        is_b = rgb[:, :, 0] >= self.threshold
        state.a[:] = np.where(is_b, 0.0, 1.0)
        state.b[:] = np.where(is_b, 1.0, 0.0)
        state.sync_buffers()
        return is_b


def make_seed(config):
    """Build the seeding strategy named by config.seed."""
    if config.seed == "pools":
        return UniformPatches(count=config.patch_count, size=config.patch_size)
    if config.seed == "image":
        return ImageThreshold(config.image, threshold=config.threshold)
    raise ConfigurationError(f"Unknown seed type: {config.seed}")
