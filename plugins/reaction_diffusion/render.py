"""
Color Mapping for Reaction-Diffusion Fields

Maps the two concentration fields to RGBA bytes:
  red   = A * 255
  green = B * 255
  blue  = (A*255 + B*255) / 2
  alpha = 255

Concentrations routinely leave [0, 1] (noise, overshoot), so every
channel is clamped to [0, 255] before the byte conversion instead of
wrapping around. Rounding is numpy's round-half-to-even.
"""

import numpy as np
from PIL import Image


def to_rgba(a, b):
    """Convert A/B fields of shape (H, W) to a (H, W, 4) uint8 image."""
    a = np.asarray(a, dtype=np.float32)
    b = np.asarray(b, dtype=np.float32)
    h, w = a.shape
    rgba = np.empty((h, w, 4), dtype=np.uint8)

    red = a * 255.0
    green = b * 255.0
    blue = (red + green) * 0.5
    for c, chan in enumerate((red, green, blue)):
        np.nan_to_num(chan, copy=False)
        np.rint(chan, out=chan)
        np.clip(chan, 0, 255, out=chan)
        rgba[:, :, c] = chan
    rgba[:, :, 3] = 255
    return rgba


def save_png(rgba, path):
    """Write an (H, W, 4) uint8 frame to disk."""
    Image.fromarray(rgba).save(path)
    return path
