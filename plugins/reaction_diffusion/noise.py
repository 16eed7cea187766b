"""
Noise Injection

Small random kicks to interior cells each frame, so the patterns never
settle into a perfectly symmetric or static state. No clamping: values
may leave [0, 1] and the reaction-diffusion dynamics pull them back.
"""

import numpy as np


def inject_noise(state, rng, prob=0.05, amp=0.1):
    """Perturb A and B at randomly chosen interior cells.

    Each interior cell is picked independently with probability `prob`.
    A picked cell gets two independent uniform offsets in [-amp, amp],
    one added to A and one to B. The border ring is never touched.

    Args:
        state: GridState to modify in place
        rng: numpy Generator (seed it for reproducible runs)
        prob: per-cell, per-call probability
        amp: offset half-range

    Returns:
        Number of cells perturbed.
    """
    inner = state.interior()
    a = state.a[inner]
    b = state.b[inner]
    if a.size == 0 or prob <= 0:
        return 0

    picked = rng.random(a.shape) < prob
    n = int(picked.sum())
    if n:
        # closed range [-amp, amp]
        high = np.nextafter(amp, np.inf)
        a[picked] += rng.uniform(-amp, high, size=n).astype(np.float32)
        b[picked] += rng.uniform(-amp, high, size=n).astype(np.float32)
    return n
