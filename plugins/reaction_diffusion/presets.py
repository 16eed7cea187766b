"""
Reaction-Diffusion Parameter Presets

Each preset is a named set of configuration values for the Gray-Scott
model. The "seed" field picks the seeding strategy (pools, image).
Anything not listed falls back to the SimulationConfig defaults.
"""

PRESETS = {
    "pools": {
        "name": "Pools",
        "description": "A=1 everywhere with 100 random 20x20 pools of B",
        "feed": 0.03, "kill": 0.06,
        "seed": "pools", "patch_count": 100, "patch_size": 20,
    },
    "image": {
        "name": "Image",
        "description": "Two-tone seed thresholded from a picture (needs --image)",
        "feed": 0.03, "kill": 0.06,
        "seed": "image", "threshold": 128,
    },
    "coral": {
        "name": "Coral",
        "description": "Branching stripes that fill the grid",
        "feed": 0.0545, "kill": 0.062,
        "seed": "pools", "patch_count": 40, "patch_size": 20,
    },
    "mitosis": {
        "name": "Mitosis",
        "description": "Spots that grow and split",
        "feed": 0.0367, "kill": 0.0649,
        "seed": "pools", "patch_count": 60, "patch_size": 10,
    },
}

PRESET_ORDER = ["pools", "image", "coral", "mitosis"]


def get_preset(key):
    """Return preset dict by key, or None if not found."""
    return PRESETS.get(key)


def list_presets():
    """Return list of (key, name, description) tuples in display order."""
    return [
        (k, PRESETS[k]["name"], PRESETS[k]["description"])
        for k in PRESET_ORDER
        if k in PRESETS
    ]
