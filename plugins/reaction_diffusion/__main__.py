"""
Reaction-Diffusion Viewer - Entry Point

Usage:
    python -m reaction_diffusion [preset] [options]

Options:
    --size WxH      Grid size (default 600x600)
    --scale N       Window pixels per cell (default 1)
    --image PATH    Seed image (image preset)
    --feed F        Feed rate
    --kill K        Kill rate
    --snap N        Headless: run N frames, save a PNG, exit
    --out PATH      PNG path for --snap (default rd_<preset>.png)
    --list          List presets

Examples:
    python -m reaction_diffusion
    python -m reaction_diffusion coral --size 400x400 --scale 2
    python -m reaction_diffusion image --image images/logo.png
    python -m reaction_diffusion pools --snap 2000
"""

import sys

from .config import SimulationConfig
from .errors import ReactionDiffusionError
from .presets import PRESET_ORDER, list_presets
from .render import save_png
from .simulation import Simulation


def snap(sim, preset, steps, out_path=None):
    """Headless mode: run N frames, save screenshot, exit."""
    print(f"  {preset}: running {steps} frames...", end="", flush=True)
    sim.step_n(steps)
    path = out_path or f"rd_{preset}.png"
    save_png(sim.render(), path)
    print(f" saved: {path}")
    return path


def main(argv=None):
    preset = "pools"
    width = height = None
    scale = 1
    image = None
    feed = kill = None
    snap_steps = 0
    out_path = None

    args = sys.argv[1:] if argv is None else argv
    i = 0
    try:
        while i < len(args):
            arg = args[i]
            if arg == "--size" and i + 1 < len(args):
                parts = args[i + 1].lower().split("x")
                width, height = int(parts[0]), int(parts[1])
                i += 2
            elif arg == "--scale" and i + 1 < len(args):
                scale = int(args[i + 1])
                i += 2
            elif arg == "--image" and i + 1 < len(args):
                image = args[i + 1]
                i += 2
            elif arg == "--feed" and i + 1 < len(args):
                feed = float(args[i + 1])
                i += 2
            elif arg == "--kill" and i + 1 < len(args):
                kill = float(args[i + 1])
                i += 2
            elif arg == "--snap" and i + 1 < len(args):
                snap_steps = int(args[i + 1])
                if snap_steps < 1:
                    raise ValueError(snap_steps)
                i += 2
            elif arg == "--out" and i + 1 < len(args):
                out_path = args[i + 1]
                i += 2
            elif arg == "--list":
                print("\nAvailable presets:")
                for key, name, desc in list_presets():
                    print(f"    {key:12s} {name:12s} {desc}")
                print()
                return 0
            elif arg in ("--help", "-h"):
                print(__doc__)
                return 0
            elif arg in PRESET_ORDER:
                preset = arg
                i += 1
            else:
                print(f"Unknown argument: {arg}")
                print("Use --list to see available presets")
                return 2
    except (ValueError, IndexError):
        print(f"Bad value for {args[i]}: {args[i + 1]}")
        return 2

    try:
        config = SimulationConfig.from_preset(
            preset, width=width, height=height, image=image,
            feed=feed, kill=kill,
        )
        sim = Simulation(config)
    except ReactionDiffusionError as e:
        print(f"Error: {e}")
        return 1

    if snap_steps > 0:
        print(f"Headless snap mode: {preset} @ {sim.width}x{sim.height}, {snap_steps} frames")
        snap(sim, preset, snap_steps, out_path)
        return 0

    # pygame is only needed for the interactive window
    from .viewer import Viewer

    print("Starting Reaction-Diffusion Viewer")
    print(f"  Preset: {preset}")
    print(f"  Grid: {sim.width}x{sim.height}  F={config.feed}  K={config.kill}")
    print(f"  Window: {sim.width * scale}x{sim.height * scale}")
    print()

    Viewer(sim, scale=scale, preset_key=preset).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
