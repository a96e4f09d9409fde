"""CLI main entry point."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional
from threebody_sim.errors import SimulationError, RenderingFailure
from threebody_sim.physics.body import Snapshot, validate_system
from threebody_sim.physics.simulator import Simulator
from threebody_sim.presets import PRESETS
from threebody_sim.render.recorder import TrajectoryRecorder
from threebody_sim.render.renderer_2d import TrajectoryRenderer
from threebody_sim.io.image_io import save_image
from threebody_sim.io.gif_exporter import GIFExporter
from threebody_sim.io.trajectory_io import save_trajectory, TRAJECTORY_FORMATS
from threebody_sim.utils.config import Config, load_config

EXIT_SIMULATION_ERROR = 1
EXIT_RENDERING_ERROR = 2

# argparse destination -> Config field
_OVERRIDES = {
    'steps': 'step_count',
    'dt': 'time_step',
    'G': 'gravitational_constant',
    'min_separation': 'min_separation',
    'progress_every': 'progress_interval',
    'preset': 'preset',
    'animation_length': 'animation_length_seconds',
    'fps': 'frames_per_second',
    'output': 'output_path',
    'save_trajectory': 'save_trajectory',
}


def print_progress(snapshot: Snapshot):
    x, y = snapshot.position(0)
    print(f"Finished step {snapshot.step} ({x:.8f}, {y:.8f})")


def build_config(args) -> Config:
    """Load the config file (if any) and apply command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    for dest, field_name in _OVERRIDES.items():
        value = getattr(args, dest)
        if value is not None:
            setattr(config, field_name, value)
    if args.export_gif:
        config.export_gif = True
    return config


def render_outputs(config: Config, renderer: TrajectoryRenderer, recorder: TrajectoryRecorder,
                   initial_positions, quiet: bool = False):
    """Write the still image and, if requested, the animation."""
    image = renderer.render(recorder.snapshots, initial_positions)
    path = save_image(image, config.output_path)
    if not quiet:
        print(f"Image saved to {path}")
        if renderer.clipped_count:
            print(f"  {renderer.clipped_count} markers fell outside the canvas")

    if config.export_gif:
        gif_path = str(path.with_suffix(".gif"))
        exporter = GIFExporter(gif_path, fps=config.frames_per_second)
        if not quiet:
            print(f"Exporting GIF to {gif_path}...")
        exporter.export(renderer.frames(recorder.snapshots, initial_positions))


def run_simulation(args) -> int:
    """Run a simulation and write its outputs."""
    # Everything that can be rejected up front is, before a long run starts
    try:
        config = build_config(args)
        params = config.simulation_parameters()
        bodies = validate_system(config.initial_bodies())
        recorder = TrajectoryRecorder(
            params.step_count,
            animation_length_seconds=config.animation_length_seconds,
            frames_per_second=config.frames_per_second,
        )
        renderer = None
        if not args.no_render:
            renderer = TrajectoryRenderer(width=config.width, height=config.height, scale=config.scale)
        if config.save_trajectory and Path(config.save_trajectory).suffix not in TRAJECTORY_FORMATS:
            raise ValueError(f"Unsupported trajectory format: {config.save_trajectory}. "
                             f"Use one of {', '.join(TRAJECTORY_FORMATS)}")
    except (OSError, ValueError, KeyError, TypeError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_SIMULATION_ERROR

    sim = Simulator(params, on_progress=None if args.quiet else print_progress)

    if not args.quiet:
        print(f"Running simulation: {config.preset if config.bodies is None else 'custom'} "
              f"for {params.step_count} steps")
        print(f"Integrator: {sim.integrator.name}, dt: {params.time_step}, G: {params.gravitational_constant}, "
              f"stride: {recorder.stride}")

    try:
        recorder.record_all(sim.run(bodies))
    except SimulationError as exc:
        print(f"Simulation aborted: {exc}", file=sys.stderr)
        return EXIT_SIMULATION_ERROR

    if not args.quiet:
        print(f"Recorded {len(recorder)} snapshots")

    exit_code = 0
    if config.save_trajectory:
        try:
            save_trajectory(recorder.snapshots, config.save_trajectory, metadata={
                'time_step': params.time_step,
                'step_count': params.step_count,
                'stride': recorder.stride,
                'gravitational_constant': params.gravitational_constant,
            })
        except OSError as exc:
            # Output-stage error: still render what was recorded
            print(f"Could not save trajectory: {exc}", file=sys.stderr)
            exit_code = EXIT_RENDERING_ERROR
        else:
            if not args.quiet:
                print(f"Trajectory saved to {config.save_trajectory}")

    if renderer is not None:
        initial_positions = [body.position for body in bodies]
        try:
            render_outputs(config, renderer, recorder, initial_positions, quiet=args.quiet)
        except (RenderingFailure, ImportError) as exc:
            print(f"Rendering failed: {exc}", file=sys.stderr)
            return EXIT_RENDERING_ERROR

    if not args.quiet and exit_code == 0:
        print("Simulation complete!")
    return exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Three-body simulator - planar gravitational three-body problem")

    parser.add_argument('--config', type=str, default=None,
                        help='JSON or YAML configuration file; command-line options override it')

    # Simulation parameters
    parser.add_argument('--preset', type=str, default=None, choices=sorted(PRESETS),
                        help='Initial configuration (default: reference)')
    parser.add_argument('--steps', type=int, default=None,
                        help='Number of simulation steps (default: 100000)')
    parser.add_argument('--dt', type=float, default=None,
                        help='Time step (default: 0.01)')
    parser.add_argument('--G', type=float, default=None,
                        help='Gravitational constant (default: 6.67430e-11)')
    parser.add_argument('--min-separation', type=float, default=None,
                        help='Abort when two bodies get this close (default: 1e-12)')
    parser.add_argument('--progress-every', type=int, default=None,
                        help='Print progress every N steps (default: 1000)')

    # Recording and rendering
    parser.add_argument('--animation-length', type=int, default=None,
                        help='Animation length in seconds, sets the recording stride (default: 60)')
    parser.add_argument('--fps', type=int, default=None,
                        help='Animation frames per second (default: 60)')
    parser.add_argument('--no-render', action='store_true',
                        help='Skip image output')

    # Export
    parser.add_argument('--output', type=str, default=None,
                        help='Output image path (default: trajectory.png)')
    parser.add_argument('--export-gif', action='store_true',
                        help='Also export an animated GIF next to the image')
    parser.add_argument('--save-trajectory', type=str, default=None,
                        help='Save recorded snapshots to a .npz or .json file')

    # Info
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress progress output')
    parser.add_argument('--list-presets', action='store_true',
                        help='List available presets and exit')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.list_presets:
        print("Available presets:")
        for name in sorted(PRESETS):
            print(f"  - {name}")
        return 0

    return run_simulation(args)


if __name__ == '__main__':
    sys.exit(main())
