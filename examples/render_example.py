"""Example: record a run and render it to a PNG."""

from threebody_sim import Simulator, SimulationParameters
from threebody_sim.presets import ReferenceTriangle
from threebody_sim.render import TrajectoryRecorder, TrajectoryRenderer
from threebody_sim.io import save_image


def main():
    """Render the reference configuration with G = 1 so the bodies actually move."""
    bodies = ReferenceTriangle().generate()
    params = SimulationParameters(step_count=20000, time_step=0.0005, gravitational_constant=1.0)

    recorder = TrajectoryRecorder(params.step_count, animation_length_seconds=10, frames_per_second=30)
    recorder.record_all(Simulator(params).run(bodies))
    print(f"Recorded {len(recorder)} snapshots (stride {recorder.stride})")

    renderer = TrajectoryRenderer()
    image = renderer.render(recorder.snapshots, [body.position for body in bodies])
    path = save_image(image, "three_body.png")
    print(f"Saved {path} ({renderer.clipped_count} markers clipped)")


if __name__ == "__main__":
    main()
