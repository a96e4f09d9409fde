"""Basic example of using the three-body simulator."""

from threebody_sim import Simulator, SimulationParameters
from threebody_sim.presets import ReferenceTriangle


def main():
    """Run the reference configuration headless."""
    bodies = ReferenceTriangle().generate()

    params = SimulationParameters(step_count=5000)
    sim = Simulator(params)

    print("Running simulation...")
    for snapshot in sim.run(bodies):
        if snapshot.step % 1000 == 0:
            x, y = snapshot.position(0)
            print(f"Step {snapshot.step}: Time={snapshot.time:.2f}, Body 0=({x:.8f}, {y:.8f})")

    print("Simulation complete!")


if __name__ == "__main__":
    main()
