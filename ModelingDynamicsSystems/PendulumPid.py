"""
Combining systems into a diagram: a simple pendulum regulated by a PID controller.

    desired_state --> [controller] --> tau --> [pendulum] --> state --+--> [logger]
                          ^                                           |
                          +------------- estimated_state -------------+

The desired state is the only diagram input. The diagram is also written out
as a Graphviz graph (graph.dot, and graph.png when Graphviz is installed).
"""

import math
import shutil
import sys
from pathlib import Path
from typing import List, Sequence, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pydot
from pydrake.examples import PendulumPlant
from pydrake.systems.analysis import Simulator
from pydrake.systems.controllers import PidController
from pydrake.systems.framework import Diagram, DiagramBuilder
from pydrake.systems.primitives import LogVectorOutput, VectorLogSink

from Types import PendulumState, SignalLog
from Utils.JsonManager import load_parameters
from Utils.Plotting import plot_signals, signal_rows
from Utils.Printing import debug, log


def build_diagram(kp: Sequence[float] = (10.,), ki: Sequence[float] = (1.,),
                  kd: Sequence[float] = (1.,)) -> Tuple[Diagram, PendulumPlant, PidController, VectorLogSink]:
    """Returns (diagram, pendulum, controller, logger)."""
    builder = DiagramBuilder()

    pendulum = builder.AddNamedSystem("pendulum", PendulumPlant())
    controller = builder.AddNamedSystem("controller", PidController(kp=np.asarray(kp, dtype=float),
                                                                    ki=np.asarray(ki, dtype=float),
                                                                    kd=np.asarray(kd, dtype=float)))

    # Now "wire up" the controller to the pendulum.
    builder.Connect(pendulum.get_state_output_port(), controller.get_input_port_estimated_state())
    builder.Connect(controller.get_output_port_control(), pendulum.get_input_port())

    # Make the desired_state input of the controller an input to the diagram.
    builder.ExportInput(controller.get_input_port_desired_state())

    # Log the state of the pendulum.
    logger = LogVectorOutput(pendulum.get_state_output_port(), builder)
    logger.set_name("logger")

    diagram = builder.Build()
    diagram.set_name("diagram")
    return diagram, pendulum, controller, logger


def write_graph(diagram: Diagram, basename: str = "graph", max_depth: int = 2, render_png: bool = True) -> List[Path]:
    """
    Write the diagram's Graphviz description to <basename>.dot and, if asked, render <basename>.png.

    The PNG needs the Graphviz "dot" executable; without it only the .dot file is written.

    Returns:
        Paths of the files that were written.
    """
    dot_path = Path(f"{basename}.dot")
    graph_text: str = diagram.GetGraphvizString(max_depth=max_depth)
    dot_path.write_text(graph_text)
    written: List[Path] = [dot_path]
    log("Graphviz", f"Wrote {dot_path}")

    if render_png:
        if shutil.which("dot") is None:
            log("Graphviz", "Warning: 'dot' executable not found, skipping PNG rendering")
            return written
        png_path = Path(f"{basename}.png")
        graph = pydot.graph_from_dot_data(graph_text)[0]
        graph.write_png(str(png_path))
        written.append(png_path)
        log("Graphviz", f"Wrote {png_path}")
    return written


def simulate_regulation(diagram: Diagram, pendulum: PendulumPlant, logger: VectorLogSink,
                        desired_angle: float = math.pi / 2., initial_offset: Sequence[float] = (0.1, 0.2),
                        duration: float = 40.0) -> SignalLog:
    """
    Start the pendulum next to desired_angle and let the PID controller regulate it.

    Args:
        initial_offset: (theta offset from desired_angle, initial theta_dot)

    Returns:
        (sample_times, data) with data rows (theta, theta_dot)
    """
    if duration <= 0.0:
        raise ValueError(f"Simulation duration must be positive, got {duration}.")
    # Set up a simulator to run this diagram.
    simulator = Simulator(diagram)
    context = simulator.get_mutable_context()

    # First we extract the subsystem context for the pendulum.
    pendulum_context = diagram.GetMutableSubsystemContext(pendulum, context)
    # Then we can set the pendulum state, which is (theta, thetadot).
    initial_state: PendulumState = np.array([desired_angle + initial_offset[0], initial_offset[1]])
    pendulum_context.get_mutable_continuous_state_vector().SetFromVector(initial_state)

    # The diagram has a single input port (port index 0), which is the desired_state.
    desired_state: PendulumState = np.array([desired_angle, 0.])
    diagram.get_input_port(0).FixValue(context, desired_state)

    simulator.Initialize()
    simulator.AdvanceTo(duration)
    log("Simulator", f"Advanced to t={simulator.get_context().get_time():.2f}s")
    debug("Simulator", f"{simulator.get_num_steps_taken()} integrator steps")

    vector_log = logger.FindLog(simulator.get_context())
    return np.array(vector_log.sample_times()), np.array(vector_log.data())


def main(show: bool = True):
    params = load_parameters("Dynamical Systems")["Pendulum PID"]
    desired_angle: float = params["Desired Angle"]

    diagram, pendulum, controller, logger = build_diagram(params["Kp"], params["Ki"], params["Kd"])
    write_graph(diagram, params["Graph File"], params["Graph Max Depth"], params["Render PNG"])

    times, data = simulate_regulation(diagram, pendulum, logger, desired_angle,
                                      params["Initial Offset"], params["Duration"])
    log("PID", f"Final theta {data[0, -1]:.4f} rad, desired {desired_angle:.4f} rad")

    # Plot the desired and current theta
    plot_signals(times, signal_rows(data, [0]), labels=['theta'], colors=['tab:blue'],
                 xlabel='Sample time', ylabel='theta (rad)', title='Pendulum regulated by PID',
                 reference=desired_angle, reference_color='tab:green', show=show)


if __name__ == "__main__":
    main()
