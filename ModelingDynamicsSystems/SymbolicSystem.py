"""
A one-state continuous system written as a symbolic expression

    x_dot = -x + x^3
    y = x

simulated with Drake's Simulator and, for comparison, integrated
independently with scipy's odeint.
"""

import sys
from pathlib import Path
from typing import Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from scipy.integrate import odeint
from pydrake.symbolic import Variable
from pydrake.systems.analysis import Simulator
from pydrake.systems.framework import Diagram, DiagramBuilder
from pydrake.systems.primitives import LogVectorOutput, SymbolicVectorSystem, VectorLogSink

from Types import SignalLog
from Utils.JsonManager import load_parameters
from Utils.Plotting import plot_signals, signal_rows
from Utils.Printing import debug, log


def build_diagram() -> Tuple[Diagram, SymbolicVectorSystem, VectorLogSink]:
    """Returns (diagram, system, logger). The logger records the system output."""
    x = Variable("x")

    builder = DiagramBuilder()
    system = builder.AddSystem(SymbolicVectorSystem(state=[x], dynamics=[-x + x**3], output=[x]))
    logger = LogVectorOutput(system.get_output_port(), builder)
    diagram = builder.Build()
    return diagram, system, logger


def simulate(initial_state: float = 0.9, duration: float = 10.0) -> SignalLog:
    """
    Simulate the system from x(0) = initial_state.

    Returns:
        (sample_times, data) with data of shape (1, N)
    """
    if duration <= 0.0:
        raise ValueError(f"Simulation duration must be positive, got {duration}.")
    diagram, _, logger = build_diagram()

    # Set the initial conditions, x(0).
    context = diagram.CreateDefaultContext()
    context.SetContinuousState([initial_state])

    simulator = Simulator(diagram, context)
    simulator.Initialize()
    simulator.AdvanceTo(duration)
    log("Simulator", f"Advanced to t={simulator.get_context().get_time():.2f}s")
    debug("Simulator", f"{simulator.get_num_steps_taken()} integrator steps")

    # Read log data
    vector_log = logger.FindLog(simulator.get_context())
    return np.array(vector_log.sample_times()), np.array(vector_log.data())


def _dynamics(x: np.ndarray, t: float) -> np.ndarray:
    return -x + x**3


def reference_solution(times: np.ndarray, initial_state: float = 0.9) -> np.ndarray:
    """Integrate the same ODE with odeint and return x at the requested times, shape (N,)."""
    # odeint wants strictly increasing times; the log may repeat a sample time
    unique_times = np.unique(times)
    if unique_times[0] > 0.0:
        unique_times = np.concatenate(([0.0], unique_times))
    solution = odeint(_dynamics, [initial_state], unique_times)[:, 0]
    return np.interp(times, unique_times, solution)


def main(show: bool = True):
    params = load_parameters("Dynamical Systems")["Symbolic System"]
    initial_state: float = params["Initial State"]

    times, data = simulate(initial_state, params["Duration"])
    reference = reference_solution(times, initial_state)
    log("Simulator", f"{len(times)} samples, final output {data[0, -1]:.6f}")
    log("odeint", f"Max deviation from reference: {np.max(np.abs(data[0, :] - reference)):.2e}")

    plot_signals(times, signal_rows(data, [0]) + [reference], labels=['Output', 'odeint reference'],
                 colors=['tab:red', 'tab:gray'], xlabel='Sample time', ylabel='Output',
                 title='x_dot = -x + x^3', show=show)


if __name__ == "__main__":
    main()
