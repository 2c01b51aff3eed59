"""
Test Script for the dynamical systems examples

Test Scenarios:
1. SYMBOLIC SYSTEM: x_dot = -x + x^3 from x(0) = 0.9 decays towards 0 and matches odeint
2. PENDULUM + PID: diagram wiring, graphviz output, regulation to pi/2 after 40 s
"""

import math
import shutil
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pytest

from ModelingDynamicsSystems import PendulumPid, SymbolicSystem
from Utils import Printing
from Utils.Printing import banner


def test_symbolic_system_decays():
    banner("TEST: Symbolic vector system")
    times, data = SymbolicSystem.simulate(initial_state=0.9, duration=10.0)
    print(f"  {len(times)} samples, x(10) = {data[0, -1]:.6f}")

    assert data.shape == (1, len(times))
    assert times[0] == pytest.approx(0.0)
    assert times[-1] == pytest.approx(10.0)
    assert data[0, 0] == pytest.approx(0.9)
    # |x| < 1 is inside the basin of the stable equilibrium at 0
    assert 0.0 <= data[0, -1] < 0.01
    assert data[0, -1] < data[0, len(times) // 2] < data[0, 0]


def test_symbolic_system_matches_odeint():
    times, data = SymbolicSystem.simulate(initial_state=0.9, duration=10.0)
    reference = SymbolicSystem.reference_solution(times, 0.9)
    max_error = np.max(np.abs(data[0, :] - reference))
    print(f"  Max deviation from odeint: {max_error:.2e}")
    assert reference.shape == times.shape
    assert max_error < 1e-2


def test_symbolic_system_rejects_non_positive_duration():
    with pytest.raises(ValueError):
        SymbolicSystem.simulate(initial_state=0.9, duration=0.0)


def test_symbolic_system_main_plots():
    SymbolicSystem.main(show=False)
    assert plt.get_fignums()
    plt.close("all")


def test_pendulum_pid_diagram_wiring():
    banner("TEST: Pendulum + PID diagram")
    diagram, pendulum, controller, logger = PendulumPid.build_diagram([10.], [1.], [1.])

    assert diagram.get_name() == "diagram"
    assert pendulum.get_name() == "pendulum"
    assert controller.get_name() == "controller"
    assert logger.get_name() == "logger"
    assert diagram.num_input_ports() == 1
    assert diagram.get_input_port(0).size() == 2


def test_pendulum_pid_graph(tmp_path):
    diagram, _, _, _ = PendulumPid.build_diagram()
    written = PendulumPid.write_graph(diagram, str(tmp_path / "graph"), max_depth=2, render_png=False)

    assert written == [tmp_path / "graph.dot"]
    text = (tmp_path / "graph.dot").read_text()
    assert text.startswith("digraph")
    for name in ("pendulum", "controller", "logger"):
        assert name in text


def test_pendulum_pid_graph_without_graphviz(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(PendulumPid.shutil, "which", lambda name: None)
    diagram, _, _, _ = PendulumPid.build_diagram()
    written = PendulumPid.write_graph(diagram, str(tmp_path / "graph"), render_png=True)

    assert written == [tmp_path / "graph.dot"]
    assert not (tmp_path / "graph.png").exists()
    assert "skipping PNG rendering" in capsys.readouterr().out


def test_pendulum_pid_graph_png(tmp_path):
    if shutil.which("dot") is None:
        pytest.skip("Graphviz dot executable is not installed")
    diagram, _, _, _ = PendulumPid.build_diagram()
    written = PendulumPid.write_graph(diagram, str(tmp_path / "graph"), render_png=True)

    assert written == [tmp_path / "graph.dot", tmp_path / "graph.png"]
    assert (tmp_path / "graph.png").read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_pendulum_pid_regulates_to_desired_angle():
    diagram, pendulum, _, logger = PendulumPid.build_diagram([10.], [1.], [1.])
    desired_angle = math.pi / 2.
    times, data = PendulumPid.simulate_regulation(diagram, pendulum, logger, desired_angle, (0.1, 0.2), 40.0)
    print(f"  theta(0) = {data[0, 0]:.4f}, theta(40) = {data[0, -1]:.4f}")

    assert data.shape[0] == 2
    assert times[-1] == pytest.approx(40.0)
    assert data[0, 0] == pytest.approx(desired_angle + 0.1)
    assert data[1, 0] == pytest.approx(0.2)
    assert abs(data[0, -1] - desired_angle) < 0.05


def test_pendulum_pid_main(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    PendulumPid.main(show=False)
    out = capsys.readouterr().out

    assert "[Graphviz] Wrote graph.dot" in out
    assert "[PID] Final theta" in out
    assert (tmp_path / "graph.dot").is_file()
    assert plt.get_fignums()
    plt.close("all")


def test_simulation_debug_output(monkeypatch, capsys):
    monkeypatch.setattr(Printing, "DEBUG", True)
    SymbolicSystem.simulate(initial_state=0.9, duration=1.0)
    assert "integrator steps" in capsys.readouterr().out

    monkeypatch.setattr(Printing, "DEBUG", False)
    SymbolicSystem.simulate(initial_state=0.9, duration=1.0)
    assert "integrator steps" not in capsys.readouterr().out


def test_pendulum_pid_rejects_non_positive_duration():
    diagram, pendulum, _, logger = PendulumPid.build_diagram()
    with pytest.raises(ValueError):
        PendulumPid.simulate_regulation(diagram, pendulum, logger, duration=-1.0)


if __name__ == "__main__":
    try:
        test_symbolic_system_decays()
        test_symbolic_system_matches_odeint()
        test_pendulum_pid_diagram_wiring()
        test_pendulum_pid_regulates_to_desired_angle()
    except Exception as e:
        print(f"\n✗ Error during testing: {e}")
        import traceback
        traceback.print_exc()
