"""
Model inspector: load a model description file (SDFormat, URDF, ...) into a
MultibodyPlant and look at it in Meshcat, with one slider per joint.

Usage:
    python MultibodyKinematicsAndDynamics/ModelInspector.py path-to-sdf-file [--port 8080] [--timeout 30]

Open the printed Meshcat URL in a browser. Press the "Stop JointSliders"
button (or Escape) to quit.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from pydrake.geometry import Meshcat, MeshcatVisualizer, MeshcatVisualizerParams, Role
from pydrake.multibody.meshcat import JointSliders
from pydrake.multibody.parsing import Parser
from pydrake.multibody.plant import AddMultibodyPlantSceneGraph
from pydrake.systems.framework import DiagramBuilder

from Utils.JsonManager import load_parameters
from Utils.Printing import debug, log

PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


def model_inspector(meshcat: Meshcat, filename: str, time_step: float = 0.001,
                    timeout: Optional[float] = None) -> np.ndarray:
    """
    Show the model in meshcat and run the joint sliders until stopped.

    Args:
        meshcat: Meshcat instance to draw into. Its scene and added controls are cleared first.
        filename: Model file, handed verbatim to the Drake parser.
        time_step: Plant time step. Chosen arbitrarily, nothing is simulated.
        timeout: Seconds before the slider loop returns on its own. None waits for the stop button.

    Returns:
        The joint positions set by the sliders when the loop stopped.

    Raises:
        FileNotFoundError: If the model file does not exist.
    """
    if not Path(filename).is_file():
        raise FileNotFoundError(f"Model file not found: {filename}")

    meshcat.Delete()
    meshcat.DeleteAddedControls()
    builder = DiagramBuilder()

    plant, scene_graph = AddMultibodyPlantSceneGraph(builder, time_step=time_step)

    # Load the file into the plant/scene_graph.
    parser = Parser(plant)
    model_instances = parser.AddModels(filename)
    plant.Finalize()
    log("Meshcat", f"Loaded {len(model_instances)} model instance(s), {plant.num_joints()} joints, "
                   f"{plant.num_positions()} positions from {filename}")
    for model_instance in model_instances:
        debug("Meshcat", f"Model instance '{plant.GetModelInstanceName(model_instance)}': "
                         f"{plant.num_positions(model_instance)} positions")

    # One visualizer publishes the "visual" geometry, the other the "collision" geometry.
    MeshcatVisualizer.AddToBuilder(builder, scene_graph, meshcat,
                                   MeshcatVisualizerParams(role=Role.kPerception, prefix="visual"))
    MeshcatVisualizer.AddToBuilder(builder, scene_graph, meshcat,
                                   MeshcatVisualizerParams(role=Role.kProximity, prefix="collision"))
    # Collision geometry starts hidden; the checkbox in the meshcat controls shows it.
    meshcat.SetProperty("collision", "visible", False)

    sliders = builder.AddSystem(JointSliders(meshcat, plant))
    diagram = builder.Build()

    log("Meshcat", f"Open {meshcat.web_url()} to inspect the model")
    positions = sliders.Run(diagram, timeout)
    return np.asarray(positions)


def default_model_path() -> Path:
    params = load_parameters("Multibody")["Model Inspector"]
    return PROJECT_ROOT / params["Default Model"]


def parse_args(argv=None, default_port: int = 8080) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect a model file in Meshcat with joint sliders.")
    parser.add_argument("model", type=str, help="path-to-sdf-file")
    parser.add_argument("--port", type=int, default=default_port, help="Meshcat server port")
    parser.add_argument("--timeout", type=float, default=None, help="Stop after this many seconds")
    return parser.parse_args(argv)


def main(argv=None):
    params = load_parameters("Multibody")["Model Inspector"]
    args = parse_args(argv, default_port=params["Port"])
    meshcat = Meshcat(args.port)
    positions = model_inspector(meshcat, args.model, params["Time Step"], args.timeout)
    log("Meshcat", f"Final joint positions: {positions}")


if __name__ == "__main__":
    main()
