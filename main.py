"""
Runs any of the examples by name.

    python main.py --list
    python main.py feasible_problem
    python main.py model_inspector [path-to-model]
"""

import argparse
import sys
from typing import Callable, Dict, List, Optional

from Types import ExampleTypes
from Utils.Printing import banner


def _model_inspector(extra_args: List[str]) -> None:
    from MultibodyKinematicsAndDynamics.ModelInspector import default_model_path, main as inspector_main
    if not extra_args or extra_args[0].startswith("-"):
        extra_args = [str(default_model_path())] + extra_args
    inspector_main(extra_args)


def get_example(example_type: ExampleTypes) -> Callable[[List[str]], None]:
    """Import lazily so that e.g. the optimization examples do not need meshcat."""
    if example_type == ExampleTypes.Basics:
        from MathematicalProgram.Basics import main as example_main
    elif example_type == ExampleTypes.FeasibleProblem:
        from MathematicalProgram.FeasibleProblem import main as example_main
    elif example_type == ExampleTypes.InfeasibleProblem:
        from MathematicalProgram.InfeasibleProblem import main as example_main
    elif example_type == ExampleTypes.ManualSolver:
        from MathematicalProgram.ManualSolver import main as example_main
    elif example_type == ExampleTypes.InitialGuess:
        from MathematicalProgram.InitialGuess import main as example_main
    elif example_type == ExampleTypes.SolverCallback:
        from MathematicalProgram.SolverCallback import main as example_main
    elif example_type == ExampleTypes.SymbolicSystem:
        from ModelingDynamicsSystems.SymbolicSystem import main as example_main
    elif example_type == ExampleTypes.PendulumPid:
        from ModelingDynamicsSystems.PendulumPid import main as example_main
    else:  # ExampleTypes.ModelInspector
        return _model_inspector
    return lambda extra_args: example_main()


def list_examples() -> None:
    print("Available examples:")
    for example_type in ExampleTypes:
        print(f"  {example_type.value}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Drake tutorial examples")
    parser.add_argument("example", nargs="?", help="Name of the example to run")
    parser.add_argument("--list", action="store_true", help="List the available examples")
    args, extra_args = parser.parse_known_args(argv)

    if args.list or args.example is None:
        list_examples()
        return 0

    try:
        example_type = ExampleTypes(args.example)
    except ValueError:
        print(f"Warning: Unknown example '{args.example}'")
        list_examples()
        return 1

    banner(f"EXAMPLE: {example_type.value}")
    get_example(example_type)(extra_args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
