
from enum import Enum
from typing import Any, Dict, Optional, Tuple, TypeAlias
import numpy as np
from numpy.typing import NDArray


DecisionVector: TypeAlias = np.ndarray  # dtype=object, pydrake Variables
'''A vector of decision variables created by MathematicalProgram.NewContinuousVariables.'''

VariableMatrix: TypeAlias = np.ndarray  # dtype=object, shape (rows, cols)
'''A matrix of decision variables, e.g. NewContinuousVariables(3, 2, "A").'''

SolutionVector: TypeAlias = np.ndarray
'''Numeric values of the decision variables returned by a solver.'''

PendulumState: TypeAlias = NDArray[np.float64]  # shape (2,)
'''Represents (theta, theta_dot) the state of the simple pendulum.'''

SignalLog: TypeAlias = Tuple[np.ndarray, np.ndarray]
'''(sample_times, data) read from a VectorLog. data has one row per logged signal.'''

ConfigDict: TypeAlias = Dict[str, Any]
"""A dictionary for configuration parameters."""


class ExampleTypes(Enum):
    """Every runnable example, named the way the runner expects it."""
    Basics = "basics"
    FeasibleProblem = "feasible_problem"
    InfeasibleProblem = "infeasible_problem"
    ManualSolver = "manual_solver"
    InitialGuess = "initial_guess"
    SolverCallback = "solver_callback"
    SymbolicSystem = "symbolic_system"
    PendulumPid = "pendulum_pid"
    ModelInspector = "model_inspector"
