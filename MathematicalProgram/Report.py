from dataclasses import dataclass

import numpy as np
from pydrake.solvers import MathematicalProgramResult

from Types import DecisionVector, SolutionVector


@dataclass
class SolveReport:
    """What the examples print about a MathematicalProgramResult."""
    success: bool
    solution: SolutionVector
    optimal_cost: float
    solver_name: str
    solution_result: str
    '''Name of the SolutionResult enum, e.g. kSolutionFound or kInfeasibleConstraints.'''


def summarize_result(result: MathematicalProgramResult, variables: DecisionVector) -> SolveReport:
    """Read the fields the examples care about out of a solver result."""
    return SolveReport(
        success=result.is_success(),
        solution=np.asarray(result.GetSolution(variables), dtype=float),
        optimal_cost=float(result.get_optimal_cost()),
        solver_name=result.get_solver_id().name(),
        solution_result=result.get_solution_result().name,
    )
