"""
Solves a simple optimization problem with a solver chosen by hand

    min x(0)

    subject to x(0) + x(1) = 1
               0 <= x(1) <= 1

Ipopt is called directly instead of letting Solve() pick one, which gives
access to the Ipopt specific solver details (status code and its meaning).
"""

import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from pydrake.solvers import Binding, Constraint, Cost, MathematicalProgram, MathematicalProgramResult

from MathematicalProgram.Report import SolveReport, summarize_result
from MathematicalProgram.Solvers import ipopt
from Types import DecisionVector
from Utils.JsonManager import load_parameters
from Utils.Printing import print_block


def build_program() -> Tuple[MathematicalProgram, DecisionVector, List[Binding[Constraint]], List[Binding[Cost]]]:
    prog = MathematicalProgram()
    x: DecisionVector = prog.NewContinuousVariables(2)
    constraint1 = prog.AddConstraint(x[0] + x[1] == 1)
    constraint2 = prog.AddConstraint(0 <= x[1])
    constraint3 = prog.AddConstraint(x[1] <= 1)
    cost1 = prog.AddCost(x[0])
    return prog, x, [constraint1, constraint2, constraint3], [cost1]


def solve_with_ipopt(prog: MathematicalProgram, x: DecisionVector,
                     initial_guess: Optional[Sequence[float]] = (1.0, 1.0)) -> Tuple[SolveReport, MathematicalProgramResult]:
    """
    Solve the program with Ipopt and no solver options.

    Returns:
        (report, result). The raw result is kept for the Ipopt solver details.

    Raises:
        RuntimeError: If Ipopt is not part of the installed Drake.
    """
    solver = ipopt()
    guess = None if initial_guess is None else np.asarray(initial_guess, dtype=float)
    result = solver.Solve(prog, guess, None)
    return summarize_result(result, x), result


def main():
    params = load_parameters("Mathematical Program")["Manual Solver"]

    prog, x, constraints, costs = build_program()
    print_block("x = ", x)
    for i, constraint in enumerate(constraints, 1):
        print_block(f"constraint{i}: ", constraint)
    for i, cost in enumerate(costs, 1):
        print_block(f"cost{i}: ", cost)

    report, result = solve_with_ipopt(prog, x, params["Initial Guess"])
    details = result.get_solver_details()

    print_block(report.solution_result)
    print_block("x* = ", report.solution)
    print_block("Solver is ", report.solver_name)
    print_block("Ipopt solver status: ", details.status, ", meaning ", details.ConvertStatusToString())


if __name__ == "__main__":
    main()
