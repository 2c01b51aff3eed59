"""
A nonconvex problem where the starting point decides whether Ipopt succeeds.

    min x(0)^2 - x(1)^2
    subject to x(0)^2 + x(1)^2 = 100
"""

import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from pydrake.solvers import MathematicalProgram

from MathematicalProgram.Report import SolveReport, summarize_result
from MathematicalProgram.Solvers import ipopt
from Types import DecisionVector
from Utils.JsonManager import load_parameters
from Utils.Printing import print_block


def build_program() -> Tuple[MathematicalProgram, DecisionVector]:
    prog = MathematicalProgram()
    x: DecisionVector = prog.NewContinuousVariables(2)
    prog.AddConstraint(x[0] ** 2 + x[1] ** 2 == 100.)
    prog.AddCost(x[0] ** 2 - x[1] ** 2)
    return prog, x


def solve_from(prog: MathematicalProgram, x: DecisionVector, initial_guess: Optional[Sequence[float]] = None) -> SolveReport:
    """Solve with Ipopt. initial_guess=None means no guess at all (the solver starts from zero)."""
    solver = ipopt()
    guess = None if initial_guess is None else np.asarray(initial_guess, dtype=float)
    result = solver.Solve(prog, guess, None)
    return summarize_result(result, x)


def main():
    params = load_parameters("Mathematical Program")["Initial Guess"]
    prog, x = build_program()

    # The user doesn't provide an initial guess.
    report = solve_from(prog, x)
    print_block("Without a good initial guess, success? ", report.success)
    print_block("Solution:", report.solution)

    report = solve_from(prog, x, params["Good Initial Guess"])
    print_block("With a good initial guess, success? ", report.success)
    print_block("Solution:", report.solution)


if __name__ == "__main__":
    main()
