"""
Watching the solver iterate through a visualization callback.

    min x(0)^2 + x(1)^2
    subject to x(0) * x(1) = 9

starting from [4, 5]. Every time the solver evaluates the callback the
current value of x is printed and stored.
"""

import sys
from pathlib import Path
from typing import List, Sequence, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from pydrake.solvers import MathematicalProgram, Solve

from MathematicalProgram.Report import SolveReport, summarize_result
from Types import DecisionVector, SolutionVector
from Utils.JsonManager import load_parameters
from Utils.Printing import print_block


class IterateRecorder:
    """Visualization callback that prints and keeps every iterate it is shown."""
    def __init__(self, verbose: bool = True) -> None:
        self.verbose: bool = verbose
        self.history: List[SolutionVector] = []
        '''Iterates in the order the solver reported them.'''

    def __call__(self, x: np.ndarray) -> None:
        values = np.array(x, dtype=float)
        self.history.append(values)
        if self.verbose:
            print_block("x = ", values)

    def __len__(self) -> int:
        return len(self.history)


def build_program(recorder: IterateRecorder) -> Tuple[MathematicalProgram, DecisionVector]:
    prog = MathematicalProgram()
    x: DecisionVector = prog.NewContinuousVariables(2)
    prog.AddConstraint(x[0] * x[1] == 9)
    prog.AddCost(x[0] ** 2 + x[1] ** 2)
    prog.AddVisualizationCallback(recorder, x)
    return prog, x


def solve_with_callback(initial_guess: Sequence[float] = (4.0, 5.0), verbose: bool = True) -> Tuple[SolveReport, IterateRecorder]:
    recorder = IterateRecorder(verbose=verbose)
    prog, x = build_program(recorder)
    result = Solve(prog, np.asarray(initial_guess, dtype=float))
    return summarize_result(result, x), recorder


def main():
    params = load_parameters("Mathematical Program")["Solver Callback"]
    report, recorder = solve_with_callback(params["Initial Guess"])
    print_block("Callback was called ", len(recorder), " times")
    print_block("Success: ", report.success, ", solver: ", report.solver_name)
    print_block("x* = ", report.solution)


if __name__ == "__main__":
    main()
