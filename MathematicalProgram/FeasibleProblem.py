"""
Solves a simple optimization problem

    min x(0)^2 + x(1)^2
    subject to x(0) + x(1) = 1
               x(0) <= x(1)

The solver is picked automatically by pydrake.solvers.Solve.
"""

import sys
from pathlib import Path
from typing import List, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydrake.solvers import Binding, Constraint, Cost, MathematicalProgram, Solve

from MathematicalProgram.Report import SolveReport, summarize_result
from Types import DecisionVector
from Utils.Printing import print_block


def build_program() -> Tuple[MathematicalProgram, DecisionVector, List[Binding[Constraint]], List[Binding[Cost]]]:
    """Set up the optimization problem. Returns (prog, x, constraints, costs)."""
    prog = MathematicalProgram()
    x: DecisionVector = prog.NewContinuousVariables(2)
    constraint1 = prog.AddConstraint(x[0] + x[1] == 1)
    constraint2 = prog.AddConstraint(x[0] <= x[1])
    cost1 = prog.AddCost(x[0] ** 2 + x[1] ** 2)
    return prog, x, [constraint1, constraint2], [cost1]


def solve_program(prog: MathematicalProgram, x: DecisionVector) -> SolveReport:
    """Solve with whichever solver Drake considers best for the problem type."""
    result = Solve(prog)
    return summarize_result(result, x)


def main():
    prog, x, constraints, costs = build_program()
    print_block("x = ", x)
    for i, constraint in enumerate(constraints, 1):
        print_block(f"constraint{i}: ", constraint)
    for i, cost in enumerate(costs, 1):
        print_block(f"cost{i}: ", cost)

    # Now solve the optimization problem.
    report = solve_program(prog, x)

    print_block("Success: ", report.success)
    print_block("x* = ", report.solution)
    print_block("optimal cost = ", report.optimal_cost)
    print_block("solver is: ", report.solver_name)


if __name__ == "__main__":
    main()
