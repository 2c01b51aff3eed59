"""
An optimization problem without any feasible point:

    min x
    subject to x + y >= 1
               x + y <= 0

The solver does not raise; infeasibility is reported through the result.
"""

import sys
from pathlib import Path
from typing import List, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from pydrake.solvers import Binding, Constraint, Cost, MathematicalProgram, Solve
from pydrake.symbolic import Variable

from MathematicalProgram.Report import SolveReport, summarize_result
from Utils.Printing import print_block


def build_program() -> Tuple[MathematicalProgram, Variable, Variable, List[Binding[Constraint]], List[Binding[Cost]]]:
    prog = MathematicalProgram()
    x: Variable = prog.NewContinuousVariables(1)[0]
    y: Variable = prog.NewContinuousVariables(1)[0]
    constraint1 = prog.AddConstraint(x + y >= 1)
    constraint2 = prog.AddConstraint(x + y <= 0)
    cost1 = prog.AddCost(x)
    return prog, x, y, [constraint1, constraint2], [cost1]


def solve_program(prog: MathematicalProgram, x: Variable, y: Variable) -> SolveReport:
    result = Solve(prog)
    return summarize_result(result, np.array([x, y]))


def main():
    prog, x, y, constraints, costs = build_program()
    print_block("x = ", x)
    print_block("y = ", y)
    for i, constraint in enumerate(constraints, 1):
        print_block(f"constraint{i}: ", constraint)
    for i, cost in enumerate(costs, 1):
        print_block(f"cost{i}: ", cost)

    report = solve_program(prog, x, y)
    print_block("Success: ", report.success)
    print_block("Solution result: ", report.solution_result)


if __name__ == "__main__":
    main()
