"""
Decision variables and symbolic expressions in a MathematicalProgram.

Nothing is solved here. The program only shows how variables are declared
(vector, named vector, named matrix) and how they combine into expressions.
"""

import sys
from pathlib import Path
from typing import Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydrake.solvers import MathematicalProgram
from pydrake.symbolic import Expression

from Types import DecisionVector, VariableMatrix
from Utils.Printing import print_block


def create_variables() -> Tuple[MathematicalProgram, DecisionVector, DecisionVector, VariableMatrix]:
    """Declare a default-named 2-vector, a 2-vector named "dog" and a 3x2 matrix named "A"."""
    prog = MathematicalProgram()
    x: DecisionVector = prog.NewContinuousVariables(2)
    y: DecisionVector = prog.NewContinuousVariables(2, "dog")
    var_matrix: VariableMatrix = prog.NewContinuousVariables(3, 2, "A")
    return prog, x, y, var_matrix


def build_expressions(x: DecisionVector, y: DecisionVector) -> Tuple[Expression, Expression]:
    # Like terms are collected by the symbolic engine: 3*x1 + 4*x1 -> 7*x1
    linear: Expression = 1 + 2 * x[0] + 3 * x[1] + 4 * x[1]
    cubic: Expression = y[0] + y[0] + y[1] * y[1] * y[1]
    return linear, cubic


def main():
    prog, x, y, var_matrix = create_variables()
    linear, cubic = build_expressions(x, y)

    print_block(x)
    print_block(linear)
    print_block(y)
    print_block(cubic)
    print_block(var_matrix)
    print_block("Number of decision variables: ", prog.num_vars())


if __name__ == "__main__":
    main()
