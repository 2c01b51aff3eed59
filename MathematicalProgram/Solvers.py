from pydrake.solvers import IpoptSolver, SolverInterface


def require_available(solver: SolverInterface) -> SolverInterface:
    """Return the solver if the installed Drake build ships it and it is usable."""
    if not solver.available():
        raise RuntimeError(f"Solver {solver.solver_id().name()} is not available in this Drake build.")
    if not solver.enabled():
        raise RuntimeError(f"Solver {solver.solver_id().name()} is available but not enabled (license or environment).")
    return solver


def ipopt() -> IpoptSolver:
    return require_available(IpoptSolver())
