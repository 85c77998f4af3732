from .brent import minimum_solver, root_solver
from .types import SolveResult

__all__ = ["SolveResult", "minimum_solver", "root_solver"]
