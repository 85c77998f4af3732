from dataclasses import dataclass
from typing import Optional


@dataclass
class SolveResult:
    x: float
    fx: float
    converged: bool
    iterations: int
    message: Optional[str] = None
