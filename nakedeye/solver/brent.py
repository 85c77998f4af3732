import logging
import math
from typing import Callable

from scipy.optimize import brentq, minimize_scalar

from nakedeye.errors import SolverError
from .types import SolveResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 100


def root_solver(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> SolveResult:
    """Find a root of ``f`` in ``[a, b]`` with Brent's method.

    ``f(a)`` and ``f(b)`` must bracket the root. When they do not, no search
    is made and the endpoint with the smaller ``|f|`` is returned with
    ``converged=False``.
    """
    if not (math.isfinite(a) and math.isfinite(b)) or a >= b:
        raise SolverError(f"Invalid root bracket: [{a}, {b}]")

    fa = f(a)
    fb = f(b)
    if fa == 0.0:
        return SolveResult(x=a, fx=fa, converged=True, iterations=0)
    if fb == 0.0:
        return SolveResult(x=b, fx=fb, converged=True, iterations=0)
    if fa * fb > 0.0:
        x, fx = (a, fa) if abs(fa) <= abs(fb) else (b, fb)
        logger.debug("No sign change in [%.6f, %.6f]: f=%.3g, %.3g", a, b, fa, fb)
        return SolveResult(
            x=x,
            fx=fx,
            converged=False,
            iterations=0,
            message="f(a) and f(b) must have different signs",
        )

    root, info = brentq(f, a, b, xtol=tol, maxiter=max_iterations, full_output=True, disp=False)
    return SolveResult(
        x=root,
        fx=f(root),
        converged=bool(info.converged),
        iterations=info.iterations,
        message=info.flag,
    )


def minimum_solver(
    f: Callable[[float], float],
    a: float,
    b: float,
    c: float,
    tol: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> SolveResult:
    """Find the minimum of ``f`` inside the bracket ``a < b < c``.

    ``b`` only has to lie inside the bracket; the search is bounded to
    ``[a, c]`` and never evaluates ``f`` outside it.
    """
    if not all(math.isfinite(v) for v in (a, b, c)) or not a < c:
        raise SolverError(f"Invalid minimum bracket: ({a}, {b}, {c})")
    if not a <= b <= c:
        raise SolverError(f"Middle point {b} outside bracket [{a}, {c}]")

    result = minimize_scalar(
        f,
        bounds=(a, c),
        method="bounded",
        options={"xatol": tol, "maxiter": max_iterations},
    )
    return SolveResult(
        x=float(result.x),
        fx=float(result.fun),
        converged=bool(result.success),
        iterations=int(result.nfev),
        message=str(result.message),
    )
