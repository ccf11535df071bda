"""Timed benchmark run and a convenience solve for arbitrary systems."""

import logging
import time
from typing import Optional
from numpy.typing import NDArray, ArrayLike

from gausspivot.core.config import RunConfig
from gausspivot.core.errors import SingularMatrixError, VerificationError
from gausspivot.core.result import SolveReport, Status
from gausspivot.core.store import MatrixStore
from gausspivot.solvers.elimination import eliminate
from gausspivot.solvers.backsub import back_substitute
from gausspivot.systems.library import doubling_solution, initialize
from gausspivot.verify import verify_solution

logger = logging.getLogger(__name__)


def solve(A: ArrayLike, b: ArrayLike) -> NDArray:
    """
    Solve a dense square system with partial pivoting.

    A and b are copied; the caller's arrays are left untouched.

    Raises:
        SingularMatrixError: If A is singular
        ValueError: If the shapes do not describe a square system
    """
    store = MatrixStore(A, b)
    eliminate(store)
    return back_substitute(store)


def run(config: Optional[RunConfig] = None) -> SolveReport:
    """
    Benchmark the pipeline on the doubling system of the configured size.

    Allocation happens up front; initialization, elimination and
    back-substitution are timed together. The solution is then compared
    with the closed form. Failures are reported through the returned
    status, never by exiting.

    Args:
        config: Run settings (defaults to RunConfig())

    Returns:
        SolveReport with status SOLVED, SINGULAR or MISMATCH
    """
    if config is None:
        config = RunConfig()
    n = config.size

    store = MatrixStore.zeros(n)

    start = time.perf_counter()
    initialize(store)
    try:
        eliminate(store)
    except SingularMatrixError as exc:
        elapsed = time.perf_counter() - start
        logger.warning("Run aborted: %s", exc)
        return SolveReport(n, Status.SINGULAR, elapsed, message=str(exc))
    x = back_substitute(store)
    elapsed = time.perf_counter() - start

    if config.verify:
        try:
            verify_solution(x, doubling_solution(n), atol=config.atol)
        except VerificationError as exc:
            logger.error("Verification failed: %s", exc)
            return SolveReport(n, Status.MISMATCH, elapsed, x, str(exc))

    message = "Correct solution found." if config.verify else "Solution not verified."
    logger.info("Solved n=%d in %.6f s", n, elapsed)
    return SolveReport(n, Status.SOLVED, elapsed, x, message)
