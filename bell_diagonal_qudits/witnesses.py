"""
Entanglement witnesses with numerically determined separable bounds.

A witness W = Σ wᵢ Pᵢ is diagonal in the Bell basis, so for a Bell-diagonal
state tr(Wρ) = w·c. Its value over separable states lies in
[min, max] of ⟨ab|W|ab⟩ over product vectors |a⟩⊗|b⟩; a state whose
w·c leaves that interval is entangled.
"""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np
from scipy.optimize import minimize

from .basis import StandardBasis
from .config import DEFAULT_EW_ITERATIONS


@dataclass(frozen=True)
class BoundedCoordEW:
    """Witness coordinates and the interval of w·c over separable states."""
    coords: np.ndarray
    lower_bound: float
    upper_bound: float


def _product_expectation(x: np.ndarray, W: np.ndarray, d: int) -> float:
    """⟨ab|W|ab⟩ for normalised a, b packed as real and imaginary parts in x."""
    a = x[:d] + 1j * x[d:2 * d]
    b = x[2 * d:3 * d] + 1j * x[3 * d:]
    v = np.kron(a / np.linalg.norm(a), b / np.linalg.norm(b))
    return float(np.real(v.conj() @ W @ v))


def _product_minimum(W: np.ndarray, d: int, iterations: int, rng: np.random.Generator) -> float:
    best = np.inf
    for _ in range(iterations):
        x0 = rng.standard_normal(4 * d)
        result = minimize(_product_expectation, x0, args=(W, d), method="BFGS")
        best = min(best, result.fun)
    return float(best)


def bound_coordew(
    coords,
    std_basis: StandardBasis,
    iterations: int = DEFAULT_EW_ITERATIONS,
    seed: Optional[int] = None,
) -> BoundedCoordEW:
    """
    Bound the witness with coordinates `coords` over product states.

    Args:
        coords: Witness coordinates w
        std_basis: Bell basis
        iterations: Random restarts per bound
        seed: Seed for numpy's default_rng

    Returns:
        BoundedCoordEW with numerically found lower/upper bounds
    """
    rng = np.random.default_rng(seed)
    d = std_basis.d
    w = np.asarray(coords, dtype=float)
    W = np.tensordot(w, np.array(std_basis.projectors), axes=1)

    lower = _product_minimum(W, d, iterations, rng)
    upper = -_product_minimum(-W, d, iterations, rng)
    return BoundedCoordEW(w, lower, upper)


def create_random_bounded_ews(
    d: int,
    std_basis: StandardBasis,
    n: int,
    iterations: int = DEFAULT_EW_ITERATIONS,
    seed: Optional[int] = None,
) -> List[BoundedCoordEW]:
    """
    Create n witnesses with coordinates uniform in [-1, 1]^{d²}.

    Args:
        d: Local dimension
        std_basis: Bell basis
        n: Number of witnesses
        iterations: Random restarts per bound
        seed: Seed for numpy's default_rng

    Returns:
        List of BoundedCoordEW
    """
    rng = np.random.default_rng(seed)
    witnesses = []
    for _ in range(n):
        w = rng.uniform(-1.0, 1.0, d * d)
        witnesses.append(
            bound_coordew(w, std_basis, iterations, seed=int(rng.integers(2**32)))
        )
    return witnesses
