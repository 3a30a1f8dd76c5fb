"""
Entanglement checks for Bell-diagonal coordinate states.

Each check is a pure function of a CoordState and one analysis object.
Numeric quantities are rounded to `precision` decimal digits before they
are compared with their threshold.

    kernel_check        inside kernel polytope          ⇒ separable
    spin_rep_check      Σ |tr(ρ Bᵢ†)| ≤ 2               ⇒ separable
    ppt_check           ρ^{T_A} ≥ 0                     (NPT ⇒ entangled)
    realignment_check   ||R(ρ)||₁ > 1                   ⇒ entangled
    concurrence_qp_check C_qp(ρ) > 0                    ⇒ entangled
    mub_check           I_{d+1}(ρ) > 2                  ⇒ entangled
    numeric_ew_check    w·c outside witness interval    ⇒ entangled
"""

from typing import List, Sequence, Union

import numpy as np

from .basis import StandardBasis
from .concurrence import get_concurrence_qp
from .config import (
    DEFAULT_PRECISION,
    DEFAULT_REL_UNCERTAINTY,
    REALIGNMENT_BOUND,
    MUB_CORRELATION_BOUND,
    SPINREP_BOUND,
    CONCURRENCE_BOUND,
)
from .linalg import is_ppt, reshuffle, norm_trace
from .mub import calculate_correlation
from .polytopes import HPolytope, VPolytope
from .states import CoordState, create_densitystate
from .witnesses import BoundedCoordEW


def kernel_check(coord_state: CoordState, kernel_polytope: Union[HPolytope, VPolytope]) -> bool:
    """True if the coordinates lie in `kernel_polytope` (V- or H-representation)."""
    return bool(coord_state.coords in kernel_polytope)


def ppt_check(
    coord_state: CoordState,
    std_basis: StandardBasis,
    precision: int = DEFAULT_PRECISION,
) -> bool:
    """True if the state has positive partial transpose in the given precision."""
    rho = create_densitystate(coord_state, std_basis).density_matrix
    return bool(is_ppt(rho, std_basis.d, precision))


def realignment_check(
    coord_state: CoordState,
    std_basis: StandardBasis,
    precision: int = DEFAULT_PRECISION,
) -> bool:
    """True if the realigned density matrix has trace norm > 1."""
    rho = create_densitystate(coord_state, std_basis).density_matrix
    return bool(round(norm_trace(reshuffle(rho)), precision) > REALIGNMENT_BOUND)


def numeric_ew_check(
    coord_state: CoordState,
    bounded_ews: Sequence[BoundedCoordEW],
    rel_uncertainty: float = DEFAULT_REL_UNCERTAINTY,
) -> bool:
    """
    True if any witness detects the state as entangled.

    A witness detects the state if c·w lies outside
    [lower - tol, upper + tol] with tol = rel_uncertainty·(upper - lower).
    Stops at the first detecting witness.

    Args:
        coord_state: State to test
        bounded_ews: Witnesses with separable bounds
        rel_uncertainty: Relative widening of each interval

    Returns:
        True if entanglement is witnessed
    """
    for ew in bounded_ews:
        tolerance = (ew.upper_bound - ew.lower_bound) * rel_uncertainty
        value = float(np.dot(coord_state.coords, ew.coords))
        if not (ew.lower_bound - tolerance <= value <= ew.upper_bound + tolerance):
            return True
    return False


def concurrence_qp_check(
    coord_state: CoordState,
    d: int,
    dictionaries: np.ndarray,
    precision: int = DEFAULT_PRECISION,
) -> bool:
    """True if the quasi-pure concurrence is positive in the given precision."""
    value = get_concurrence_qp(coord_state.coords, d, dictionaries)
    return bool(round(value, precision) > CONCURRENCE_BOUND)


def mub_check(
    coord_state: CoordState,
    d: int,
    std_basis: StandardBasis,
    mub_set: List[List[np.ndarray]],
    precision: int = DEFAULT_PRECISION,
) -> bool:
    """True if the summed mutual predictabilities over `mub_set` exceed 2."""
    rho = create_densitystate(coord_state, std_basis).density_matrix
    return bool(round(calculate_correlation(d, mub_set, rho), precision) > MUB_CORRELATION_BOUND)


def spin_rep_check(
    coord_state: CoordState,
    std_basis: StandardBasis,
    bipartite_weyl_basis: List[np.ndarray],
    precision: int = DEFAULT_PRECISION,
) -> bool:
    """
    True if the state is detected as separable by its spin representation.

    The coefficients tr(ρ Bᵢ†) in the bipartite Weyl basis must have
    1-norm ≤ 2.
    """
    rho = create_densitystate(coord_state, std_basis).density_matrix
    coefficients = [np.trace(rho @ B.conj().T) for B in bipartite_weyl_basis]
    one_norm = float(np.sum(np.abs(coefficients)))
    return bool(round(one_norm, precision) <= SPINREP_BOUND)
