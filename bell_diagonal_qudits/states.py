"""
Coordinate states and analysis records.

A Bell-diagonal state of a d×d system is a point c of the magic simplex
(cᵢ ≥ 0, Σ cᵢ = 1) and corresponds to ρ = Σ cᵢ Pᵢ for the Bell projectors
Pᵢ of a StandardBasis.

Check outcomes are tri-state: True, False, or None for "not evaluated".
None must never be read as False.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import List, Optional

import numpy as np

from .basis import StandardBasis
from .config import (
    ECLASS_UNKNOWN,
    ECLASS_SEP,
    ECLASS_BOUND,
    ECLASS_NPT,
    ECLASS_PPT_UNKNOWN,
)


class EntanglementClass(str, Enum):
    """Entanglement class label; compares equal to its string value."""
    UNKNOWN = ECLASS_UNKNOWN
    SEP = ECLASS_SEP
    BOUND = ECLASS_BOUND
    NPT = ECLASS_NPT
    PPT_UNKNOWN = ECLASS_PPT_UNKNOWN

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class CoordState:
    """
    Coordinates of a Bell-diagonal state plus its entanglement class.

    The label is mutated only by classification.classify_analyzed_states.
    """
    coords: np.ndarray
    e_class: EntanglementClass = EntanglementClass.UNKNOWN

    def __post_init__(self):
        self.coords = np.asarray(self.coords, dtype=float)
        self.e_class = EntanglementClass(self.e_class)


@dataclass(eq=False)
class DensityState:
    """Coordinate state together with its density matrix."""
    coords: np.ndarray
    e_class: EntanglementClass
    density_matrix: np.ndarray


@dataclass(frozen=True)
class AnalysisSpecification:
    """Which checks to run, and whether to use symmetry reduction."""
    kernel_check: bool = False
    spinrep_check: bool = False
    ppt_check: bool = False
    realignment_check: bool = False
    concurrence_qp_check: bool = False
    mub_check: bool = False
    numeric_ew_check: bool = False
    use_symmetries: bool = False

    @classmethod
    def all_checks(cls, use_symmetries: bool = False) -> "AnalysisSpecification":
        """Specification with every check enabled."""
        return cls(True, True, True, True, True, True, True, use_symmetries)

    def any_check_enabled(self) -> bool:
        return any(
            getattr(self, f.name) for f in fields(self) if f.name != "use_symmetries"
        )


@dataclass
class AnalysedCoordState:
    """
    Outcomes of the entanglement checks for one coordinate state.

    kernel:      inside the kernel polytope (⇒ separable)
    spinrep:     spin-representation norm ≤ 2 (⇒ separable)
    ppt:         positive partial transpose
    realign:     realignment criterion violated (⇒ entangled)
    concurrence: quasi-pure concurrence > 0 (⇒ entangled)
    mub:         MUB correlation > 2 (⇒ entangled)
    numeric_ew:  some bounded witness violated (⇒ entangled)
    """
    coord_state: CoordState
    kernel: Optional[bool] = None
    spinrep: Optional[bool] = None
    ppt: Optional[bool] = None
    realign: Optional[bool] = None
    concurrence: Optional[bool] = None
    mub: Optional[bool] = None
    numeric_ew: Optional[bool] = None


def create_densitystate(coord_state: CoordState, std_basis: StandardBasis) -> DensityState:
    """
    Build ρ = Σ cᵢ Pᵢ for a coordinate state.

    Args:
        coord_state: Coordinates in the magic simplex
        std_basis: Bell basis the coordinates refer to

    Returns:
        DensityState carrying the d²×d² density matrix
    """
    coords = coord_state.coords
    if len(coords) != len(std_basis):
        raise ValueError(
            f"Got {len(coords)} coordinates for a basis of {len(std_basis)} elements"
        )
    rho = np.tensordot(coords, np.array(std_basis.projectors), axes=1)
    return DensityState(coords, coord_state.e_class, rho)


def create_random_coordstates(
    n: int,
    d: int,
    seed: Optional[int] = None,
) -> List[CoordState]:
    """
    Sample n states uniformly from the magic simplex of a d×d system.

    Args:
        n: Number of states
        d: Local dimension
        seed: Seed for numpy's default_rng

    Returns:
        List of CoordState labelled UNKNOWN
    """
    rng = np.random.default_rng(seed)
    samples = rng.dirichlet(np.ones(d * d), size=n)
    return [CoordState(c) for c in samples]
