"""
Entanglement Classification of Bell-Diagonal Qudits
===================================================

Classifies bipartite d×d states that are mixtures of Bell states
(the "magic simplex"). A state is given by its coordinates cᵢ in the Bell
basis, ρ = Σ cᵢ Pᵢ, and is sorted into one of five classes:

    SEP          separable
    NPT          entangled with non-positive partial transpose
    BOUND        PPT and entangled (bound entangled)
    PPT_UNKNOWN  PPT, undecided
    UNKNOWN      not enough information

Package Structure:
==================
- basis.py           Weyl operators, Bell basis, bipartite operator basis
- states.py          CoordState, AnalysisSpecification, AnalysedCoordState
- checks.py          Seven entanglement checks
- analysis.py        Check orchestration, symmetry-reduced orbit analysis
- classification.py  Precedence rules and batch labelling
- polytopes.py       Kernel polytope, V-/H-polytope membership
- symmetries.py      Phase-space symmetry group and orbits
- concurrence.py     Quasi-pure concurrence
- mub.py             Mutually unbiased bases and correlation sums
- witnesses.py       Bounded entanglement witnesses
- linalg.py          Partial transpose, realignment, trace norm
- validation.py      Self-consistency report

Quick Start:
    from bell_diagonal_qudits import *

    d = 3
    basis = create_standard_indexbasis(d)
    kernel = create_kernel_polytope(d, basis)
    spec = AnalysisSpecification(kernel_check=True, ppt_check=True, realignment_check=True)

    state = CoordState([1/9] * 9)
    analysed = analyse_coordstate(d, state, spec, std_basis=basis, kernel_polytope=kernel)
    classify_analyzed_states([analysed])
    state.e_class   # EntanglementClass.SEP
"""

__version__ = "1.0.0"

from .config import DEFAULT_PRECISION, DEFAULT_REL_UNCERTAINTY
from .exceptions import (
    BellDiagonalError,
    SymmetryNotEnabledError,
    ClassificationConflictError,
)
from .basis import (
    BasisElement,
    StandardBasis,
    weyl_operator,
    maximally_entangled_state,
    create_standard_indexbasis,
    create_bipartite_weyloperator_basis,
)
from .states import (
    EntanglementClass,
    CoordState,
    DensityState,
    AnalysisSpecification,
    AnalysedCoordState,
    create_densitystate,
    create_random_coordstates,
)
from .linalg import partial_transpose, is_ppt, reshuffle, norm_trace
from .polytopes import (
    VPolytope,
    HPolytope,
    create_kernel_polytope,
    extend_vpolytope_by_densitystates,
)
from .concurrence import create_dictionary_from_basis, get_concurrence_qp
from .mub import create_standard_mub, calculate_correlation
from .witnesses import BoundedCoordEW, bound_coordew, create_random_bounded_ews
from .symmetries import Permutation, generate_symmetries, get_symcoords
from .checks import (
    kernel_check,
    ppt_check,
    realignment_check,
    numeric_ew_check,
    concurrence_qp_check,
    mub_check,
    spin_rep_check,
)
from .analysis import (
    analyse_coordstate,
    sym_analyse_coordstate,
    analyse_coordstates,
)
from .classification import classify_entanglement, classify_analyzed_states
from .validation import run_validation

__all__ = [
    # Configuration and errors
    "DEFAULT_PRECISION",
    "DEFAULT_REL_UNCERTAINTY",
    "BellDiagonalError",
    "SymmetryNotEnabledError",
    "ClassificationConflictError",

    # Basis
    "BasisElement",
    "StandardBasis",
    "weyl_operator",
    "maximally_entangled_state",
    "create_standard_indexbasis",
    "create_bipartite_weyloperator_basis",

    # States
    "EntanglementClass",
    "CoordState",
    "DensityState",
    "AnalysisSpecification",
    "AnalysedCoordState",
    "create_densitystate",
    "create_random_coordstates",

    # Analysis objects
    "partial_transpose",
    "is_ppt",
    "reshuffle",
    "norm_trace",
    "VPolytope",
    "HPolytope",
    "create_kernel_polytope",
    "extend_vpolytope_by_densitystates",
    "create_dictionary_from_basis",
    "get_concurrence_qp",
    "create_standard_mub",
    "calculate_correlation",
    "BoundedCoordEW",
    "bound_coordew",
    "create_random_bounded_ews",
    "Permutation",
    "generate_symmetries",
    "get_symcoords",

    # Checks
    "kernel_check",
    "ppt_check",
    "realignment_check",
    "numeric_ew_check",
    "concurrence_qp_check",
    "mub_check",
    "spin_rep_check",

    # Analysis and classification
    "analyse_coordstate",
    "sym_analyse_coordstate",
    "analyse_coordstates",
    "classify_entanglement",
    "classify_analyzed_states",
    "run_validation",
]
