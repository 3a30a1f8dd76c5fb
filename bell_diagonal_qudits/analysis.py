"""
Analysis of coordinate states by the entanglement checks.

analyse_coordstate runs every check enabled in an AnalysisSpecification for
which all analysis objects were supplied. A check that is disabled or lacks
an analysis object leaves its outcome None ("not evaluated").

sym_analyse_coordstate evaluates the checks along the symmetry orbit of a
state and combines the member outcomes:

    kernel, ppt:
        invariant under the symmetries; the first evaluated member decides.
    spinrep, realign, concurrence, mub, numeric_ew:
        True on any member holds for the whole orbit and is final.
        False is kept as the running value while the search continues.

A check is dropped from the working specification once it is decided, and
the orbit walk stops when no check is left.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence, Union

import numpy as np
from tqdm import tqdm

from .basis import StandardBasis
from .checks import (
    kernel_check,
    spin_rep_check,
    ppt_check,
    realignment_check,
    concurrence_qp_check,
    mub_check,
    numeric_ew_check,
)
from .config import DEFAULT_PRECISION, DEFAULT_REL_UNCERTAINTY
from .exceptions import SymmetryNotEnabledError
from .polytopes import HPolytope, VPolytope
from .states import AnalysedCoordState, AnalysisSpecification, CoordState
from .symmetries import Permutation, get_symcoords
from .witnesses import BoundedCoordEW

logger = logging.getLogger(__name__)

# (outcome field of AnalysedCoordState, flag of AnalysisSpecification)
CHECK_FIELDS = (
    ("kernel", "kernel_check"),
    ("spinrep", "spinrep_check"),
    ("ppt", "ppt_check"),
    ("realign", "realignment_check"),
    ("concurrence", "concurrence_qp_check"),
    ("mub", "mub_check"),
    ("numeric_ew", "numeric_ew_check"),
)

# Outcomes identical on every orbit member
INVARIANT_CHECKS = frozenset({"kernel", "ppt"})


def analyse_coordstate(
    d: int,
    coord_state: CoordState,
    ana_spec: AnalysisSpecification,
    std_basis: Optional[StandardBasis] = None,
    kernel_polytope: Optional[Union[HPolytope, VPolytope]] = None,
    bipartite_weyl_basis: Optional[List[np.ndarray]] = None,
    dictionaries: Optional[np.ndarray] = None,
    mub_set: Optional[List[List[np.ndarray]]] = None,
    bounded_ews: Optional[Sequence[BoundedCoordEW]] = None,
    precision: int = DEFAULT_PRECISION,
    rel_uncertainty: float = DEFAULT_REL_UNCERTAINTY,
) -> AnalysedCoordState:
    """
    Run the enabled entanglement checks on a coordinate state.

    Analysis objects required per check:
        kernel      kernel_polytope
        spinrep     std_basis, bipartite_weyl_basis
        ppt         std_basis
        realign     std_basis
        concurrence dictionaries
        mub         std_basis, mub_set
        numeric_ew  bounded_ews

    Args:
        d: Local dimension
        coord_state: State to analyse
        ana_spec: Checks to run
        std_basis: Bell basis
        kernel_polytope: Kernel polytope (V- or H-representation)
        bipartite_weyl_basis: Operator basis for the spin representation
        dictionaries: Overlaps from create_dictionary_from_basis
        mub_set: Mutually unbiased bases
        bounded_ews: Witnesses with separable bounds
        precision: Rounding digits for threshold comparisons
        rel_uncertainty: Relative widening of witness intervals

    Returns:
        AnalysedCoordState referencing `coord_state`; outcomes of checks
        that were not run are None
    """
    analysed = AnalysedCoordState(coord_state)

    if ana_spec.kernel_check and kernel_polytope is not None:
        analysed.kernel = kernel_check(coord_state, kernel_polytope)

    if ana_spec.spinrep_check and std_basis is not None and bipartite_weyl_basis is not None:
        analysed.spinrep = spin_rep_check(coord_state, std_basis, bipartite_weyl_basis, precision)

    if ana_spec.ppt_check and std_basis is not None:
        analysed.ppt = ppt_check(coord_state, std_basis, precision)

    if ana_spec.realignment_check and std_basis is not None:
        analysed.realign = realignment_check(coord_state, std_basis, precision)

    if ana_spec.concurrence_qp_check and dictionaries is not None:
        analysed.concurrence = concurrence_qp_check(coord_state, d, dictionaries, precision)

    if ana_spec.mub_check and std_basis is not None and mub_set is not None:
        analysed.mub = mub_check(coord_state, d, std_basis, mub_set, precision)

    if ana_spec.numeric_ew_check and bounded_ews is not None:
        analysed.numeric_ew = numeric_ew_check(coord_state, bounded_ews, rel_uncertainty)

    return analysed


def orbit_coordstates(coord_state: CoordState, symmetries: Sequence[Permutation]) -> List[CoordState]:
    """
    Orbit members of `coord_state`, carrying its label.

    Images are de-duplicated only if the coordinates have no repeated values.
    """
    images = get_symcoords(coord_state.coords, symmetries)

    if len(np.unique(coord_state.coords)) == len(coord_state.coords):
        unique_images = []
        seen = set()
        for image in images:
            key = tuple(image)
            if key not in seen:
                seen.add(key)
                unique_images.append(image)
        images = unique_images

    return [CoordState(image, coord_state.e_class) for image in images]


def sym_analyse_coordstate(
    d: int,
    coord_state: CoordState,
    symmetries: Sequence[Permutation],
    ana_spec: AnalysisSpecification,
    std_basis: Optional[StandardBasis] = None,
    kernel_polytope: Optional[Union[HPolytope, VPolytope]] = None,
    bipartite_weyl_basis: Optional[List[np.ndarray]] = None,
    dictionaries: Optional[np.ndarray] = None,
    mub_set: Optional[List[List[np.ndarray]]] = None,
    bounded_ews: Optional[Sequence[BoundedCoordEW]] = None,
    precision: int = DEFAULT_PRECISION,
    rel_uncertainty: float = DEFAULT_REL_UNCERTAINTY,
) -> AnalysedCoordState:
    """
    Run the enabled checks along the symmetry orbit of a coordinate state.

    Arguments are those of analyse_coordstate plus the `symmetries` that
    generate the orbit. `ana_spec.use_symmetries` must be set.

    Returns:
        AnalysedCoordState referencing the original `coord_state`

    Raises:
        SymmetryNotEnabledError: If ana_spec.use_symmetries is False
    """
    if not ana_spec.use_symmetries:
        raise SymmetryNotEnabledError()

    members = orbit_coordstates(coord_state, symmetries)
    logger.debug("Analysing orbit of %d states", len(members))

    working_spec = ana_spec
    outcomes: Dict[str, Optional[bool]] = {name: None for name, _ in CHECK_FIELDS}

    for position, member in enumerate(members):
        analysed_member = analyse_coordstate(
            d,
            member,
            working_spec,
            std_basis,
            kernel_polytope,
            bipartite_weyl_basis,
            dictionaries,
            mub_set,
            bounded_ews,
            precision,
            rel_uncertainty,
        )

        decided = {}
        for name, flag in CHECK_FIELDS:
            if not getattr(working_spec, flag):
                continue
            outcome = getattr(analysed_member, name)
            if outcome is None:
                continue
            outcomes[name] = outcome
            if name in INVARIANT_CHECKS or outcome:
                decided[flag] = False

        if decided:
            working_spec = replace(working_spec, **decided)

        if not working_spec.any_check_enabled():
            logger.debug("All checks decided after %d of %d orbit states", position + 1, len(members))
            break

    return AnalysedCoordState(coord_state, **outcomes)


def analyse_coordstates(
    d: int,
    coord_states: Iterable[CoordState],
    ana_spec: AnalysisSpecification,
    symmetries: Optional[Sequence[Permutation]] = None,
    progress: bool = False,
    **analysis_objects,
) -> List[AnalysedCoordState]:
    """
    Analyse many coordinate states.

    Uses sym_analyse_coordstate when ana_spec.use_symmetries is set (then
    `symmetries` is required), analyse_coordstate otherwise.

    Args:
        d: Local dimension
        coord_states: States to analyse
        ana_spec: Checks to run
        symmetries: Symmetry group for orbit reduction
        progress: Show a tqdm progress bar
        **analysis_objects: Keyword arguments of analyse_coordstate
            (std_basis, kernel_polytope, ..., precision, rel_uncertainty)

    Returns:
        One AnalysedCoordState per input state, in input order
    """
    if ana_spec.use_symmetries and symmetries is None:
        raise ValueError("symmetries required when use_symmetries is set")

    states = list(coord_states)
    iterator = tqdm(states, desc="Analysing", unit="state") if progress else states

    results = []
    for coord_state in iterator:
        if ana_spec.use_symmetries:
            results.append(sym_analyse_coordstate(d, coord_state, symmetries, ana_spec, **analysis_objects))
        else:
            results.append(analyse_coordstate(d, coord_state, ana_spec, **analysis_objects))

    logger.info("Analysed %d states", len(results))
    return results
