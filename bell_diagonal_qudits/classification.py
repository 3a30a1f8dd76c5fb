"""
Entanglement classification of analysed coordinate states.

Precedence (first matching rule wins):
    1. ppt evaluated and False                          → NPT
    2. kernel True or spinrep True                      → SEP
    3. ppt True                                         → PPT_UNKNOWN,
       upgraded to BOUND if realign, concurrence, mub or numeric_ew is True
    4. otherwise                                        → UNKNOWN

Outcomes that were not evaluated (None) never count as False.
"""

import logging
from collections import Counter
from typing import List

from .exceptions import ClassificationConflictError
from .states import AnalysedCoordState, EntanglementClass

logger = logging.getLogger(__name__)

ENTANGLEMENT_DETECTORS = ("realign", "concurrence", "mub", "numeric_ew")


def _evaluated_true(outcome) -> bool:
    return outcome is not None and bool(outcome)


def _evaluated_false(outcome) -> bool:
    return outcome is not None and not outcome


def classify_entanglement(analysed_state: AnalysedCoordState) -> EntanglementClass:
    """
    Derive the entanglement class from the check outcomes.

    Args:
        analysed_state: Check outcomes of one state

    Returns:
        EntanglementClass (UNKNOWN if the outcomes do not decide)
    """
    if _evaluated_false(analysed_state.ppt):
        return EntanglementClass.NPT

    if _evaluated_true(analysed_state.kernel) or _evaluated_true(analysed_state.spinrep):
        return EntanglementClass.SEP

    if _evaluated_true(analysed_state.ppt):
        if any(_evaluated_true(getattr(analysed_state, name)) for name in ENTANGLEMENT_DETECTORS):
            return EntanglementClass.BOUND
        return EntanglementClass.PPT_UNKNOWN

    return EntanglementClass.UNKNOWN


def classify_analyzed_states(analysed_states: List[AnalysedCoordState]) -> List[AnalysedCoordState]:
    """
    Set the entanglement class of the coordinate state behind each result.

    UNKNOWN coordinate states adopt the derived class. A coordinate state
    that already carries a class different from a derived (non-UNKNOWN)
    class is a conflict.

    Args:
        analysed_states: Analysis results; their coordinate states are
            modified in place

    Returns:
        The same list

    Raises:
        ClassificationConflictError: On the first conflicting state
    """
    for analysed_state in analysed_states:
        derived = classify_entanglement(analysed_state)
        if derived is EntanglementClass.UNKNOWN:
            continue

        coord_state = analysed_state.coord_state
        if coord_state.e_class == EntanglementClass.UNKNOWN:
            coord_state.e_class = derived
        elif coord_state.e_class != derived:
            raise ClassificationConflictError(analysed_state, coord_state.e_class, derived)

    if logger.isEnabledFor(logging.INFO):
        counts = Counter(str(a.coord_state.e_class) for a in analysed_states)
        logger.info("Classified %d states: %s", len(analysed_states), dict(counts))

    return analysed_states
