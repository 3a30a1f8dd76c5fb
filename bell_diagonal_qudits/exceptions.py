"""
Exceptions raised by the classification engine.
"""


class BellDiagonalError(Exception):
    """Base class for errors raised by bell_diagonal_qudits."""


class SymmetryNotEnabledError(BellDiagonalError, ValueError):
    """Symmetry-reduced analysis requested with use_symmetries=False."""

    def __init__(self, message: str = "use_symmetries not set in analysis specification"):
        super().__init__(message)


class ClassificationConflictError(BellDiagonalError):
    """
    A derived entanglement class disagrees with the label already carried
    by the coordinate state.

    Attributes:
        analysed_state: The offending AnalysedCoordState
        existing: Label stored on the coordinate state
        derived: Label derived from the analysis outcomes
    """

    def __init__(self, analysed_state, existing, derived):
        self.analysed_state = analysed_state
        self.existing = existing
        self.derived = derived
        super().__init__(
            f"Entanglement class conflict for coords "
            f"{list(analysed_state.coord_state.coords)}: "
            f"labelled {existing}, analysis gives {derived}"
        )
