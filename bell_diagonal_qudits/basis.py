"""
Bell basis and Weyl operators for bipartite qudit systems.

Bell states of a d×d system are generated from the maximally entangled
state |Ω₀₀⟩ = Σⱼ |jj⟩/√d by local Weyl operators:

    W_{k,l} = Σⱼ ωʲᵏ |j⟩⟨j+l|,      ω = exp(2πi/d)
    |Ω_{k,l}⟩ = (W_{k,l} ⊗ 1) |Ω₀₀⟩

The d² Bell projectors P_{k,l} = |Ω_{k,l}⟩⟨Ω_{k,l}| span the magic simplex.
A state with coordinates c is ρ = Σ c_{k,l} P_{k,l}, where the coordinate
index of the phase-space point (k, l) is k·d + l.
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Tuple

from .config import DEFAULT_PRECISION


def weyl_operator(d: int, k: int, l: int) -> np.ndarray:
    """
    Weyl operator W_{k,l} = Σⱼ ωʲᵏ |j⟩⟨j+l| for a single qudit.

    Args:
        d: Local dimension
        k: Phase (clock) index
        l: Shift index

    Returns:
        d×d unitary matrix
    """
    omega = np.exp(2j * np.pi / d)
    W = np.zeros((d, d), dtype=complex)
    for j in range(d):
        W[j, (j + l) % d] = omega ** (j * k)
    return W


def maximally_entangled_state(d: int) -> np.ndarray:
    """|Ω₀₀⟩ = Σⱼ |jj⟩/√d as a d²-element vector."""
    return np.eye(d, dtype=complex).reshape(d * d) / np.sqrt(d)


def coord_index(d: int, k: int, l: int) -> int:
    """Coordinate index of phase-space point (k, l)."""
    return (k % d) * d + (l % d)


@dataclass(frozen=True)
class BasisElement:
    """One Bell state of the standard basis."""
    index: int
    phase_point: Tuple[int, int]
    vector: np.ndarray
    projector: np.ndarray


@dataclass(frozen=True)
class StandardBasis:
    """
    Bell basis of the magic simplex, ordered by coordinate index.

    Shared read-only by every check; nothing in the package writes to it.
    """
    d: int
    elements: Tuple[BasisElement, ...]

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def projectors(self) -> List[np.ndarray]:
        return [e.projector for e in self.elements]

    @property
    def vectors(self) -> np.ndarray:
        """Bell vectors as columns of a d²×d² matrix."""
        return np.column_stack([e.vector for e in self.elements])

    @property
    def phase_points(self) -> List[Tuple[int, int]]:
        return [e.phase_point for e in self.elements]


def create_standard_indexbasis(d: int, precision: int = DEFAULT_PRECISION) -> StandardBasis:
    """
    Create the standard Bell basis for a d×d system.

    Args:
        d: Local dimension
        precision: Decimal digits kept in the projectors

    Returns:
        StandardBasis with d² elements, element i at phase point
        (i // d, i % d)
    """
    if d < 2:
        raise ValueError(f"Local dimension must be at least 2, got {d}")

    omega_00 = maximally_entangled_state(d)
    identity = np.eye(d, dtype=complex)

    elements = []
    for k in range(d):
        for l in range(d):
            vec = np.kron(weyl_operator(d, k, l), identity) @ omega_00
            proj = np.round(np.outer(vec, vec.conj()), precision)
            elements.append(BasisElement(
                index=coord_index(d, k, l),
                phase_point=(k, l),
                vector=vec,
                projector=proj,
            ))

    return StandardBasis(d=d, elements=tuple(elements))


def create_bipartite_weyloperator_basis(d: int) -> List[np.ndarray]:
    """
    Bipartite Weyl operators {W_{k,l} ⊗ W_{m,n}}.

    The products are unitary and Hilbert-Schmidt orthogonal with
    tr(A B†) = d² δ_{AB}. They are left unnormalized so that the
    coefficients tr(ρ B†) of a state are bounded by 1 in magnitude.

    Args:
        d: Local dimension

    Returns:
        List of d⁴ matrices of size d²×d²
    """
    weyls = [weyl_operator(d, k, l) for k in range(d) for l in range(d)]
    return [np.kron(A, B) for A in weyls for B in weyls]
