"""
Quasi-pure approximation of the concurrence for Bell-diagonal states.

For a pure state the I-concurrence is C(ψ)² = Σ_α |⟨ψ|A_α|ψ*⟩|² with
A_α = L_a ⊗ L_b and L_{jk} = |j⟩⟨k| - |k⟩⟨j| (j < k). For a mixed state
ρ = Σ cᵢ |Ωᵢ⟩⟨Ωᵢ| the quasi-pure approximation expands around the dominant
Bell component n:

    τ^α_{jk} = √(c_j c_k) ⟨Ω_j|A_α|Ω_k*⟩
    z_α      = τ^α_{nn} / ‖τ_{nn}‖
    T        = Σ_α z_α* τ^α
    C_qp(ρ)  = max(0, S₁ - Σ_{i>1} Sᵢ),   Sᵢ singular values of T

C_qp > 0 certifies entanglement.

References:
    - Mintert, Buchleitner, PRL 98, 140505 (2007)
    - Bastin et al., PRA 80, 052309 (2009)
"""

from itertools import combinations
from typing import List

import numpy as np

from .basis import StandardBasis


def antisymmetric_generators(d: int) -> List[np.ndarray]:
    """L_{jk} = |j⟩⟨k| - |k⟩⟨j| for 0 ≤ j < k < d."""
    generators = []
    for j, k in combinations(range(d), 2):
        L = np.zeros((d, d))
        L[j, k] = 1.0
        L[k, j] = -1.0
        generators.append(L)
    return generators


def create_dictionary_from_basis(std_basis: StandardBasis) -> np.ndarray:
    """
    Precompute the overlaps τ^α_{jk} = ⟨Ω_j|A_α|Ω_k*⟩ for a Bell basis.

    Args:
        std_basis: Bell basis

    Returns:
        Complex array of shape (n_α, d², d²), n_α = (d(d-1)/2)²
    """
    d = std_basis.d
    V = std_basis.vectors
    generators = antisymmetric_generators(d)
    tau = [
        V.conj().T @ np.kron(La, Lb) @ V.conj()
        for La in generators
        for Lb in generators
    ]
    return np.array(tau)


def get_concurrence_qp(coords, d: int, dictionaries: np.ndarray) -> float:
    """
    Quasi-pure concurrence of the Bell-diagonal state with `coords`.

    Args:
        coords: Coordinates in the magic simplex
        d: Local dimension
        dictionaries: Output of create_dictionary_from_basis

    Returns:
        C_qp ≥ 0
    """
    c = np.asarray(coords, dtype=float)
    if dictionaries.shape[1] != d * d or len(c) != d * d:
        raise ValueError(
            f"Expected {d * d} coordinates and matching dictionaries, "
            f"got {len(c)} and {dictionaries.shape[1]}"
        )

    dominant = int(np.argmax(c))
    amplitudes = np.sqrt(np.clip(c, 0.0, None))
    tau = dictionaries * np.outer(amplitudes, amplitudes)

    tau_dominant = tau[:, dominant, dominant]
    norm = np.linalg.norm(tau_dominant)
    if norm == 0:
        return 0.0

    z = tau_dominant / norm
    T = np.tensordot(z.conj(), tau, axes=1)
    s = np.linalg.svd(T, compute_uv=False)

    return max(0.0, float(s[0] - np.sum(s[1:])))
