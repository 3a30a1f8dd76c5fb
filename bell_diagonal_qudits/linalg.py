"""
Matrix routines used by the entanglement checks.
"""

import numpy as np


def _local_dimension(rho: np.ndarray) -> int:
    n = rho.shape[0]
    d = int(round(np.sqrt(n)))
    if rho.ndim != 2 or rho.shape[1] != n or d * d != n:
        raise ValueError(f"Expected a d²×d² matrix, got shape {rho.shape}")
    return d


def partial_transpose(rho: np.ndarray, d1: int, d2: int) -> np.ndarray:
    """Partial transpose on subsystem A."""
    rho_reshaped = rho.reshape(d1, d2, d1, d2)
    rho_pt = rho_reshaped.transpose(2, 1, 0, 3).reshape(d1 * d2, d1 * d2)
    return (rho_pt + rho_pt.conj().T) / 2


def is_ppt(rho: np.ndarray, d: int, precision: int) -> bool:
    """
    Check positivity of the partial transpose.

    Args:
        rho: d²×d² density matrix
        d: Local dimension
        precision: Decimal digits the smallest eigenvalue is rounded to

    Returns:
        True if the smallest eigenvalue of ρ^{T_A} is ≥ 0 after rounding
    """
    min_eig = np.min(np.linalg.eigvalsh(partial_transpose(rho, d, d)))
    return round(float(min_eig), precision) >= 0


def reshuffle(rho: np.ndarray) -> np.ndarray:
    """
    Realignment R(ρ)_{(ij),(kl)} = ρ_{(ik),(jl)}.

    Args:
        rho: d²×d² matrix

    Returns:
        Realigned d²×d² matrix
    """
    d = _local_dimension(rho)
    return rho.reshape(d, d, d, d).transpose(0, 2, 1, 3).reshape(d * d, d * d)


def norm_trace(matrix: np.ndarray) -> float:
    """Trace norm ||A||₁ = Σ singular values."""
    return float(np.sum(np.linalg.svd(matrix, compute_uv=False)))
