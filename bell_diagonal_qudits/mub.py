"""
Mutually unbiased bases and the MUB correlation criterion.

For a set of m MUBs {|i_k⟩} the mutual predictabilities

    I_m(ρ) = Σ_k Σ_i ⟨i_k ⊗ i_k*|ρ|i_k ⊗ i_k*⟩

are bounded by 1 + (m-1)/d for separable ρ. With the complete set of d+1
bases the bound is 2.

Complete sets exist for every prime power d = pᵐ. For prime d the bases
are written down directly; for m > 1 they are the common eigenbases of
d+1 disjoint commuting classes of generalized Pauli operators on m
p-level systems, labelled by the elements of GF(pᵐ).

References:
    - Wootters & Fields, Ann. Phys. 191, 363 (1989)
    - Bandyopadhyay et al., Algorithmica 34, 512 (2002)
    - Spengler et al., PRA 86, 022311 (2012)
"""

from itertools import product
from typing import List, Optional, Tuple

import numpy as np


def _prime_power(d: int) -> Optional[Tuple[int, int]]:
    """(p, m) with d = pᵐ, or None if d is not a prime power."""
    if d < 2:
        return None
    p = next(q for q in range(2, d + 1) if d % q == 0)
    m = 0
    while d % p == 0:
        d //= p
        m += 1
    return (p, m) if d == 1 else None


# Polynomials over GF(p) are coefficient lists, lowest order first.

def _poly_mod(a: List[int], f: List[int], p: int) -> List[int]:
    a = [c % p for c in a]
    while len(a) >= len(f):
        lead = a[-1]
        if lead:
            shift = len(a) - len(f)
            for i, c in enumerate(f):
                a[shift + i] = (a[shift + i] - lead * c) % p
        a.pop()
    return a


def _irreducible_polynomial(p: int, m: int) -> List[int]:
    """First monic irreducible polynomial of degree m over GF(p)."""
    for tail in product(range(p), repeat=m):
        f = list(tail) + [1]
        if f[0] == 0:
            continue
        reducible = any(
            not any(_poly_mod(f, list(g) + [1], p))
            for k in range(1, m // 2 + 1)
            for g in product(range(p), repeat=k)
        )
        if not reducible:
            return f
    raise ValueError(f"No irreducible polynomial of degree {m} over GF({p})")


def _field_mul(a: Tuple[int, ...], b: Tuple[int, ...], f: List[int], p: int) -> List[int]:
    m = len(f) - 1
    prod = [0] * (2 * m - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            prod[i + j] += x * y
    rem = _poly_mod(prod, f, p)
    return rem + [0] * (m - len(rem))


def _field_trace(a: Tuple[int, ...], f: List[int], p: int) -> int:
    """Absolute trace GF(pᵐ) → GF(p), the trace of multiplication by a."""
    m = len(f) - 1
    total = 0
    for i in range(m):
        monomial = tuple(1 if k == i else 0 for k in range(m))
        total += _field_mul(a, monomial, f, p)[i]
    return total % p


def _pauli(x: List[int], z: List[int], p: int) -> np.ndarray:
    """X^x Z^z on m p-level systems."""
    omega = np.exp(2j * np.pi / p)
    shift = np.roll(np.eye(p), 1, axis=0)
    clock = np.diag(omega ** np.arange(p))
    op = np.eye(1)
    for xi, zi in zip(x, z):
        op = np.kron(op, np.linalg.matrix_power(shift, xi) @ np.linalg.matrix_power(clock, zi))
    return op


def _common_eigenbasis(generators: List[np.ndarray], weights: np.ndarray) -> List[np.ndarray]:
    # a generic Hermitian combination of commuting unitaries has a
    # non-degenerate spectrum and shares their eigenvectors
    H = sum(w * G + np.conj(w) * G.conj().T for w, G in zip(weights, generators))
    _, vecs = np.linalg.eigh(H)
    return [vecs[:, i] for i in range(vecs.shape[1])]


def _prime_power_mub(p: int, m: int) -> List[List[np.ndarray]]:
    d = p ** m
    f = _irreducible_polynomial(p, m)
    rng = np.random.default_rng(d)
    weights = rng.normal(size=m) + 1j * rng.normal(size=m)

    # tr(a xⁱ xʲ) for the monomial basis
    monomials = [tuple(1 if k == i else 0 for k in range(m)) for i in range(m)]
    bases = [list(np.eye(d, dtype=complex))]
    for a in product(range(p), repeat=m):
        S = [
            [_field_trace(tuple(_field_mul(a, tuple(_field_mul(ei, ej, f, p)), f, p)), f, p) for ej in monomials]
            for ei in monomials
        ]
        generators = [
            _pauli([1 if k == j else 0 for k in range(m)], [S[k][j] for k in range(m)], p)
            for j in range(m)
        ]
        bases.append(_common_eigenbasis(generators, weights))
    return bases


def create_standard_mub(d: int) -> List[List[np.ndarray]]:
    """
    Complete set of d+1 MUBs for prime-power d.

    Basis 0 is the computational basis. For prime d basis a+1 has vectors
    |e^a_b⟩ = Σⱼ ω^{a j² + b j} |j⟩/√d (for d = 2 the phases are
    i^{a j² + 2 b j}), the Wootters-Fields construction. For d = pᵐ with
    m > 1 the remaining d bases are eigenbases of the Pauli classes
    {X^x Z^{S_a x}}, S_a[i][j] = tr(a xⁱ xʲ), one per field element a.

    Args:
        d: Prime-power local dimension

    Returns:
        List of d+1 bases, each a list of d state vectors
    """
    factors = _prime_power(d)
    if factors is None:
        raise ValueError(f"Standard MUB construction requires prime-power d, got {d}")

    p, m = factors
    if m > 1:
        return _prime_power_mub(p, m)

    j = np.arange(d)
    bases = [list(np.eye(d, dtype=complex))]
    for a in range(d):
        basis = []
        for b in range(d):
            if d == 2:
                phase = np.pi / 2 * ((a * j**2 + 2 * b * j) % 4)
            else:
                phase = 2 * np.pi / d * ((a * j**2 + b * j) % d)
            basis.append(np.exp(1j * phase) / np.sqrt(d))
        bases.append(basis)
    return bases


def calculate_correlation(d: int, mub_set: List[List[np.ndarray]], rho: np.ndarray) -> float:
    """
    Sum of mutual predictabilities of `rho` over `mub_set`.

    Args:
        d: Local dimension
        mub_set: Bases of single-qudit vectors
        rho: d²×d² density matrix

    Returns:
        I_m(ρ)
    """
    if rho.shape != (d * d, d * d):
        raise ValueError(f"Expected a {d * d}×{d * d} matrix, got shape {rho.shape}")

    total = 0.0
    for basis in mub_set:
        for v in basis:
            vv = np.kron(v, v.conj())
            total += np.real(vv.conj() @ rho @ vv)
    return float(total)
