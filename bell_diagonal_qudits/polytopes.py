"""
Convex polytopes in coordinate space and the kernel polytope.

The kernel polytope is the convex hull of the uniform mixtures

    1/d Σⱼ P_{x + j·g}

over the cosets x + ⟨g⟩ of every cyclic subgroup ⟨g⟩ of order d of the
phase space Z_d × Z_d. All of its points are separable.
"""

from dataclasses import dataclass
from typing import Iterable, List

import numpy as np
from scipy.optimize import linprog

from .basis import StandardBasis, coord_index
from .config import DEFAULT_PRECISION, POLYTOPE_TOLERANCE


@dataclass(frozen=True)
class VPolytope:
    """Polytope given by its vertices (one per row)."""
    vertices: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "vertices", np.atleast_2d(np.asarray(self.vertices, dtype=float)))

    def __contains__(self, point) -> bool:
        # Feasibility of x = Vᵀλ, Σλ = 1, λ ≥ 0
        x = np.asarray(point, dtype=float)
        n = self.vertices.shape[0]
        A_eq = np.vstack([self.vertices.T, np.ones((1, n))])
        b_eq = np.concatenate([x, [1.0]])
        result = linprog(
            np.zeros(n),
            A_eq=A_eq,
            b_eq=b_eq,
            bounds=(0, None),
            method="highs",
        )
        return bool(result.status == 0)

    def vertices_list(self) -> List[np.ndarray]:
        return list(self.vertices)


@dataclass(frozen=True)
class HPolytope:
    """Polytope {x : A·x ≤ b}."""
    A: np.ndarray
    b: np.ndarray
    tolerance: float = POLYTOPE_TOLERANCE

    def __post_init__(self):
        object.__setattr__(self, "A", np.atleast_2d(np.asarray(self.A, dtype=float)))
        object.__setattr__(self, "b", np.asarray(self.b, dtype=float))

    def __contains__(self, point) -> bool:
        x = np.asarray(point, dtype=float)
        return bool(np.all(self.A @ x <= self.b + self.tolerance))


def _cyclic_subgroups(d: int) -> List[List[tuple]]:
    """All cyclic subgroups of order d of Z_d × Z_d, as ordered element lists."""
    subgroups = []
    seen = set()
    for g in ((a, b) for a in range(d) for b in range(d)):
        elements = [((j * g[0]) % d, (j * g[1]) % d) for j in range(d)]
        key = frozenset(elements)
        if len(key) == d and key not in seen:
            seen.add(key)
            subgroups.append(elements)
    return subgroups


def create_kernel_polytope(d: int, std_basis: StandardBasis) -> VPolytope:
    """
    Create the kernel polytope of the magic simplex.

    Args:
        d: Local dimension
        std_basis: Bell basis defining the coordinate order

    Returns:
        VPolytope with one vertex per coset of each cyclic subgroup of
        order d (12 vertices for d=3, 24 for d=4)
    """
    if len(std_basis) != d * d:
        raise ValueError(f"Basis has {len(std_basis)} elements, expected {d * d}")

    vertices = []
    seen = set()
    for subgroup in _cyclic_subgroups(d):
        for shift in ((a, b) for a in range(d) for b in range(d)):
            indices = frozenset(
                coord_index(d, shift[0] + k, shift[1] + l) for k, l in subgroup
            )
            if indices in seen:
                continue
            seen.add(indices)
            vertex = np.zeros(d * d)
            vertex[list(indices)] = 1.0 / d
            vertices.append(vertex)

    return VPolytope(np.array(vertices))


def extend_vpolytope_by_densitystates(
    polytope: VPolytope,
    density_states: Iterable,
    precision: int = DEFAULT_PRECISION,
) -> VPolytope:
    """
    Add the coordinates of density states as further vertices.

    Coordinates are rounded to `precision` digits; points already present
    are not added twice. Redundant (interior) vertices are kept.
    """
    vertices = [np.round(v, precision) for v in polytope.vertices]
    keys = {tuple(v) for v in vertices}
    for state in density_states:
        v = np.round(np.asarray(state.coords, dtype=float), precision)
        if tuple(v) not in keys:
            keys.add(tuple(v))
            vertices.append(v)
    return VPolytope(np.array(vertices))
