"""
Entanglement-preserving symmetries of the magic simplex.

Local unitaries (and complex conjugation) that permute the Bell projectors
act on the phase space Z_d × Z_d as affine maps x ↦ Mx + t. Translations t
come from Weyl operators; the linear parts M are generated by

    quarter rotation   (k, l) ↦ (-l, k)
    vertical shear     (k, l) ↦ (k + l, l)
    momentum inversion (k, l) ↦ (-k, l)

All of them preserve separability, PPT and the entanglement class of a
state, so checks can be evaluated on any member of a state's orbit.
"""

from collections import deque
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .basis import StandardBasis, coord_index

Matrix2 = Tuple[Tuple[int, int], Tuple[int, int]]

_GENERATORS: Tuple[Matrix2, ...] = (
    ((0, -1), (1, 0)),
    ((1, 1), (0, 1)),
    ((-1, 0), (0, 1)),
)


@dataclass(frozen=True)
class Permutation:
    """
    Coordinate relabelling: the image of c is c[mapping].
    """
    mapping: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.mapping)

    def apply(self, coords) -> np.ndarray:
        return np.asarray(coords)[list(self.mapping)]


def _matmul(A: Matrix2, B: Matrix2, d: int) -> Matrix2:
    return tuple(
        tuple(sum(A[i][m] * B[m][j] for m in range(2)) % d for j in range(2))
        for i in range(2)
    )


def _linear_group(d: int) -> List[Matrix2]:
    """Closure of the generators mod d, identity first, in discovery order."""
    identity = ((1, 0), (0, 1))
    generators = [
        tuple(tuple(x % d for x in row) for row in g) for g in _GENERATORS
    ]
    group = [identity]
    seen = {identity}
    queue = deque([identity])
    while queue:
        M = queue.popleft()
        for g in generators:
            product = _matmul(g, M, d)
            if product not in seen:
                seen.add(product)
                group.append(product)
                queue.append(product)
    return group


def generate_symmetries(std_basis: StandardBasis, d: int) -> List[Permutation]:
    """
    Generate the symmetry group acting on coordinates.

    Ordered by linear part (identity first), then by translation with the
    k shift varying fastest. Element 0 is the identity.

    Args:
        std_basis: Bell basis defining the coordinate order
        d: Local dimension

    Returns:
        List of Permutation (432 for d = 3)
    """
    if len(std_basis) != d * d:
        raise ValueError(f"Basis has {len(std_basis)} elements, expected {d * d}")

    translations = [(a, b) for b in range(d) for a in range(d)]
    symmetries = []
    for M in _linear_group(d):
        for t in translations:
            mapping = [0] * (d * d)
            for k, l in std_basis.phase_points:
                image_k = M[0][0] * k + M[0][1] * l + t[0]
                image_l = M[1][0] * k + M[1][1] * l + t[1]
                mapping[coord_index(d, image_k, image_l)] = coord_index(d, k, l)
            symmetries.append(Permutation(tuple(mapping)))
    return symmetries


def get_symcoords(coords, symmetries: List[Permutation]) -> List[np.ndarray]:
    """Orbit of `coords` under `symmetries`, in symmetry order."""
    return [s.apply(coords) for s in symmetries]
