"""
Self-consistency validation of the entanglement checks.

Validates the checks and the classifier on states with known entanglement:
- Maximally mixed state: separable, inside the kernel
- Bell states: maximally entangled, NPT
- Kernel vertices: separable and PPT
- Spin representation never contradicts realignment
- Symmetry orbits: PPT and kernel membership are invariant
- Symmetry-reduced analysis agrees with analysis of the original state
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from .analysis import analyse_coordstate, sym_analyse_coordstate
from .basis import create_standard_indexbasis, create_bipartite_weyloperator_basis
from .checks import kernel_check, ppt_check, realignment_check, spin_rep_check
from .classification import classify_entanglement
from .concurrence import create_dictionary_from_basis
from .mub import create_standard_mub
from .polytopes import create_kernel_polytope
from .states import (
    AnalysisSpecification,
    CoordState,
    EntanglementClass,
    create_random_coordstates,
)
from .symmetries import generate_symmetries, get_symcoords


@dataclass
class CheckExpectation:
    """One expected outcome of a check on a state with known entanglement."""
    check: str
    passed: bool
    details: str = ""

    def __str__(self):
        mark = "✓" if self.passed else "✗"
        return f"{mark} {self.check}"


@dataclass
class ValidationResults:
    """Expectations collected by one validator."""
    expectations: List[CheckExpectation] = field(default_factory=list)

    def expect(self, check: str, condition, details: str = "") -> bool:
        expectation = CheckExpectation(check, bool(condition), details)
        self.expectations.append(expectation)
        return expectation.passed

    @property
    def passed(self) -> int:
        return sum(e.passed for e in self.expectations)

    @property
    def failed(self) -> int:
        return len(self.expectations) - self.passed


def _artifacts(d: int) -> Dict:
    std_basis = create_standard_indexbasis(d)
    return {
        "std_basis": std_basis,
        "kernel_polytope": create_kernel_polytope(d, std_basis),
        "bipartite_weyl_basis": create_bipartite_weyloperator_basis(d),
        "dictionaries": create_dictionary_from_basis(std_basis),
        "mub_set": create_standard_mub(d),
    }


def validate_maximally_mixed(d: int, artifacts: Dict) -> ValidationResults:
    """The maximally mixed state is detected as separable by every check."""
    results = ValidationResults()

    state = CoordState(np.ones(d * d) / (d * d))
    analysed = analyse_coordstate(d, state, AnalysisSpecification.all_checks(), **artifacts)

    results.expect("kernel", analysed.kernel is True)
    results.expect("spin representation", analysed.spinrep is True)
    results.expect("PPT", analysed.ppt is True)
    results.expect("realignment", analysed.realign is False)
    results.expect("quasi-pure concurrence", analysed.concurrence is False)
    results.expect("MUB correlation", analysed.mub is False)
    cls = classify_entanglement(analysed)
    results.expect("class SEP", cls == EntanglementClass.SEP, f"class = {cls}")

    return results


def validate_bell_states(d: int, artifacts: Dict) -> ValidationResults:
    """Every Bell state is NPT and detected by realignment, concurrence and MUBs."""
    results = ValidationResults()

    classes = []
    detected = []
    for i in range(d * d):
        coords = np.zeros(d * d)
        coords[i] = 1.0
        analysed = analyse_coordstate(d, CoordState(coords), AnalysisSpecification.all_checks(), **artifacts)
        classes.append(classify_entanglement(analysed))
        detected.append(analysed.realign and analysed.concurrence)

    results.expect("Bell states NPT", all(c == EntanglementClass.NPT for c in classes))
    results.expect("Bell states detected", all(detected))

    # MUB criterion is aligned with |Ω₀₀⟩
    coords = np.zeros(d * d)
    coords[0] = 1.0
    analysed = analyse_coordstate(
        d, CoordState(coords), AnalysisSpecification(mub_check=True), **artifacts
    )
    results.expect("MUB detects |Ω₀₀⟩", analysed.mub is True)

    return results


def validate_kernel_vertices(d: int, artifacts: Dict) -> ValidationResults:
    """Kernel vertices are in the kernel and PPT."""
    results = ValidationResults()

    polytope = artifacts["kernel_polytope"]
    std_basis = artifacts["std_basis"]
    in_kernel = [kernel_check(CoordState(v), polytope) for v in polytope.vertices]
    ppt = [ppt_check(CoordState(v), std_basis) for v in polytope.vertices]

    results.expect("vertices in kernel", all(in_kernel), f"{sum(in_kernel)}/{len(in_kernel)}")
    results.expect("vertices PPT", all(ppt), f"{sum(ppt)}/{len(ppt)}")

    return results


def validate_spinrep_realignment(d: int, artifacts: Dict, n_states: int = 200, seed: int = 3) -> ValidationResults:
    """No state detected by realignment is certified separable by its spin representation."""
    results = ValidationResults()

    std_basis = artifacts["std_basis"]
    weyl_basis = artifacts["bipartite_weyl_basis"]

    contradictions = 0
    detected = 0
    for state in create_random_coordstates(n_states, d, seed=seed):
        if realignment_check(state, std_basis):
            detected += 1
            contradictions += spin_rep_check(state, std_basis, weyl_basis)

    results.expect("spinrep consistent with realignment", contradictions == 0,
                   f"{contradictions}/{detected} realignment-detected states")

    return results


def validate_symmetries(d: int, artifacts: Dict, n_states: int = 5, seed: int = 42) -> ValidationResults:
    """PPT and kernel outcomes are constant on symmetry orbits."""
    results = ValidationResults()

    std_basis = artifacts["std_basis"]
    polytope = artifacts["kernel_polytope"]
    symmetries = generate_symmetries(std_basis, d)

    ppt_invariant = True
    kernel_invariant = True
    for state in create_random_coordstates(n_states, d, seed=seed):
        orbit = get_symcoords(state.coords, symmetries[::max(1, len(symmetries) // 20)])
        ppt_values = {ppt_check(CoordState(c), std_basis) for c in orbit}
        kernel_values = {kernel_check(CoordState(c), polytope) for c in orbit}
        ppt_invariant &= len(ppt_values) == 1
        kernel_invariant &= len(kernel_values) == 1

    results.expect("PPT invariant on orbits", ppt_invariant)
    results.expect("kernel invariant on orbits", kernel_invariant)

    return results


def validate_symmetry_reduction(d: int, artifacts: Dict, seed: int = 7) -> ValidationResults:
    """Symmetry-reduced analysis agrees with plain analysis on PPT and kernel."""
    results = ValidationResults()

    symmetries = generate_symmetries(artifacts["std_basis"], d)
    state = create_random_coordstates(1, d, seed=seed)[0]

    plain = analyse_coordstate(d, state, AnalysisSpecification.all_checks(), **artifacts)
    reduced = sym_analyse_coordstate(
        d, state, symmetries[:20], AnalysisSpecification.all_checks(use_symmetries=True), **artifacts
    )

    results.expect("PPT agrees", plain.ppt == reduced.ppt)
    results.expect("kernel agrees", plain.kernel == reduced.kernel)
    results.expect("result keyed by original state", reduced.coord_state is state)

    return results


def run_validation(d: int = 3, verbose: bool = True, artifacts: Optional[Dict] = None) -> Dict[str, ValidationResults]:
    """
    Run all validation tests.

    Args:
        d: Local dimension (prime power, for the MUB construction)
        verbose: Print detailed output
        artifacts: Precomputed analysis objects (built if None)

    Returns:
        Dictionary mapping test names to ValidationResults
    """
    if artifacts is None:
        artifacts = _artifacts(d)

    all_results = {}

    if verbose:
        print("=" * 80)
        print(f"VALIDATION OF ENTANGLEMENT CHECKS (d = {d})")
        print("=" * 80)

    tests = [
        ("Maximally Mixed State", validate_maximally_mixed),
        ("Bell States", validate_bell_states),
        ("Kernel Vertices", validate_kernel_vertices),
        ("Spin Representation", validate_spinrep_realignment),
        ("Symmetry Invariance", validate_symmetries),
        ("Symmetry Reduction", validate_symmetry_reduction),
    ]

    for name, test_func in tests:
        if verbose:
            print(f"\n{name}:")

        results = test_func(d, artifacts)
        all_results[name] = results

        if verbose:
            for expectation in results.expectations:
                print(f"  {expectation}")
                if expectation.details and not expectation.passed:
                    print(f"      {expectation.details}")

    total_passed = sum(r.passed for r in all_results.values())
    total_failed = sum(r.failed for r in all_results.values())

    if verbose:
        print("\n" + "=" * 80)
        print("VALIDATION SUMMARY")
        print("=" * 80)
        print(f"Results: {total_passed} passed, {total_failed} failed")

        if total_failed == 0:
            print("\n✓ ALL CHECKS VALIDATED SUCCESSFULLY")
        else:
            print(f"\n⚠ {total_failed} test(s) require review")

    return all_results
