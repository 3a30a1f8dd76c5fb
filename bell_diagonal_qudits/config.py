"""
Configuration and default parameters for entanglement classification.
"""

# Rounding applied before every threshold comparison (decimal digits)
DEFAULT_PRECISION = 10

# Relative widening of a witness interval, in units of upper - lower
DEFAULT_REL_UNCERTAINTY = 0.0

# Decision thresholds
# realignment: ||R(ρ)||₁ > 1 ⇒ entangled
# MUB:         Σ mutual predictabilities > 2 ⇒ entangled (full set of d+1 bases)
# spin rep:    Σ |tr(ρ Bᵢ†)| ≤ 2 ⇒ separable
# concurrence: C_qp(ρ) > 0 ⇒ entangled
REALIGNMENT_BOUND = 1.0
MUB_CORRELATION_BOUND = 2.0
SPINREP_BOUND = 2.0
CONCURRENCE_BOUND = 0.0

# Random restarts when bounding a witness over product states
DEFAULT_EW_ITERATIONS = 20

# Slack for polytope membership (linprog residuals, half-space rows)
POLYTOPE_TOLERANCE = 1e-9

# Entanglement class labels
ECLASS_UNKNOWN = "UNKNOWN"
ECLASS_SEP = "SEP"
ECLASS_BOUND = "BOUND"
ECLASS_NPT = "NPT"
ECLASS_PPT_UNKNOWN = "PPT_UNKNOWN"
