"""
Resonance parameters and ground-state eigenvalues of the complexity
Hamiltonians.

Derived from their definitions, not hardcoded:
  φ = (1 + √5)/2
  α_P = √2,  α_NP = φ + 1/4
  λ₀(H) = π / (10 α)
  Δ = λ₀(H_P) - λ₀(H_NP) ≈ 0.0539677287
"""
import numpy as np

# =============================================================================
# Base constants
# =============================================================================
PHI = float((1 + np.sqrt(5)) / 2)       # 1.618033988749895
SQRT2 = float(np.sqrt(2))               # 1.4142135623730951
PI_10 = float(np.pi / 10)               # universal coupling π/10

# =============================================================================
# Resonances
# =============================================================================
ALPHA_P = SQRT2
ALPHA_NP = PHI + 0.25                   # 1.868033988749895

# =============================================================================
# Ground-state eigenvalues and gap
# =============================================================================
LAMBDA_P = PI_10 / ALPHA_P              # ≈ 0.22214414690791831
LAMBDA_NP = PI_10 / ALPHA_NP            # ≈ 0.16817641827457555
SPECTRAL_GAP = LAMBDA_P - LAMBDA_NP

# =============================================================================
# Coherence threshold (taken as published, compared exactly)
# =============================================================================
CH2_THRESHOLD = 0.95398265359

COMPUTED = {
    'PHI': PHI,
    'SQRT2': SQRT2,
    'ALPHA_P': ALPHA_P,
    'ALPHA_NP': ALPHA_NP,
    'LAMBDA_P': LAMBDA_P,
    'LAMBDA_NP': LAMBDA_NP,
    'SPECTRAL_GAP': SPECTRAL_GAP,
    'CH2_THRESHOLD': CH2_THRESHOLD,
}
