"""
Recognized options and published defaults for the codec, the spectral
verifier and the constant validation gates.
"""

# ---------------------------------------------------------------------------
# Configuration codec
# ---------------------------------------------------------------------------

# None: symbols are only checked for non-negativity
DEFAULT_ALPHABET_SIZE = None

# None: every prime from 5 upward is available to the tape
DEFAULT_MAX_TAPE_LENGTH = None

# Primes 2 and 3 carry state and head; tape cell j uses prime index j + 2
STATE_PRIME_INDEX = 0
HEAD_PRIME_INDEX = 1
TAPE_PRIME_OFFSET = 2

# ---------------------------------------------------------------------------
# Spectral verifier (published bound)
# ---------------------------------------------------------------------------

DEFAULT_REFERENCE_GAP = 0.0539677287
DEFAULT_TOLERANCE = 1e-8

# ---------------------------------------------------------------------------
# Certified reference bounds: name -> (reference, tolerance)
# A tolerance of 0 demands exact equality.
# ---------------------------------------------------------------------------

REFERENCE_BOUNDS = {
    'PHI': (1.6180339887, 1e-10),
    'SQRT2': (1.4142135624, 1e-10),
    'ALPHA_P': (1.4142135624, 1e-10),
    'ALPHA_NP': (1.8680339887, 1e-10),
    'LAMBDA_P': (0.2221441469, 1e-10),
    'LAMBDA_NP': (0.1681764183, 1e-10),
    'SPECTRAL_GAP': (DEFAULT_REFERENCE_GAP, DEFAULT_TOLERANCE),
    'CH2_THRESHOLD': (0.95398265359, 0.0),
}

# ---------------------------------------------------------------------------
# Simulator
# ---------------------------------------------------------------------------

DEFAULT_MAX_STEPS = 10000
DIGIT_SUM_BASE = 3
