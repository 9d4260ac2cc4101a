"""
Spectral-gap verifier.

Holds the two ground-state eigenvalues λ₀(H_P), λ₀(H_NP) and checks that

    Δ = λ₀(H_P) - λ₀(H_NP) > 0
    |Δ - Δ_ref| < tol

with Δ_ref = 0.0539677287 and tol = 1e-8 as published. The inequality is
strict, matching the strict bound it reproduces.
"""
import math
from dataclasses import dataclass

import numpy as np

from . import constants as c
from .config import DEFAULT_REFERENCE_GAP, DEFAULT_TOLERANCE
from .errors import DomainError


@dataclass(frozen=True)
class SpectralConstants:
    """Read-only record of the verifier's inputs and derived gap."""

    lambda0_p: float
    lambda0_np: float
    gap: float
    tolerance: float


def ground_state(alpha):
    """λ₀ = π / (10 α) for resonance α > 0."""
    if not alpha > 0:
        raise DomainError(f"alpha must be > 0, got {alpha}")
    return c.PI_10 / alpha


def eigenvalue_ladder(alpha, n_levels):
    """
    Harmonic ladder λ_n = (2n + 1) π / (10 α), n = 0 .. n_levels-1.

    Parameters
    ----------
    alpha : float
        Resonance parameter, > 0.
    n_levels : int
        Number of levels, >= 1.

    Returns
    -------
    np.ndarray
    """
    if n_levels < 1:
        raise DomainError(f"n_levels must be >= 1, got {n_levels}")
    lam0 = ground_state(alpha)
    return (2 * np.arange(n_levels) + 1) * lam0


class SpectralVerifier:
    """
    Gap consistency checks over constructor-supplied eigenvalues.

    Parameters
    ----------
    lambda0_p, lambda0_np : float
        Ground-state eigenvalues of H_P and H_NP.
    reference_gap : float
        Published gap the computed one is compared against.
    tolerance : float
        Strictly positive, finite.
    """

    def __init__(self, lambda0_p, lambda0_np,
                 reference_gap=DEFAULT_REFERENCE_GAP, tolerance=DEFAULT_TOLERANCE):
        try:
            tolerance = float(tolerance)
        except (TypeError, ValueError):
            raise DomainError(f"tolerance must be a positive real, got {tolerance!r}") from None
        if not (math.isfinite(tolerance) and tolerance > 0):
            raise DomainError(f"tolerance must be a positive real, got {tolerance}")
        self.lambda0_p = float(lambda0_p)
        self.lambda0_np = float(lambda0_np)
        self.reference_gap = float(reference_gap)
        self.tolerance = tolerance

    @classmethod
    def from_resonances(cls, alpha_p, alpha_np, **kwargs):
        """Build from resonance parameters via λ₀ = π/(10α)."""
        return cls(ground_state(alpha_p), ground_state(alpha_np), **kwargs)

    def __repr__(self):
        return (f"SpectralVerifier(lambda0_p={self.lambda0_p!r}, "
                f"lambda0_np={self.lambda0_np!r}, reference_gap={self.reference_gap!r}, "
                f"tolerance={self.tolerance!r})")

    @property
    def constants(self):
        return SpectralConstants(self.lambda0_p, self.lambda0_np,
                                 self.compute_gap(), self.tolerance)

    def compute_gap(self):
        return self.lambda0_p - self.lambda0_np

    def verify_positive(self):
        return self.compute_gap() > 0

    def verify_within_tolerance(self, reference_gap=None, tolerance=None):
        """|Δ - reference_gap| < tolerance; arguments default to the configured ones."""
        if reference_gap is None:
            reference_gap = self.reference_gap
        if tolerance is None:
            tolerance = self.tolerance
        return bool(abs(self.compute_gap() - reference_gap) < tolerance)

    def describe(self):
        """Summary dict for display: gap, within_tolerance, positive."""
        return {
            'gap': self.compute_gap(),
            'within_tolerance': self.verify_within_tolerance(),
            'positive': self.verify_positive(),
        }


def published_verifier():
    """Verifier over the published resonances α_P = √2, α_NP = φ + 1/4."""
    return SpectralVerifier.from_resonances(c.ALPHA_P, c.ALPHA_NP)
