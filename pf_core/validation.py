"""
Verification gates for the published constants.

One gate per entry of REFERENCE_BOUNDS; all must pass:
  PHI, SQRT2, ALPHA_P, ALPHA_NP     tol 1e-10
  LAMBDA_P, LAMBDA_NP               tol 1e-10
  SPECTRAL_GAP                      tol 1e-8
  CH2_THRESHOLD                     exact
"""

import logging
import math
from datetime import datetime, timezone

from . import constants as c
from .config import REFERENCE_BOUNDS

log = logging.getLogger(__name__)


def matching_precision(computed, reference):
    """Number of matching decimal places; inf when equal, 0 when the difference is not finite."""
    diff = abs(computed - reference)
    if diff == 0:
        return math.inf
    if not math.isfinite(diff):
        return 0
    return max(0, -math.floor(math.log10(diff)))


def validate_constant(name, computed=None, bounds=None):
    """
    Compare one computed constant with its certified reference.

    Parameters
    ----------
    name : str
        Key into the computed table and the reference bounds.
    computed : dict, optional
        name -> value; defaults to constants.COMPUTED.
    bounds : dict, optional
        name -> (reference, tolerance); defaults to REFERENCE_BOUNDS.

    Returns
    -------
    dict
        Gate result. Unknown names yield passed=False with None values.
    """
    computed = c.COMPUTED if computed is None else computed
    bounds = REFERENCE_BOUNDS if bounds is None else bounds

    if name not in computed or name not in bounds:
        return {
            'gate': name,
            'name': name,
            'passed': False,
            'computed': None,
            'reference': None,
            'difference': None,
            'tolerance': None,
            'precision': None,
            'detail': f'Unknown constant: {name}',
        }

    value = computed[name]
    reference, tol = bounds[name]
    difference = abs(value - reference)
    if tol == 0:
        passed = value == reference
        tol_str = 'exact'
    else:
        passed = difference < tol
        tol_str = f'{tol:.0e}'

    return {
        'gate': name,
        'name': name,
        'passed': bool(passed),
        'computed': value,
        'reference': reference,
        'difference': difference,
        'tolerance': tol,
        'precision': matching_precision(value, reference),
        'detail': f'{value!r} vs {reference!r}, |diff| = {difference:.2e} (tol {tol_str})',
    }


def run_all_validations(verbose=True, computed=None, bounds=None):
    """Run every reference gate. Returns (all_pass, results_list)."""
    bounds = REFERENCE_BOUNDS if bounds is None else bounds
    gates = [validate_constant(name, computed, bounds) for name in bounds]
    all_pass = all(g['passed'] for g in gates)

    if verbose:
        for g in gates:
            status = 'PASS' if g['passed'] else 'FAIL'
            log.info("  [%s] %s: %s", status, g['gate'], g['detail'])
        n_pass = sum(g['passed'] for g in gates)
        log.info("  %d/%d gates passed", n_pass, len(gates))

    return all_pass, gates


def verification_report(computed=None, bounds=None):
    """Full report: overall status, timestamp, summary counts and per-gate results."""
    computed = c.COMPUTED if computed is None else computed
    bounds = REFERENCE_BOUNDS if bounds is None else bounds
    all_pass, results = run_all_validations(verbose=False, computed=computed, bounds=bounds)
    n_pass = sum(r['passed'] for r in results)
    return {
        'passed': all_pass,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'summary': {
            'total': len(results),
            'passed': n_pass,
            'failed': len(results) - n_pass,
        },
        'results': results,
        'computed_values': dict(computed),
        'references': dict(bounds),
    }


def format_report(report=None):
    """Human-readable text rendering of verification_report()."""
    if report is None:
        report = verification_report()

    lines = []
    lines.append("=" * 70)
    lines.append("Spectral constants verification report")
    lines.append("=" * 70)
    lines.append(f"Timestamp: {report['timestamp']}")
    lines.append(f"Overall status: {'ALL PASSED' if report['passed'] else 'SOME FAILED'}")
    summ = report['summary']
    lines.append(f"Summary: {summ['passed']}/{summ['total']} constants verified")
    lines.append("-" * 70)

    for r in report['results']:
        status = 'PASS' if r['passed'] else 'FAIL'
        lines.append(f"\n[{status}] {r['name']}")
        if r['computed'] is None:
            lines.append(f"  {r['detail']}")
            continue
        tol = r['tolerance']
        prec = r['precision']
        lines.append(f"  Computed:   {r['computed']!r}")
        lines.append(f"  Reference:  {r['reference']!r}")
        lines.append(f"  Difference: {r['difference']:.4e}")
        lines.append(f"  Tolerance:  {'exact match required' if tol == 0 else f'{tol:.0e}'}")
        lines.append(f"  Precision:  {'exact' if prec == math.inf else f'{prec} decimal places'}")

    lines.append("\n" + "=" * 70)
    return "\n".join(lines)
