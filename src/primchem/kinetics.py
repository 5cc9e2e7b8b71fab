"""Rate coefficients for primordial H/H+/H-/H2/e- chemistry.

The fits are taken from:

    GP98:  Galli & Palla (1998), A&A, 335, 403
    Glo10: Glover et al. (2010), MNRAS, 404, 2
    For13: Forrey (2013), ApJL, 773, L25
    Glo15: Glover (2015), MNRAS, 451, 2082
    Sm17:  Smith et al. (2017), MNRAS, 466, 2217

Every function accepts a scalar temperature or an array of temperatures (K).
The first axis of the returned array indexes the reaction, in the order of
``TWO_BODY_REACTIONS`` / ``THREE_BODY_REACTIONS``.
"""

from __future__ import annotations

import logging
from typing import Dict

import numpy as np
from numpy.typing import ArrayLike

from primchem.constants import K_PER_EV, T4_SCALE
from primchem.models import THREE_BODY_REACTIONS, TWO_BODY_REACTIONS

logger = logging.getLogger(__name__)

# H0 + H- -> H2 fit coefficients c1..c12 (Kre10, Sm17).
_K3_COEFFICIENTS = (
    1.35e-9, 9.8493e-2, 3.2852e-1, 5.5610e-1, 2.7710e-7, 2.1826,
    6.1910e-3, 1.0461, 8.9712e-11, 3.0424, 3.2576e-14, 3.7741,
)

# ln(k5) as a polynomial in y, constant term first (Glo10).
_K5_COEFFICIENTS = (
    -1.801849334e1,
    2.36085220e0,
    -2.82744300e-1,
    1.62331664e-2,
    -3.36501203e-2,
    1.17832978e-2,
    -1.65619470e-3,
    1.06827520e-4,
    -2.63128581e-6,
)

# Smallest normal double; below it T / TeV is no longer finite.
_T_MIN = np.finfo(float).tiny


class DomainError(ValueError):
    """Raised when a temperature lies outside the fits' domain (finite, > 0)."""


def _as_temperature(temperature: ArrayLike) -> np.ndarray:
    try:
        values = np.asarray(temperature, dtype=float)
    except (TypeError, ValueError, OverflowError) as exc:
        raise DomainError(f"Temperature must be numeric, got {temperature!r}") from exc

    # Subnormal T makes T / TeV divide by zero.
    if not np.all(np.isfinite(values)) or np.any(values < _T_MIN):
        logger.debug("Rejecting temperature outside [%g, inf): %r", _T_MIN, temperature)
        raise DomainError(
            f"Temperature must be finite and strictly positive (K), got {temperature!r}"
        )
    return values


def _k3_parts(T: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Numerator and denominator of the H0 + H- fit, both divided by max(1, T)**c12.

    No term exceeds 1 and the denominator stays >= min(1, c11), so neither
    part overflows for any finite T.
    """
    c = _K3_COEFFICIENTS
    log_t = np.log(T)
    shift = c[11] * np.maximum(log_t, 0.0)

    def term(coefficient, power):
        return coefficient * np.exp(power * log_t - shift)

    numerator = term(1.0, c[1]) + term(c[2], c[3]) + term(c[4], c[5])
    denominator = np.exp(-shift) + term(c[6], c[7]) + term(c[8], c[9]) + term(c[10], c[11])
    return numerator, denominator


def two_body_rates(temperature: ArrayLike) -> np.ndarray:
    """2-body rates ``[k1, k2, k3, k4, k5]`` in cm^3 s^-1.

    Args:
        temperature: Gas temperature (K), scalar or array.

    Returns:
        Array of shape ``(5,) + np.shape(temperature)``.

    Raises:
        DomainError: If any temperature is non-positive or non-finite.
    """
    T = _as_temperature(temperature)
    T4 = T / T4_SCALE
    TeV = T / K_PER_EV

    # H+ + e- -> H + hv (case B, Draine 2011, p. 138)
    k1 = 2.59e-13 * T4 ** (-0.833 - 0.034 * np.log(T4))

    # H0 + e- -> H- + hv (GP98, Glo15)
    k2 = 1.4e-18 * T ** 0.928 * np.exp(-T / 16200.0)

    # H0 + H- -> H2 + e- (Kre10, Sm17)
    c = _K3_COEFFICIENTS
    numerator, denominator = _k3_parts(T)
    k3 = c[0] * numerator / denominator

    # H- + H+ -> H0 + H0 (Glo10, Glo15)
    k4 = 2.4e-6 * T ** (-0.5) * (1.0 + T / 2e4)

    # H- + e- -> H0 + 2e- (Glo10)
    y = np.log(T / TeV)
    exponent = _K5_COEFFICIENTS[0]
    for power, coefficient in enumerate(_K5_COEFFICIENTS[1:], start=1):
        exponent = exponent + coefficient * y ** power
    k5 = np.exp(exponent)

    return np.array([k1, k2, k3, k4, k5])


def three_body_rates(temperature: ArrayLike) -> np.ndarray:
    """3-body rates ``[k31, k32]`` in cm^6 s^-1.

    k31 carries a large literature uncertainty (see Sm17); the quantum
    mechanical result of For13 is used. k32 is the Cohen & Westberg (1983)
    rate adopted by most sources.
    """
    T = _as_temperature(temperature)

    # H0 + H0 + H0 -> H2 + H0 (For13, Sm17)
    k31 = 6e-32 * T ** (-0.25) + 2e-31 * T ** (-0.5)

    # H0 + H0 + H2 -> H2 + H2 (Glo10, Sm17)
    k32 = 2.8e-31 * T ** (-0.6)

    return np.array([k31, k32])


def rates_by_name(temperature: ArrayLike) -> Dict[str, np.ndarray]:
    """Map every reaction name (``"k1"`` ... ``"k32"``) to its rate."""
    two_body = two_body_rates(temperature)
    three_body = three_body_rates(temperature)

    rates = {reaction.name: rate for reaction, rate in zip(TWO_BODY_REACTIONS, two_body)}
    rates.update(
        (reaction.name, rate) for reaction, rate in zip(THREE_BODY_REACTIONS, three_body)
    )
    return rates
