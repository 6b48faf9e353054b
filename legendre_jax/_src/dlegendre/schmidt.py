from typing import Tuple

import numpy as np

from legendre_jax._src.config import config
from legendre_jax._src.legendre.schmidt import schmidt_legendre

from .full import fill_full_dlegendre


def fill_schmidt_dlegendre(
    dP: np.ndarray,
    phi: float,
    P: np.ndarray,
    n_max: int = -1,
    m_max: int = -1,
    phase_term: bool = False,
) -> None:
    r"""Compute the derivative of the Schmidt quasi-normalized associated Legendre functions in place.

    The Schmidt and the full normalizations differ by the factor :math:`\sqrt{2n+1}`,
    which only depends on the degree. The derivative relation only mixes orders,
    hence :func:`fill_full_dlegendre` applies as is provided that ``P`` holds the
    Schmidt quasi-normalized functions.
    """
    fill_full_dlegendre(dP, phi, P, n_max, m_max, phase_term)


def schmidt_dlegendre(
    phi: float, n_max: int, m_max: int = -1, phase_term: bool = False
) -> Tuple[np.ndarray, np.ndarray]:
    r"""Derivative of the Schmidt quasi-normalized associated Legendre functions w.r.t. ``phi``.

    Returns:
        (`numpy.ndarray`, `numpy.ndarray`): ``dP`` of shape ``(n_max + 1, m_max + 1)``
        and the table ``P`` used to compute it, with one more column if ``m_max < n_max``
    """
    if n_max < 0:
        raise ValueError(f"n_max must be non-negative, got {n_max}")

    if m_max < 0 or m_max > n_max:
        m_max = n_max

    # dP[n, m] needs P[n, m + 1]
    P = schmidt_legendre(phi, n_max, m_max if m_max == n_max else m_max + 1, phase_term)

    dP = np.zeros((n_max + 1, m_max + 1), dtype=config("dtype"))
    fill_schmidt_dlegendre(dP, phi, P, phase_term=phase_term)
    return dP, P
