r"""First-order derivative of the unnormalized associated Legendre functions.

The derivative is computed with

.. math::

    \frac{\partial P_{n,m}}{\partial \phi} = \frac{1}{2} \left( (n+m)(n-m+1) P_{n,m-1} - P_{n,m+1} \right)
"""
from typing import Tuple

import numpy as np

from legendre_jax._src.config import config
from legendre_jax._src.dimensions import degree_and_order_pair
from legendre_jax._src.legendre.unnormalized import unnormalized_legendre

from .sign import derivative_sign


def fill_unnormalized_dlegendre(
    dP: np.ndarray,
    phi: float,
    P: np.ndarray,
    n_max: int = -1,
    m_max: int = -1,
    phase_term: bool = False,
) -> None:
    r"""Compute the derivative of the unnormalized associated Legendre functions in place.

    Args:
        dP (`numpy.ndarray`): output table of shape ``(rows, cols)``
        phi (float): angle in radians
        P (`numpy.ndarray`): unnormalized associated Legendre functions evaluated at ``phi``
        n_max (int): maximum degree, inferred from the tables if negative
        m_max (int): maximum order, inferred from the tables if negative
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`
    """
    n_max, m_max = degree_and_order_pair(dP, P, n_max, m_max)

    # dP[n, m] needs P[n, m + 1] for every m < n
    if m_max < n_max:
        m_max = min(m_max, P.shape[1] - 2)

    if m_max < 0:
        return

    fact = derivative_sign(phi, phase_term)

    dP[0, 0] = 0

    for n in range(1, n_max + 1):
        for m in range(n + 1):
            if m == 0:
                dP_nm = -P[n, 1]
            elif m != n:
                dP_nm = ((n + m) * (n - m + 1) * P[n, m - 1] - P[n, m + 1]) / 2
            else:
                dP_nm = (n + m) * (n - m + 1) * P[n, m - 1] / 2

            dP[n, m] = fact * dP_nm

            if m >= m_max:
                break


def unnormalized_dlegendre(
    phi: float, n_max: int, m_max: int = -1, phase_term: bool = False
) -> Tuple[np.ndarray, np.ndarray]:
    r"""Derivative of the unnormalized associated Legendre functions w.r.t. ``phi``.

    Returns:
        (`numpy.ndarray`, `numpy.ndarray`): ``dP`` of shape ``(n_max + 1, m_max + 1)``
        and the table ``P`` used to compute it, with one more column if ``m_max < n_max``
    """
    if n_max < 0:
        raise ValueError(f"n_max must be non-negative, got {n_max}")

    if m_max < 0 or m_max > n_max:
        m_max = n_max

    # dP[n, m] needs P[n, m + 1]
    P = unnormalized_legendre(
        phi, n_max, m_max if m_max == n_max else m_max + 1, phase_term
    )

    dP = np.zeros((n_max + 1, m_max + 1), dtype=config("dtype"))
    fill_unnormalized_dlegendre(dP, phi, P, phase_term=phase_term)
    return dP, P
