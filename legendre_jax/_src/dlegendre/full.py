r"""First-order derivative of the fully normalized associated Legendre functions.

The derivative is computed with

.. math::

    \frac{\partial \bar{P}_{n,m}}{\partial \phi} = a_{n,m} \bar{P}_{n,m-1} + b_{n,m} \bar{P}_{n,m+1}

    a_{n,m} = \frac{1}{2} \sqrt{(n+m)(n-m+1)} \sqrt{C_m / C_{m-1}}

    b_{n,m} = -\frac{1}{2} \sqrt{(n+m+1)(n-m)} \sqrt{C_m / C_{m+1}}

with :math:`C_0 = 1` and :math:`C_m = 2` otherwise.

References:
    Du, J., Chen, C., Lesur, V., and Wang, L (2015). Non-singular spherical harmonic
    expressions of geomagnetic vector and gradient tensor fields in the local
    north-oriented reference frame. Geoscientific Model Development, 8, pp. 1979-1990.

    Ilk, K. H (1983). Ein Beitrag zur Dynamik ausgedehnter Koerper-Gravitationswechselwirkung.
    Deutsche Geodaetische Kommission, Reihe C, Heft Nr. 288.
"""
import math
from typing import Tuple

import numpy as np

from legendre_jax._src.config import config
from legendre_jax._src.dimensions import degree_and_order_pair
from legendre_jax._src.legendre.full import full_legendre

from .sign import derivative_sign


def fill_full_dlegendre(
    dP: np.ndarray,
    phi: float,
    P: np.ndarray,
    n_max: int = -1,
    m_max: int = -1,
    phase_term: bool = False,
) -> None:
    r"""Compute the derivative of the fully normalized associated Legendre functions in place.

    ``P`` must hold the fully normalized functions evaluated at ``phi`` with the same
    ``phase_term``, up to the order ``m_max + 1`` when ``m_max < n_max``.
    The order is narrowed when ``P`` does not have that column.

    Args:
        dP (`numpy.ndarray`): output table of shape ``(rows, cols)``
        phi (float): angle in radians
        P (`numpy.ndarray`): fully normalized associated Legendre functions
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
                a_nm = math.sqrt(n * (n + 1) / 2) / 2
                b_nm = -a_nm

                # P[n, -1] = -P[n, 1]
                dP_nm = -a_nm * P[n, 1] + b_nm * P[n, 1]

            # C_{m-1} differs from C_m only for m = 1
            elif m == 1:
                a_nm = math.sqrt(2 * n * (n + 1)) / 2
                dP_nm = a_nm * P[n, 0]

                # P is allowed to be 2 x 2
                if n > 1:
                    b_nm = -math.sqrt((n + 2) * (n - 1)) / 2
                    dP_nm += b_nm * P[n, 2]

            else:
                a_nm = math.sqrt((n + m) * (n - m + 1)) / 2
                dP_nm = a_nm * P[n, m - 1]

                if n != m:
                    b_nm = -math.sqrt((n + m + 1) * (n - m)) / 2
                    dP_nm += b_nm * P[n, m + 1]

            dP[n, m] = fact * dP_nm

            if m >= m_max:
                break


def full_dlegendre(
    phi: float, n_max: int, m_max: int = -1, phase_term: bool = False
) -> Tuple[np.ndarray, np.ndarray]:
    r"""Derivative of the fully normalized associated Legendre functions w.r.t. ``phi``.

    Args:
        phi (float): angle in radians
        n_max (int): maximum degree
        m_max (int): maximum order, set to ``n_max`` if negative or larger than ``n_max``
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`

    Returns:
        (`numpy.ndarray`, `numpy.ndarray`): ``dP`` of shape ``(n_max + 1, m_max + 1)``
        and the table ``P`` used to compute it, with one more column if ``m_max < n_max``
    """
    if n_max < 0:
        raise ValueError(f"n_max must be non-negative, got {n_max}")

    if m_max < 0 or m_max > n_max:
        m_max = n_max

    # dP[n, m] needs P[n, m + 1]
    P = full_legendre(phi, n_max, m_max if m_max == n_max else m_max + 1, phase_term)

    dP = np.zeros((n_max + 1, m_max + 1), dtype=config("dtype"))
    fill_full_dlegendre(dP, phi, P, phase_term=phase_term)
    return dP, P
