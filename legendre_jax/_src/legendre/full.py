r"""Fully normalized associated Legendre functions.

The conversion from the unnormalized functions is

.. math::

    \bar{P}_{n,m} = \sqrt{k (2n+1) \frac{(n-m)!}{(n+m)!}} P_{n,m}, \quad k = 1 \text{ if } m = 0 \text{ else } 2

References:
    Holmes, S. A. and W. E. Featherstone, 2002. A unified approach to the Clenshaw
    summation and the recursive computation of very high degree and order normalised
    associated Legendre functions. Journal of Geodesy, 76(5), pp. 279-299.

    Vallado, D. A (2013). Fundamentals of Astrodynamics and Applications. Microcosm
    Press, Hawthorn, CA, USA.
"""
import math

import numpy as np

from legendre_jax._src.config import config
from legendre_jax._src.dimensions import degree_and_order

_SQRT3 = math.sqrt(3)


def fill_full_legendre(
    P: np.ndarray,
    phi: float,
    n_max: int = -1,
    m_max: int = -1,
    phase_term: bool = False,
) -> None:
    r"""Compute the fully normalized associated Legendre functions in place.

    Args:
        P (`numpy.ndarray`): output table of shape ``(rows, cols)``
        phi (float): angle in radians
        n_max (int): maximum degree, inferred from the number of rows if negative
        m_max (int): maximum order, inferred from the number of columns if negative
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`

    Examples:
        >>> P = np.zeros((3, 3))
        >>> fill_full_legendre(P, 0.0)
        >>> P[1]
        array([1.73205081, 0.        , 0.        ])
    """
    n_max, m_max = degree_and_order(P, n_max, m_max)
    if m_max < 0:
        return

    # sin is taken directly from phi: sqrt(1 - cos^2) is inaccurate when cos(phi) -> 1
    s, c = abs(math.sin(phi)), math.cos(phi)
    s_fact = -s if phase_term else s

    for n in range(n_max + 1):
        if n == 0:
            P[0, 0] = 1
            continue

        if n == 1:
            P[1, 0] = _SQRT3 * c
            if m_max > 0:
                P[1, 1] = _SQRT3 * s_fact
            continue

        aux_an = (2 * n - 1) * (2 * n + 1)
        aux_bn = (2 * n + 1) / (2 * n - 3)

        for m in range(n + 1):
            if m == n:
                P_nm = s_fact * math.sqrt((2 * n + 1) / (2 * n)) * P[n - 1, n - 1]
            else:
                aux_nm = (n - m) * (n + m)
                a_nm = math.sqrt(aux_an / aux_nm) * c
                b_nm = math.sqrt((n + m - 1) * (n - m - 1) * aux_bn / aux_nm)

                # P[n - 2, n - 1] lies in the upper triangle
                if m != n - 1:
                    P_nm = a_nm * P[n - 1, m] - b_nm * P[n - 2, m]
                else:
                    P_nm = a_nm * P[n - 1, m]

            P[n, m] = P_nm

            if m == m_max:
                break


def full_legendre(
    phi: float, n_max: int, m_max: int = -1, phase_term: bool = False
) -> np.ndarray:
    r"""Fully normalized associated Legendre functions :math:`\bar{P}_{n,m}(\cos\phi)`.

    Args:
        phi (float): angle in radians
        n_max (int): maximum degree
        m_max (int): maximum order, set to ``n_max`` if negative or larger than ``n_max``
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`

    Returns:
        `numpy.ndarray`: table of shape ``(n_max + 1, m_max + 1)``, zero above the diagonal
    """
    if n_max < 0:
        raise ValueError(f"n_max must be non-negative, got {n_max}")

    if m_max < 0 or m_max > n_max:
        m_max = n_max

    P = np.zeros((n_max + 1, m_max + 1), dtype=config("dtype"))
    fill_full_legendre(P, phi, phase_term=phase_term)
    return P
