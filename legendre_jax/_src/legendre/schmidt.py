r"""Schmidt quasi-normalized associated Legendre functions.

The conversion from the unnormalized functions is

.. math::

    \hat{P}_{n,m} = \sqrt{k \frac{(n-m)!}{(n+m)!}} P_{n,m}, \quad k = 1 \text{ if } m = 0 \text{ else } 2

References:
    Schmidt, A (1917). Erdmagnetismus, Enzykl. Math. Wiss., 6, pp. 265-396.

    Winch, D. E., Ivers, D. J., Turner, J. P. R., Stening R. J (2005). Geomagnetism and
    Schmidt quasi-normalization. Geophysical Journal International, 160(2), pp. 487-504.
"""
import math

import numpy as np

from legendre_jax._src.config import config
from legendre_jax._src.dimensions import degree_and_order


def fill_schmidt_legendre(
    P: np.ndarray,
    phi: float,
    n_max: int = -1,
    m_max: int = -1,
    phase_term: bool = False,
) -> None:
    r"""Compute the Schmidt quasi-normalized associated Legendre functions in place.

    Args:
        P (`numpy.ndarray`): output table of shape ``(rows, cols)``
        phi (float): angle in radians
        n_max (int): maximum degree, inferred from the number of rows if negative
        m_max (int): maximum order, inferred from the number of columns if negative
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`
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
            P[1, 0] = c
            if m_max > 0:
                P[1, 1] = s_fact
            continue

        aux_n = 2 * n - 1  # sqrt((2n - 1) * (2n - 1))

        for m in range(n + 1):
            if m == n:
                P[n, n] = s_fact * math.sqrt(aux_n / (2 * n)) * P[n - 1, n - 1]
            else:
                aux_nm = math.sqrt((n - m) * (n + m))
                a_nm = aux_n / aux_nm * c
                b_nm = math.sqrt((n + m - 1) * (n - m - 1)) / aux_nm

                # P[n - 2, n - 1] lies in the upper triangle
                if m != n - 1:
                    P[n, m] = a_nm * P[n - 1, m] - b_nm * P[n - 2, m]
                else:
                    P[n, m] = a_nm * P[n - 1, m]

            if m == m_max:
                break


def schmidt_legendre(
    phi: float, n_max: int, m_max: int = -1, phase_term: bool = False
) -> np.ndarray:
    r"""Schmidt quasi-normalized associated Legendre functions :math:`\hat{P}_{n,m}(\cos\phi)`.

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
    fill_schmidt_legendre(P, phi, phase_term=phase_term)
    return P
