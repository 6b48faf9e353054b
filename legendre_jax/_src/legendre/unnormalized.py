r"""Unnormalized (conventional) associated Legendre functions.

The functions are computed with the standard three-term recurrence over the degree,
seeded by :math:`P_{0,0} = 1`, :math:`P_{1,0} = \cos\phi` and :math:`P_{1,1} = \sin\phi`.
"""
import math

import numpy as np

from legendre_jax._src.config import config
from legendre_jax._src.dimensions import degree_and_order


def fill_unnormalized_legendre(
    P: np.ndarray,
    phi: float,
    n_max: int = -1,
    m_max: int = -1,
    phase_term: bool = False,
) -> None:
    r"""Compute the unnormalized associated Legendre functions :math:`P_{n,m}(\cos\phi)` in place.

    Only the lower triangle ``m <= n`` of ``P`` is written.
    Negative ``n_max`` and ``m_max`` are inferred from the shape of ``P``.

    Args:
        P (`numpy.ndarray`): output table of shape ``(rows, cols)``
        phi (float): angle in radians
        n_max (int): maximum degree
        m_max (int): maximum order
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

        aux_n = 2 * n - 1

        for m in range(n + 1):
            if m == n:
                P[n, n] = s_fact * aux_n * P[n - 1, n - 1]
            else:
                a_nm = aux_n / (n - m) * c
                b_nm = (n + m - 1) / (n - m)

                # P[n - 2, n - 1] lies in the upper triangle
                if m != n - 1:
                    P[n, m] = a_nm * P[n - 1, m] - b_nm * P[n - 2, m]
                else:
                    P[n, m] = a_nm * P[n - 1, m]

            if m == m_max:
                break


def unnormalized_legendre(
    phi: float, n_max: int, m_max: int = -1, phase_term: bool = False
) -> np.ndarray:
    r"""Unnormalized associated Legendre functions :math:`P_{n,m}(\cos\phi)`.

    Args:
        phi (float): angle in radians
        n_max (int): maximum degree
        m_max (int): maximum order, set to ``n_max`` if negative or larger than ``n_max``
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`

    Returns:
        `numpy.ndarray`: table of shape ``(n_max + 1, m_max + 1)``, zero above the diagonal

    Examples:
        >>> P = unnormalized_legendre(0.45, 4)
        >>> round(float(P[2, 1]), 5)
        1.17499
    """
    if n_max < 0:
        raise ValueError(f"n_max must be non-negative, got {n_max}")

    if m_max < 0 or m_max > n_max:
        m_max = n_max

    P = np.zeros((n_max + 1, m_max + 1), dtype=config("dtype"))
    fill_unnormalized_legendre(P, phi, phase_term=phase_term)
    return P
