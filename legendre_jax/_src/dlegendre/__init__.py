from typing import Tuple

import numpy as np

from legendre_jax._src.normalization import IntoNormalization, Normalization, as_normalization

from .full import fill_full_dlegendre, full_dlegendre
from .schmidt import fill_schmidt_dlegendre, schmidt_dlegendre
from .unnormalized import fill_unnormalized_dlegendre, unnormalized_dlegendre

_FILL = {
    Normalization.UNNORMALIZED: fill_unnormalized_dlegendre,
    Normalization.SCHMIDT: fill_schmidt_dlegendre,
    Normalization.FULL: fill_full_dlegendre,
}

_ALLOCATE = {
    Normalization.UNNORMALIZED: unnormalized_dlegendre,
    Normalization.SCHMIDT: schmidt_dlegendre,
    Normalization.FULL: full_dlegendre,
}


def fill_dlegendre(
    normalization: IntoNormalization,
    dP: np.ndarray,
    phi: float,
    P: np.ndarray,
    n_max: int = -1,
    m_max: int = -1,
    phase_term: bool = False,
) -> None:
    r"""Compute the first-order derivative of the associated Legendre functions w.r.t. ``phi`` into ``dP``.

    ``P`` must contain the associated Legendre functions evaluated at ``phi`` with the
    same ``normalization`` and ``phase_term``. A mismatch is not detected and gives
    wrong values. Since :math:`\partial_\phi P_{n,m}` depends on :math:`P_{n,m+1}`,
    ``P`` must hold one more order than requested unless ``m_max == n_max``.

    Negative ``n_max`` and ``m_max`` are inferred from the smallest of the two tables.

    .. warning::

        The sign of the derivative for :math:`\phi \bmod 2\pi > \pi` relies on an
        empirical correction. Set ``legendre_jax.config("derivative_angle_check", "warn")``
        to be warned when this region is hit.

    Args:
        normalization (`Normalization` or str): ``"unnormalized"``, ``"schmidt"`` or ``"full"``
        dP (`numpy.ndarray`): output table
        phi (float): angle in radians
        P (`numpy.ndarray`): associated Legendre functions evaluated at ``phi``
        n_max (int): maximum degree
        m_max (int): maximum order
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`
    """
    _FILL[as_normalization(normalization)](dP, phi, P, n_max, m_max, phase_term)


def dlegendre(
    normalization: IntoNormalization,
    phi: float,
    n_max: int,
    m_max: int = -1,
    phase_term: bool = False,
) -> Tuple[np.ndarray, np.ndarray]:
    r"""First-order derivative of the associated Legendre functions w.r.t. ``phi``.

    Args:
        normalization (`Normalization` or str): ``"unnormalized"``, ``"schmidt"`` or ``"full"``
        phi (float): angle in radians
        n_max (int): maximum degree, must be non-negative
        m_max (int): maximum order, set to ``n_max`` if negative or larger than ``n_max``
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`

    Returns:
        (`numpy.ndarray`, `numpy.ndarray`): the derivative ``dP`` of shape ``(n_max + 1, m_max + 1)``
        and the functions ``P`` it was computed from, with one more column if ``m_max < n_max``

    Examples:
        >>> dP, P = dlegendre("full", 0.3, 2, 0)
        >>> dP.shape, P.shape
        ((3, 1), (3, 2))
    """
    return _ALLOCATE[as_normalization(normalization)](phi, n_max, m_max, phase_term)


__all__ = [
    "fill_dlegendre",
    "dlegendre",
    "fill_unnormalized_dlegendre",
    "unnormalized_dlegendre",
    "fill_schmidt_dlegendre",
    "schmidt_dlegendre",
    "fill_full_dlegendre",
    "full_dlegendre",
]
