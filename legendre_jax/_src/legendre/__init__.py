import numpy as np

from legendre_jax._src.normalization import IntoNormalization, Normalization, as_normalization

from .full import fill_full_legendre, full_legendre
from .schmidt import fill_schmidt_legendre, schmidt_legendre
from .unnormalized import fill_unnormalized_legendre, unnormalized_legendre

_FILL = {
    Normalization.UNNORMALIZED: fill_unnormalized_legendre,
    Normalization.SCHMIDT: fill_schmidt_legendre,
    Normalization.FULL: fill_full_legendre,
}

_ALLOCATE = {
    Normalization.UNNORMALIZED: unnormalized_legendre,
    Normalization.SCHMIDT: schmidt_legendre,
    Normalization.FULL: full_legendre,
}


def fill_legendre(
    normalization: IntoNormalization,
    P: np.ndarray,
    phi: float,
    n_max: int = -1,
    m_max: int = -1,
    phase_term: bool = False,
) -> None:
    r"""Compute the associated Legendre functions :math:`P_{n,m}(\cos\phi)` into ``P``.

    The maximum degree and order are given by ``n_max`` and ``m_max``.
    If they are negative (default), the shape of ``P`` is used:
    the maximum degree is the number of rows minus one and
    the maximum order is the number of columns minus one.
    Bounds that do not fit in ``P`` are silently narrowed.

    Only the lower triangle ``m <= n`` is written, the rest of ``P`` is left untouched.

    Args:
        normalization (`Normalization` or str): ``"unnormalized"``, ``"schmidt"`` or ``"full"``
        P (`numpy.ndarray`): output table, rows index the degree and columns the order
        phi (float): angle in radians
        n_max (int): maximum degree
        m_max (int): maximum order
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`

    Examples:
        >>> P = np.zeros((3, 3))
        >>> fill_legendre("unnormalized", P, 0.0)
        >>> P
        array([[1., 0., 0.],
               [1., 0., 0.],
               [1., 0., 0.]])
    """
    _FILL[as_normalization(normalization)](P, phi, n_max, m_max, phase_term)


def legendre(
    normalization: IntoNormalization,
    phi: float,
    n_max: int,
    m_max: int = -1,
    phase_term: bool = False,
) -> np.ndarray:
    r"""Associated Legendre functions :math:`P_{n,m}(\cos\phi)`.

    Args:
        normalization (`Normalization` or str): ``"unnormalized"``, ``"schmidt"`` or ``"full"``
        phi (float): angle in radians
        n_max (int): maximum degree, must be non-negative
        m_max (int): maximum order, set to ``n_max`` if negative or larger than ``n_max``
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`

    Returns:
        `numpy.ndarray`: table of shape ``(n_max + 1, m_max + 1)``, zero above the diagonal
    """
    return _ALLOCATE[as_normalization(normalization)](phi, n_max, m_max, phase_term)


__all__ = [
    "fill_legendre",
    "legendre",
    "fill_unnormalized_legendre",
    "unnormalized_legendre",
    "fill_schmidt_legendre",
    "schmidt_legendre",
    "fill_full_legendre",
    "full_legendre",
]
