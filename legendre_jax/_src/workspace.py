from typing import Tuple

import numpy as np
from attr import attrib, attrs

from legendre_jax._src.config import config
from legendre_jax._src.dlegendre import fill_dlegendre
from legendre_jax._src.legendre import fill_legendre
from legendre_jax._src.normalization import Normalization, as_normalization


@attrs(repr=False)
class LegendreWorkspace:
    r"""Preallocated tables to evaluate the associated Legendre functions at many angles.

    Each call to :meth:`values` or :meth:`derivatives` overwrites the same buffers,
    so the returned arrays are only valid until the next call. Use ``.copy()`` to keep them.

    Args:
        normalization (`Normalization` or str): ``"unnormalized"``, ``"schmidt"`` or ``"full"``
        n_max (int): maximum degree, must be non-negative
        m_max (int): maximum order, set to ``n_max`` if negative or larger than ``n_max``
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`

    Examples:
        >>> ws = LegendreWorkspace("schmidt", 4)
        >>> dP, P = ws.derivatives(0.45)
        >>> P.shape, dP.shape
        ((5, 5), (5, 5))
    """

    normalization: Normalization = attrib(converter=as_normalization)
    n_max: int = attrib()
    m_max: int = attrib(default=-1)
    phase_term: bool = attrib(default=False)
    P: np.ndarray = attrib(init=False)
    dP: np.ndarray = attrib(init=False)

    def __attrs_post_init__(self):
        if self.n_max < 0:
            raise ValueError(f"n_max must be non-negative, got {self.n_max}")

        if self.m_max < 0 or self.m_max > self.n_max:
            self.m_max = self.n_max

        # dP[n, m] needs P[n, m + 1]
        m_max_P = min(self.m_max + 1, self.n_max)

        dtype = config("dtype")
        self.P = np.zeros((self.n_max + 1, m_max_P + 1), dtype=dtype)
        self.dP = np.zeros((self.n_max + 1, self.m_max + 1), dtype=dtype)

    def __repr__(self) -> str:
        return (
            f"LegendreWorkspace({self.normalization.value}, n_max={self.n_max}, "
            f"m_max={self.m_max}, phase_term={self.phase_term})"
        )

    def values(self, phi: float) -> np.ndarray:
        r"""Associated Legendre functions at ``phi``, view of shape ``(n_max + 1, m_max + 1)``."""
        fill_legendre(
            self.normalization, self.P, phi, self.n_max, self.m_max, self.phase_term
        )
        return self.P[:, : self.m_max + 1]

    def derivatives(self, phi: float) -> Tuple[np.ndarray, np.ndarray]:
        r"""Derivative and values of the associated Legendre functions at ``phi``.

        Returns:
            (`numpy.ndarray`, `numpy.ndarray`): views ``dP`` and ``P``, both of shape ``(n_max + 1, m_max + 1)``
        """
        fill_legendre(self.normalization, self.P, phi, phase_term=self.phase_term)
        fill_dlegendre(
            self.normalization, self.dP, phi, self.P, phase_term=self.phase_term
        )
        return self.dP, self.P[:, : self.m_max + 1]
