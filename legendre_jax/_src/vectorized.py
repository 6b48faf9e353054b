r"""Vectorized evaluation of the associated Legendre functions with jax.

Same recurrences as the in-place numpy routines, applied to a whole row of orders at once
and to an arbitrary batch of angles. The degree loop runs in :func:`jax.lax.fori_loop`.
"""
from functools import lru_cache, partial
import math
from typing import Tuple

import jax
import jax.numpy as jnp
import numpy as np

from legendre_jax._src.normalization import IntoNormalization, Normalization, as_normalization


@lru_cache(maxsize=None)
def _value_coefficients(
    normalization: Normalization, n_max: int, m_max: int
) -> Tuple[float, np.ndarray, np.ndarray, np.ndarray]:
    """Coefficients ``k, a, b, d`` of the recurrence

    P[1, 0] = k cos, P[1, 1] = k sin
    P[n, m] = a[n, m] cos P[n - 1, m] - b[n, m] P[n - 2, m] + d[n, m] sin P[n - 1, m - 1]
    """
    a = np.zeros((n_max + 1, m_max + 1))
    b = np.zeros((n_max + 1, m_max + 1))
    d = np.zeros((n_max + 1, m_max + 1))

    for n in range(2, n_max + 1):
        for m in range(min(n, m_max + 1)):
            if normalization == Normalization.UNNORMALIZED:
                a[n, m] = (2 * n - 1) / (n - m)
                # P[n - 2, n - 1] lies in the upper triangle
                if m != n - 1:
                    b[n, m] = (n + m - 1) / (n - m)
            elif normalization == Normalization.SCHMIDT:
                aux_nm = math.sqrt((n - m) * (n + m))
                a[n, m] = (2 * n - 1) / aux_nm
                b[n, m] = math.sqrt((n + m - 1) * (n - m - 1)) / aux_nm
            else:
                aux_nm = (n - m) * (n + m)
                a[n, m] = math.sqrt((2 * n - 1) * (2 * n + 1) / aux_nm)
                b[n, m] = math.sqrt(
                    (n + m - 1) * (n - m - 1) * (2 * n + 1) / ((2 * n - 3) * aux_nm)
                )

        if n <= m_max:
            if normalization == Normalization.UNNORMALIZED:
                d[n, n] = 2 * n - 1
            elif normalization == Normalization.SCHMIDT:
                d[n, n] = math.sqrt((2 * n - 1) / (2 * n))
            else:
                d[n, n] = math.sqrt((2 * n + 1) / (2 * n))

    k = math.sqrt(3) if normalization == Normalization.FULL else 1.0
    return k, a, b, d


@lru_cache(maxsize=None)
def _derivative_coefficients(
    normalization: Normalization, n_max: int, m_max: int
) -> Tuple[np.ndarray, np.ndarray]:
    """Coefficients of ``dP[n, m] = alpha[n, m] P[n, m - 1] + beta[n, m] P[n, m + 1]``."""
    alpha = np.zeros((n_max + 1, m_max + 1))
    beta = np.zeros((n_max + 1, m_max + 1))

    for n in range(1, n_max + 1):
        for m in range(min(n, m_max) + 1):
            if normalization == Normalization.UNNORMALIZED:
                if m == 0:
                    beta[n, m] = -1.0
                else:
                    alpha[n, m] = (n + m) * (n - m + 1) / 2
                    beta[n, m] = -0.5 if m != n else 0.0
            else:
                # P[n, -1] = -P[n, 1]
                if m == 0:
                    beta[n, m] = -math.sqrt(n * (n + 1) / 2)
                elif m == 1:
                    alpha[n, m] = math.sqrt(2 * n * (n + 1)) / 2
                    beta[n, m] = -math.sqrt((n + 2) * (n - 1)) / 2
                else:
                    alpha[n, m] = math.sqrt((n + m) * (n - m + 1)) / 2
                    beta[n, m] = -math.sqrt((n + m + 1) * (n - m)) / 2

    return alpha, beta


def _check_degree_and_order(n_max: int, m_max: int) -> Tuple[int, int]:
    if n_max < 0:
        raise ValueError(f"n_max must be non-negative, got {n_max}")

    if m_max < 0 or m_max > n_max:
        m_max = n_max

    return n_max, m_max


def _as_float_array(phi) -> jax.Array:
    phi = jnp.asarray(phi)
    if not jnp.issubdtype(phi.dtype, jnp.floating):
        phi = phi.astype(jnp.result_type(float))
    return phi


def legendre_jax(
    normalization: IntoNormalization,
    phi: jax.Array,
    n_max: int,
    m_max: int = -1,
    phase_term: bool = False,
) -> jax.Array:
    r"""Associated Legendre functions :math:`P_{n,m}(\cos\phi)` for a batch of angles.

    Args:
        normalization (`Normalization` or str): ``"unnormalized"``, ``"schmidt"`` or ``"full"``
        phi (`jax.Array`): angles in radians, array of shape ``(...)``
        n_max (int): maximum degree, must be non-negative
        m_max (int): maximum order, set to ``n_max`` if negative or larger than ``n_max``
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`

    Returns:
        `jax.Array`: array of shape ``(n_max + 1, m_max + 1, ...)``, zero above the diagonal

    Examples:
        >>> P = legendre_jax("unnormalized", jnp.array([0.0, 0.45]), 2)
        >>> P.shape
        (3, 3, 2)
    """
    normalization = as_normalization(normalization)
    n_max, m_max = _check_degree_and_order(n_max, m_max)
    return _legendre_jax(normalization, n_max, m_max, _as_float_array(phi), phase_term)


@partial(jax.jit, static_argnums=(0, 1, 2, 4))
def _legendre_jax(
    normalization: Normalization,
    n_max: int,
    m_max: int,
    phi: jax.Array,
    phase_term: bool,
) -> jax.Array:
    k, a, b, d = _value_coefficients(normalization, n_max, m_max)

    def coefficients(x):
        x = jnp.asarray(x, dtype=phi.dtype)
        return jnp.reshape(x, x.shape + (1,) * phi.ndim)  # [n, m, 1, ...]

    a, b, d = coefficients(a), coefficients(b), coefficients(d)

    # sin is taken directly from phi: sqrt(1 - cos^2) is inaccurate when cos(phi) -> 1
    s = jnp.abs(jnp.sin(phi))
    c = jnp.cos(phi)
    s_fact = -s if phase_term else s

    P = jnp.zeros((n_max + 1, m_max + 1) + phi.shape, phi.dtype)
    P = P.at[0, 0].set(1.0)
    if n_max > 0:
        P = P.at[1, 0].set(k * c)
        if m_max > 0:
            P = P.at[1, 1].set(k * s_fact)

    def body(n, P):
        p1 = P[n - 1]  # [m, ...]
        p2 = P[n - 2]  # [m, ...]
        p1_shifted = jnp.concatenate([jnp.zeros_like(p1[:1]), p1[:-1]], axis=0)
        row = a[n] * c * p1 - b[n] * p2 + d[n] * s_fact * p1_shifted
        return P.at[n].set(row)

    return jax.lax.fori_loop(2, n_max + 1, body, P)


def dlegendre_jax(
    normalization: IntoNormalization,
    phi: jax.Array,
    n_max: int,
    m_max: int = -1,
    phase_term: bool = False,
) -> Tuple[jax.Array, jax.Array]:
    r"""First-order derivative of the associated Legendre functions w.r.t. ``phi`` for a batch of angles.

    The sign correction for :math:`\phi \bmod 2\pi > \pi` is the same as in :func:`dlegendre`.

    Args:
        normalization (`Normalization` or str): ``"unnormalized"``, ``"schmidt"`` or ``"full"``
        phi (`jax.Array`): angles in radians, array of shape ``(...)``
        n_max (int): maximum degree, must be non-negative
        m_max (int): maximum order, set to ``n_max`` if negative or larger than ``n_max``
        phase_term (bool): if True, include the Condon-Shortley phase term :math:`(-1)^m`

    Returns:
        (`jax.Array`, `jax.Array`): ``dP`` of shape ``(n_max + 1, m_max + 1, ...)`` and the
        functions ``P`` it was computed from, with one more order if ``m_max < n_max``
    """
    normalization = as_normalization(normalization)
    n_max, m_max = _check_degree_and_order(n_max, m_max)
    return _dlegendre_jax(normalization, n_max, m_max, _as_float_array(phi), phase_term)


@partial(jax.jit, static_argnums=(0, 1, 2, 4))
def _dlegendre_jax(
    normalization: Normalization,
    n_max: int,
    m_max: int,
    phi: jax.Array,
    phase_term: bool,
) -> Tuple[jax.Array, jax.Array]:
    # dP[n, m] needs P[n, m + 1]
    m_max_P = m_max if m_max == n_max else m_max + 1
    P = _legendre_jax(normalization, n_max, m_max_P, phi, phase_term)

    alpha, beta = _derivative_coefficients(normalization, n_max, m_max)
    alpha = jnp.reshape(jnp.asarray(alpha, phi.dtype), alpha.shape + (1,) * phi.ndim)
    beta = jnp.reshape(jnp.asarray(beta, phi.dtype), beta.shape + (1,) * phi.ndim)

    zero = jnp.zeros_like(P[:, :1])
    P_left = jnp.concatenate([zero, P[:, :m_max]], axis=1)  # P[n, m - 1]
    P_right = jnp.concatenate([P, zero], axis=1)[:, 1 : m_max + 2]  # P[n, m + 1]

    fact = jnp.where(jnp.mod(phi, 2 * jnp.pi) > jnp.pi, -1.0, 1.0).astype(phi.dtype)
    if phase_term:
        fact = -fact

    dP = fact * (alpha * P_left + beta * P_right)
    return dP, P
