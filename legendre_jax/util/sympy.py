from functools import lru_cache

import sympy

from legendre_jax._src.normalization import IntoNormalization, Normalization, as_normalization

phi = sympy.Symbol("phi", real=True)


def normalization_factor_sympy(normalization: IntoNormalization, n: int, m: int) -> sympy.Expr:
    r"""Exact conversion factor :math:`K_{n,m}` from the unnormalized functions to ``normalization``."""
    normalization = as_normalization(normalization)
    if not 0 <= m <= n:
        raise ValueError(f"Expected 0 <= m <= n, got n={n} and m={m}")

    if normalization == Normalization.UNNORMALIZED:
        return sympy.Integer(1)

    k = 1 if m == 0 else 2
    ratio = sympy.factorial(n - m) / sympy.factorial(n + m)

    if normalization == Normalization.SCHMIDT:
        return sympy.sqrt(k * ratio)
    return sympy.sqrt(k * (2 * n + 1) * ratio)


@lru_cache(maxsize=None)
def legendre_sympy(
    normalization: IntoNormalization, n: int, m: int, phase_term: bool = False
) -> sympy.Expr:
    r"""Associated Legendre function :math:`P_{n,m}(\cos\phi)` as a sympy expression of :data:`phi`.

    The expression is built from the Rodrigues formula, with :math:`\sin^m\phi` in place of
    :math:`(1 - \cos^2\phi)^{m/2}`, hence it is valid for :math:`0 \leq \phi \leq \pi`.

    Examples:
        >>> legendre_sympy("unnormalized", 2, 1)
        3*sin(phi)*cos(phi)
        >>> legendre_sympy("full", 1, 1, phase_term=True)
        -sqrt(3)*sin(phi)
    """
    x = sympy.Symbol("x")
    q = sympy.diff(sympy.legendre(n, x), x, m).subs(x, sympy.cos(phi))

    expr = normalization_factor_sympy(normalization, n, m) * sympy.sin(phi) ** m * q
    if phase_term:
        expr = (-1) ** m * expr
    return expr


def dlegendre_sympy(
    normalization: IntoNormalization, n: int, m: int, phase_term: bool = False
) -> sympy.Expr:
    r"""Exact derivative of :func:`legendre_sympy` w.r.t. :data:`phi`."""
    return sympy.diff(legendre_sympy(normalization, n, m, phase_term), phi)
