from legendre_jax.util.sympy import (
    phi,
    normalization_factor_sympy,
    legendre_sympy,
    dlegendre_sympy,
)

__all__ = [
    "phi",
    "normalization_factor_sympy",
    "legendre_sympy",
    "dlegendre_sympy",
]
