__version__ = "0.1.0"

from legendre_jax._src.config import config
from legendre_jax._src.normalization import Normalization, normalization_factor
from legendre_jax._src.dimensions import degree_and_order, degree_and_order_pair
from legendre_jax._src.legendre import (
    fill_legendre,
    legendre,
    fill_unnormalized_legendre,
    unnormalized_legendre,
    fill_schmidt_legendre,
    schmidt_legendre,
    fill_full_legendre,
    full_legendre,
)
from legendre_jax._src.dlegendre import (
    fill_dlegendre,
    dlegendre,
    fill_unnormalized_dlegendre,
    unnormalized_dlegendre,
    fill_schmidt_dlegendre,
    schmidt_dlegendre,
    fill_full_dlegendre,
    full_dlegendre,
)
from legendre_jax._src.vectorized import legendre_jax, dlegendre_jax
from legendre_jax._src.workspace import LegendreWorkspace

from legendre_jax import util

__all__ = [
    "config",  # not in docs
    "Normalization",
    "normalization_factor",
    "degree_and_order",
    "degree_and_order_pair",
    "fill_legendre",
    "legendre",
    "fill_unnormalized_legendre",
    "unnormalized_legendre",
    "fill_schmidt_legendre",
    "schmidt_legendre",
    "fill_full_legendre",
    "full_legendre",
    "fill_dlegendre",
    "dlegendre",
    "fill_unnormalized_dlegendre",
    "unnormalized_dlegendre",
    "fill_schmidt_dlegendre",
    "schmidt_dlegendre",
    "fill_full_dlegendre",
    "full_dlegendre",
    "legendre_jax",
    "dlegendre_jax",
    "LegendreWorkspace",
    "util",
]
