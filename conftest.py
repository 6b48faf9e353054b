import jax
import pytest

import legendre_jax as lj


@pytest.fixture(autouse=True)
def legendre_jax_config():
    from legendre_jax._src.config import __default_conf

    for key, value in __default_conf.items():
        lj.config(key, value)

    jax.config.update("jax_enable_x64", False)
