import jax
import jax.numpy as jnp
import numpy as np
import pytest

import legendre_jax as lj

normalizations = ["unnormalized", "schmidt", "full"]


@pytest.mark.parametrize("normalization", normalizations)
@pytest.mark.parametrize("phase_term", [False, True])
@pytest.mark.parametrize("n_max, m_max", [(0, -1), (1, -1), (1, 0), (6, -1), (6, 2), (7, 0)])
def test_match_numpy(normalization, phase_term, n_max, m_max):
    jax.config.update("jax_enable_x64", True)

    phi = np.array([0.0, 0.3, 1.2, 2.5, 3.8, -1.0])
    P = lj.legendre_jax(normalization, phi, n_max, m_max, phase_term)

    for i, x in enumerate(phi):
        P_ref = lj.legendre(normalization, x, n_max, m_max, phase_term)
        np.testing.assert_allclose(
            P[..., i], P_ref, rtol=1e-10, atol=1e-12 * np.abs(P_ref).max()
        )


@pytest.mark.parametrize("normalization", normalizations)
@pytest.mark.parametrize("phase_term", [False, True])
@pytest.mark.parametrize("n_max, m_max", [(1, -1), (6, -1), (6, 3), (5, 0)])
def test_derivative_match_numpy(normalization, phase_term, n_max, m_max):
    jax.config.update("jax_enable_x64", True)

    phi = np.array([0.3, 1.2, 2.5, 3.8, -1.0])
    dP, P = lj.dlegendre_jax(normalization, phi, n_max, m_max, phase_term)

    for i, x in enumerate(phi):
        dP_ref, P_ref = lj.dlegendre(normalization, x, n_max, m_max, phase_term)
        np.testing.assert_allclose(
            dP[..., i], dP_ref, rtol=1e-10, atol=1e-12 * np.abs(dP_ref).max()
        )
        np.testing.assert_allclose(
            P[..., i], P_ref, rtol=1e-10, atol=1e-12 * np.abs(P_ref).max()
        )


@pytest.mark.parametrize("normalization", normalizations)
@pytest.mark.parametrize("phase_term", [False, True])
def test_grad(normalization, phase_term):
    jax.config.update("jax_enable_x64", True)

    phi = jnp.array([0.2, 1.0, 2.7])

    def f(phi):
        return lj.legendre_jax(normalization, phi, 5, phase_term=phase_term)

    jvp = jax.jvp(f, (phi,), (jnp.ones_like(phi),))[1]
    dP, _ = lj.dlegendre_jax(normalization, phi, 5, phase_term=phase_term)

    np.testing.assert_allclose(jvp, dP, rtol=1e-10, atol=1e-12 * jnp.abs(dP).max())


def test_shape():
    P = lj.legendre_jax("full", jnp.zeros((2, 3)), 4, 2)
    assert P.shape == (5, 3, 2, 3)

    dP, P = lj.dlegendre_jax("full", jnp.zeros((7,)), 4, 2)
    assert dP.shape == (5, 3, 7)
    assert P.shape == (5, 4, 7)


def test_scalar_and_integer_input():
    P = lj.legendre_jax("unnormalized", 0, 3)
    assert P.shape == (4, 4)
    assert jnp.issubdtype(P.dtype, jnp.floating)
    np.testing.assert_allclose(P[:, 0], 1.0)


def test_jit():
    jax.config.update("jax_enable_x64", True)

    f = jax.jit(lambda phi: lj.legendre_jax("schmidt", phi, 4, 3, True))
    np.testing.assert_allclose(f(0.45)[3, 3], -0.0650586, atol=1e-5)


def test_negative_degree():
    with pytest.raises(ValueError):
        lj.legendre_jax("full", 0.1, -1)

    with pytest.raises(ValueError):
        lj.dlegendre_jax("full", 0.1, -1)
