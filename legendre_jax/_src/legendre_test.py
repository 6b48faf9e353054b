import math

import numpy as np
import pytest

import legendre_jax as lj

normalizations = ["unnormalized", "schmidt", "full"]


def test_unnormalized_reference_values():
    P = lj.legendre("unnormalized", 0.45, 4)

    assert P.shape == (5, 5)
    np.testing.assert_allclose(P[1, 0], 0.900447, atol=1e-5)
    np.testing.assert_allclose(P[2, 1], 1.17499, atol=1e-5)
    np.testing.assert_allclose(P[4, 4], 3.75845, atol=1e-5)


def test_schmidt_reference_values():
    P = lj.legendre("schmidt", 0.45, 4, 3, phase_term=True)

    assert P.shape == (5, 4)
    np.testing.assert_allclose(P[1, 1], -0.434966, atol=1e-5)
    np.testing.assert_allclose(P[3, 3], -0.0650586, atol=1e-5)


def test_unnormalized_closed_forms():
    phi = 1.1
    s, c = math.sin(phi), math.cos(phi)
    P = lj.unnormalized_legendre(phi, 3)

    np.testing.assert_allclose(P[2, 0], (3 * c**2 - 1) / 2)
    np.testing.assert_allclose(P[2, 1], 3 * c * s)
    np.testing.assert_allclose(P[2, 2], 3 * s**2)
    np.testing.assert_allclose(P[3, 0], (5 * c**3 - 3 * c) / 2)
    np.testing.assert_allclose(P[3, 1], 1.5 * (5 * c**2 - 1) * s)
    np.testing.assert_allclose(P[3, 2], 15 * c * s**2)
    np.testing.assert_allclose(P[3, 3], 15 * s**3)


@pytest.mark.parametrize("normalization", normalizations)
@pytest.mark.parametrize("phi", [0.0, 0.3, -2.0, 4.5, 100.0])
@pytest.mark.parametrize("phase_term", [False, True])
def test_first_value(normalization, phi, phase_term):
    P = lj.legendre(normalization, phi, 3, phase_term=phase_term)
    assert P[0, 0] == 1.0


@pytest.mark.parametrize("normalization, k", [("unnormalized", 1.0), ("schmidt", 1.0), ("full", math.sqrt(3))])
def test_zero_angle(normalization, k):
    P = lj.legendre(normalization, 0.0, 6)

    assert P[1, 0] == k
    assert P[1, 1] == 0.0
    np.testing.assert_array_equal(P[:, 1:], 0.0)


@pytest.mark.parametrize("normalization", normalizations)
def test_phase_term(normalization):
    P = lj.legendre(normalization, 0.7, 8)
    P_ph = lj.legendre(normalization, 0.7, 8, phase_term=True)

    m = np.arange(9)
    np.testing.assert_allclose(P_ph, (-1.0) ** m * P, rtol=1e-14, atol=1e-14)


@pytest.mark.parametrize("normalization", normalizations)
@pytest.mark.parametrize("n_max, m_max, shape", [(6, -1, (7, 7)), (6, 2, (7, 3)), (6, 9, (7, 7)), (0, -1, (1, 1))])
def test_shape_and_upper_triangle(normalization, n_max, m_max, shape):
    P = lj.legendre(normalization, 1.2, n_max, m_max)

    assert P.shape == shape
    np.testing.assert_array_equal(np.triu(P, 1), 0.0)


def test_full_and_schmidt():
    n_max = 20
    P_full = lj.legendre("full", 0.9, n_max, 15)
    P_schmidt = lj.legendre("schmidt", 0.9, n_max, 15)

    n = np.arange(n_max + 1)[:, None]
    np.testing.assert_allclose(P_full, P_schmidt * np.sqrt(2 * n + 1), rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("normalization", ["schmidt", "full"])
def test_normalization_factor_consistency(normalization):
    P = lj.legendre("unnormalized", 2.1, 10)
    P_norm = lj.legendre(normalization, 2.1, 10)

    for n in range(11):
        for m in range(n + 1):
            np.testing.assert_allclose(
                P_norm[n, m],
                lj.normalization_factor(normalization, n, m) * P[n, m],
                rtol=1e-10,
                atol=1e-14,
            )


@pytest.mark.parametrize("normalization", normalizations)
def test_fill_partial_order(normalization):
    P = np.full((6, 6), np.nan)
    lj.fill_legendre(normalization, P, 0.4, 5, 2)

    ref = lj.legendre(normalization, 0.4, 5)
    np.testing.assert_allclose(P[:, :3][np.tril_indices(6, 0, 3)], ref[:, :3][np.tril_indices(6, 0, 3)])
    # nothing is written beyond the requested order
    assert np.all(np.isnan(P[:, 3:]))


@pytest.mark.parametrize("normalization", normalizations)
def test_fill_does_not_touch_upper_triangle(normalization):
    P = np.full((5, 5), 7.0)
    lj.fill_legendre(normalization, P, 0.4)
    np.testing.assert_array_equal(P[np.triu_indices(5, 1)], 7.0)


@pytest.mark.parametrize("normalization", normalizations)
def test_fill_narrows_to_capacity(normalization):
    P = np.zeros((4, 3))
    lj.fill_legendre(normalization, P, 0.4, 10, 10)

    ref = lj.legendre(normalization, 0.4, 3)
    np.testing.assert_allclose(P, np.tril(ref[:, :3]))


@pytest.mark.parametrize("normalization", normalizations)
@pytest.mark.parametrize("phi", [0.0, 1.0, 3.0])
def test_degenerate_table(normalization, phi):
    P = np.zeros((1, 1))
    lj.fill_legendre(normalization, P, phi)
    np.testing.assert_array_equal(P, [[1.0]])


@pytest.mark.parametrize("normalization", normalizations)
def test_empty_table(normalization):
    P = np.zeros((3, 0))
    lj.fill_legendre(normalization, P, 0.5)
    assert P.shape == (3, 0)


@pytest.mark.parametrize("normalization", normalizations)
def test_negative_degree(normalization):
    with pytest.raises(ValueError):
        lj.legendre(normalization, 0.3, -1)


@pytest.mark.parametrize("normalization", normalizations)
def test_reuse_buffer(normalization):
    P = np.zeros((8, 8))
    for phi in [0.1, 2.0, 5.0]:
        lj.fill_legendre(normalization, P, phi)
        np.testing.assert_allclose(P, lj.legendre(normalization, phi, 7))


@pytest.mark.parametrize("phi", [1e-9, 1e-300])
def test_small_angle(phi):
    # sin(phi) does not vanish even though cos(phi) rounds to 1
    P = lj.legendre("unnormalized", phi, 2)
    assert P[1, 1] == math.sin(phi)
    assert P[1, 1] > 0.0


@pytest.mark.parametrize("normalization", normalizations)
def test_sine_sign(normalization):
    # the functions only depend on |sin(phi)|
    np.testing.assert_allclose(
        lj.legendre(normalization, -0.8, 6), lj.legendre(normalization, 0.8, 6)
    )


def test_high_degree_is_finite():
    P = lj.legendre("full", 0.5, 300)
    assert np.all(np.isfinite(P))


def test_facade_dispatch():
    for normalization, f in [
        (lj.Normalization.UNNORMALIZED, lj.unnormalized_legendre),
        (lj.Normalization.SCHMIDT, lj.schmidt_legendre),
        (lj.Normalization.FULL, lj.full_legendre),
    ]:
        np.testing.assert_array_equal(lj.legendre(normalization, 0.2, 5, 3, True), f(0.2, 5, 3, True))
