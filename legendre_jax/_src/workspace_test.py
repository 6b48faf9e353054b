import numpy as np
import pytest

import legendre_jax as lj


@pytest.mark.parametrize("normalization", ["unnormalized", "schmidt", "full"])
@pytest.mark.parametrize("m_max", [-1, 0, 3, 6])
@pytest.mark.parametrize("phase_term", [False, True])
def test_workspace(normalization, m_max, phase_term):
    ws = lj.LegendreWorkspace(normalization, 6, m_max, phase_term)

    for phi in [0.3, 2.0, 4.4]:
        dP_ref, P_ref = lj.dlegendre(normalization, phi, 6, m_max, phase_term)

        dP, P = ws.derivatives(phi)
        np.testing.assert_allclose(dP, dP_ref)
        np.testing.assert_allclose(P, P_ref[:, : ws.m_max + 1])

        P = ws.values(phi)
        np.testing.assert_allclose(P, lj.legendre(normalization, phi, 6, m_max, phase_term))


def test_buffers_are_reused():
    ws = lj.LegendreWorkspace("full", 5, 2)
    P_buffer, dP_buffer = ws.P, ws.dP

    dP, P = ws.derivatives(0.1)
    ws.derivatives(1.1)

    assert ws.P is P_buffer and ws.dP is dP_buffer
    assert dP is dP_buffer
    assert np.shares_memory(P, P_buffer)
    assert ws.P.shape == (6, 4)
    assert ws.dP.shape == (6, 3)


def test_workspace_normalization():
    ws = lj.LegendreWorkspace("schmidt", 3)
    assert ws.normalization is lj.Normalization.SCHMIDT
    assert ws.m_max == 3
    assert repr(ws) == "LegendreWorkspace(schmidt, n_max=3, m_max=3, phase_term=False)"

    with pytest.raises(ValueError):
        lj.LegendreWorkspace("schmidt", -1)

    with pytest.raises(ValueError):
        lj.LegendreWorkspace("spherical", 3)
