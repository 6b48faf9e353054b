import math
import warnings

from legendre_jax._src.config import config


def derivative_sign(phi: float, phase_term: bool) -> int:
    r"""Global sign applied to the derivative of the associated Legendre functions.

    The recurrences only involve :math:`|\sin\phi|` and :math:`\cos\phi`, which are
    identical for :math:`\phi` and :math:`-\phi`, whereas the derivative w.r.t. :math:`\phi`
    changes sign. The sign is therefore flipped when :math:`\phi \bmod 2\pi > \pi`.
    This correction was obtained empirically and is only verified for :math:`0 \leq \phi \leq \pi`.

    The sign is flipped once more when the Condon-Shortley phase term is included,
    since :math:`\partial_\phi P_{n,m}` is built from :math:`P_{n,m \pm 1}`.
    """
    phi = phi % (2 * math.pi)
    fact = -1 if phi > math.pi else 1

    if fact == -1 and config("derivative_angle_check") == "warn":
        warnings.warn(
            f"The derivative of the associated Legendre functions is evaluated at "
            f"phi mod 2pi = {phi}, outside [0, pi] where its sign is not verified."
        )

    if phase_term:
        fact *= -1

    return fact
