import enum
import math
from typing import Union


class Normalization(enum.Enum):
    r"""Normalization convention of the associated Legendre functions.

    * ``UNNORMALIZED``: conventional functions :math:`P_{n,m}`
    * ``SCHMIDT``: Schmidt quasi-normalized functions :math:`\hat{P}_{n,m} = K_{n,m} P_{n,m}`
      with :math:`K_{n,m} = \sqrt{k (n-m)! / (n+m)!}`
    * ``FULL``: fully normalized functions :math:`\bar{P}_{n,m} = K_{n,m} P_{n,m}`
      with :math:`K_{n,m} = \sqrt{k (2n+1) (n-m)! / (n+m)!}`

    where :math:`k = 1` if :math:`m = 0` and :math:`k = 2` otherwise.
    """

    UNNORMALIZED = "unnormalized"
    SCHMIDT = "schmidt"
    FULL = "full"

    def __repr__(self) -> str:
        return f"Normalization.{self.name}"


IntoNormalization = Union[Normalization, str]


def as_normalization(normalization: IntoNormalization) -> Normalization:
    if isinstance(normalization, Normalization):
        return normalization

    try:
        return Normalization(normalization)
    except ValueError:
        raise ValueError(
            f"Unknown normalization {normalization!r}, "
            f"expected one of {[n.value for n in Normalization]}"
        ) from None


def normalization_factor(normalization: IntoNormalization, n: int, m: int) -> float:
    r"""Conversion factor from the unnormalized functions to ``normalization``.

    Args:
        normalization (`Normalization` or str): target convention
        n (int): degree
        m (int): order, ``0 <= m <= n``

    Returns:
        float: :math:`K_{n,m}` such that :math:`P^{\text{normalization}}_{n,m} = K_{n,m} P_{n,m}`

    Examples:
        >>> normalization_factor("schmidt", 1, 1)
        1.0
        >>> round(normalization_factor("full", 2, 0), 6)
        2.236068
    """
    normalization = as_normalization(normalization)
    if not 0 <= m <= n:
        raise ValueError(f"Expected 0 <= m <= n, got n={n} and m={m}")

    if normalization == Normalization.UNNORMALIZED:
        return 1.0

    k = 1 if m == 0 else 2
    ratio = math.factorial(n - m) / math.factorial(n + m)

    if normalization == Normalization.SCHMIDT:
        return math.sqrt(k * ratio)
    return math.sqrt(k * (2 * n + 1) * ratio)
