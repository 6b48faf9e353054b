from typing import Tuple

import numpy as np


def _resolve(rows: int, cols: int, n_max: int, m_max: int) -> Tuple[int, int]:
    # negative bounds mean "use all the available memory"
    if n_max < 0:
        n_max = rows - 1

    if m_max < 0:
        m_max = cols - 1 if cols <= rows else n_max

    if n_max > rows - 1:
        n_max = rows - 1

    if m_max > cols - 1 or m_max > n_max:
        m_max = min(cols - 1, n_max)

    return n_max, m_max


def degree_and_order(P: np.ndarray, n_max: int = -1, m_max: int = -1) -> Tuple[int, int]:
    r"""Maximum degree and order that can be computed in the table ``P``.

    Negative ``n_max`` or ``m_max`` are inferred from the shape of ``P``:
    the degree from the number of rows and the order from the number of columns
    (capped at the degree if ``P`` is wider than it is tall).
    Requests that do not fit in ``P`` are narrowed, never rejected.

    Args:
        P (`numpy.ndarray`): table of shape ``(rows, cols)``
        n_max (int): requested maximum degree
        m_max (int): requested maximum order

    Returns:
        (int, int): the resolved ``(n_max, m_max)``

    Examples:
        >>> degree_and_order(np.zeros((5, 5)))
        (4, 4)
        >>> degree_and_order(np.zeros((3, 6)))
        (2, 2)
        >>> degree_and_order(np.zeros((5, 5)), 10, 3)
        (4, 3)
    """
    rows, cols = P.shape
    return _resolve(rows, cols, n_max, m_max)


def degree_and_order_pair(
    dP: np.ndarray, P: np.ndarray, n_max: int = -1, m_max: int = -1
) -> Tuple[int, int]:
    r"""Same as :func:`degree_and_order` for the pair of tables ``(dP, P)``.

    The capacity is the element-wise minimum of the shapes of both tables.
    """
    P_rows, P_cols = P.shape
    dP_rows, dP_cols = dP.shape
    return _resolve(min(P_rows, dP_rows), min(P_cols, dP_cols), n_max, m_max)
