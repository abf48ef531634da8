"""Element-wise combination of two coefficient sequences of unequal length.

Every element-wise polynomial operation is an instance of one of the two
functions here, parameterized by three rules: what to do where both
operands have a coefficient, where only the left one does, and where only
the right one does. Addition uses (add, identity, copy).
"""

from itertools import zip_longest
from typing import Callable, Iterable, Sequence

from ringpoly.capabilities import trim_zeros

_MISSING = object()


def combine(lhs: Sequence, rhs: Sequence,
            both: Callable, left_only: Callable, right_only: Callable) -> list:
    """Combine two read-only sequences into a new canonical list."""
    result = []
    for l, r in zip_longest(lhs, rhs, fillvalue=_MISSING):
        if r is _MISSING:
            result.append(left_only(l))
        elif l is _MISSING:
            result.append(right_only(r))
        else:
            result.append(both(l, r))
    return trim_zeros(result)


def combine_into(lhs: list, rhs: Iterable,
                 both: Callable, left_only: Callable, right_only: Callable) -> list:
    """Combine ``rhs`` into ``lhs`` in place and return ``lhs``.

    ``both`` and ``left_only`` return the value stored back at the index,
    so in-place operators on immutable coefficients (``operator.iadd``)
    work the same as on mutable ones. ``rhs`` is consumed; whatever it
    has beyond ``len(lhs)`` is appended through ``right_only``.
    """
    rhs_iter = iter(rhs)
    for i, l in enumerate(lhs):
        r = next(rhs_iter, _MISSING)
        if r is _MISSING:
            lhs[i] = left_only(l)
        else:
            lhs[i] = both(l, r)
    lhs.extend(right_only(r) for r in rhs_iter)
    return trim_zeros(lhs)
