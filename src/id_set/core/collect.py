"""
Generic conversion of id producers into containers.
"""

from typing import Callable, Iterable, TypeVar

from .id_set import IdSet

T = TypeVar("T")


def collect_into(ids: Iterable[int], factory: Callable[[], T] = IdSet) -> T:
    """
    Build a container from a finite producer of ids by repeated insertion.

    The target is created empty by ``factory`` and filled one id at a time
    through its ``insert``, ``add`` or ``append`` method, in that order of
    preference.

    Args:
        ids: Finite iterable of ids (e.g. ``IdSet.ids()`` or ``view.ids()``)
        factory: Zero-argument callable returning the empty target

    Returns:
        The filled container

    Raises:
        TypeError: If the target has no insert, add or append method
    """
    target = factory()

    for name in ("insert", "add", "append"):
        put = getattr(target, name, None)
        if callable(put):
            break
    else:
        raise TypeError(f"Cannot collect ids into {type(target).__name__}")

    for id_ in ids:
        put(id_)
    return target
