"""shared_utils/comparison/__init__.py — public API of the comparison package."""

from shared_utils.comparison.comparison_util import canonicalize, deep_equal, sorted_arrays_equal

__all__ = [
    "canonicalize",
    "deep_equal",
    "sorted_arrays_equal",
]
