"""
The IdSet type and conversions into other containers.
"""

from .collect import collect_into
from .id_set import IdSet

__all__ = ["IdSet", "collect_into"]
