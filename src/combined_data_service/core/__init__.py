"""Core join and aggregation logic."""

from .aggregator import CombinedDataAggregator, combine_once
from .joiner import join

__all__ = ["CombinedDataAggregator", "combine_once", "join"]
