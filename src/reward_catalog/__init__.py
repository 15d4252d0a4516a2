"""
Reward Catalog.

Batch crawler for the myVIP loyalty rewards catalog: fetches every page of
the configured collections, normalizes each award into a RewardRecord,
deduplicates across pages and emits one deterministically ordered JSON
array.
"""

__version__ = "0.1.0"
