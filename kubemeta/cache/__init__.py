"""Local resource stores read by the metadata generators.

Submodules:
    store -- ``Store`` protocol and the thread-safe ``ResourceStore``.
"""

from kubemeta.cache.store import ResourceStore, Store, lookup, name_key, namespaced_key

__all__ = ["ResourceStore", "Store", "lookup", "name_key", "namespaced_key"]
