from storefront.stores.interfaces import InventoryStore, WindowFilters
from storefront.stores.memory_store import InMemoryInventoryStore

__all__ = ["InventoryStore", "InMemoryInventoryStore", "WindowFilters"]
