# Data repository

import logging
from bisect import bisect_left

from data.exceptions import DuplicateItemError, ItemNotFoundError

logger = logging.getLogger(__name__)


class StorageRegistry:
    """
    In-memory registry keeping two views of the same set of items.

    The primary index maps item ID -> item. The secondary index is a sorted list
    of (description, id) keys, so items sharing a description are all kept and
    are ordered by ID among themselves.
    Both indexes are updated together; a failed add or remove leaves them untouched.
    """

    def __init__(self):
        self._by_id = {}
        self._by_description = []

    def add(self, item):
        """
        Adds an item to both indexes.
        Raises DuplicateItemError if the item's ID is already registered.
        """
        if item.id in self._by_id:
            raise DuplicateItemError(item.id)
        key = (item.description, item.id)
        index = bisect_left(self._by_description, key)
        self._by_id[item.id] = item
        self._by_description.insert(index, key)
        logger.debug("Added item %s (%s)", item.id, item.description)

    def find_by_id(self, item_id):
        """
        Returns the item registered under item_id.
        Raises ItemNotFoundError if there is none.
        """
        try:
            return self._by_id[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def remove(self, item_id):
        """
        Removes an item from both indexes.
        Raises ItemNotFoundError if item_id is not registered.
        """
        item = self.find_by_id(item_id)
        key = (item.description, item.id)
        index = bisect_left(self._by_description, key)
        del self._by_description[index]
        del self._by_id[item_id]
        logger.debug("Removed item %s (%s)", item.id, item.description)

    def items_by_description(self):
        return [self._by_id[item_id] for _, item_id in self._by_description]

    def list_by_description(self):
        """
        Returns (description, location) pairs sorted by description, ties by ID.
        """
        return [(item.description, item.location) for item in self.items_by_description()]

    def clear(self):
        self._by_id.clear()
        self._by_description.clear()

    def __len__(self):
        return len(self._by_id)

    def __contains__(self, item_id):
        return item_id in self._by_id

    def __iter__(self):
        return iter(self.items_by_description())


# Default registry shared by the module-level helpers and the service layer
_registry = StorageRegistry()

def default_registry():
    return _registry

def get_item(item_id):
    """
    Retrieves an item by its ID.
    """
    return _registry.find_by_id(item_id)

def add_item(item):
    """
    Adds an item to the repository.
    """
    _registry.add(item)
    return item

def remove_item(item_id):
    """
    Removes an item from the repository.
    """
    _registry.remove(item_id)

def list_items_by_description():
    """
    Lists (description, location) pairs in description order.
    """
    return _registry.list_by_description()

if __name__ == "__main__":
    from data.models import StoredItem
    # Example usage
    add_item(StoredItem("ITEM001", "Wireless Mouse", "Aisle 2, Shelf 3"))
    add_item(StoredItem("ITEM002", "Airpods", "Aisle 1, Shelf 7"))
    retrieved_item = get_item("ITEM002")
    print(f"Retrieved item: {retrieved_item}")
    print(f"Listing: {list_items_by_description()}")
