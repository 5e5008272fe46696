import logging

from data.exceptions import DuplicateItemError, ItemNotFoundError
from data.models import StoredItem
from data.repository import StorageRegistry
from utils.helpers import format_listing

# --- Configuration Constants ---
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

DEMO_ITEMS = [
    ("ITEM001", "Wireless Mouse", "Aisle 2, Shelf 3"),
    ("ITEM002", "Airpods", "Aisle 1, Shelf 7"),
]
DEMO_DUPLICATE = ("ITEM001", "Wireless Mouse", "Aisle 4, Shelf 2")
DEMO_LOOKUP_ID = "ITEM002"
DEMO_MISSING_ID = "ITEM003"


def try_duplicate_addition(registry):
    try:
        registry.add(StoredItem(*DEMO_DUPLICATE))
    except DuplicateItemError as e:
        print(f"Error: {e}")

def try_missing_removal(registry):
    try:
        registry.remove(DEMO_MISSING_ID)
    except ItemNotFoundError as e:
        print(f"Error: {e}")

def run_demo(registry=None):
    """
    Walks a registry through the sample scenario and narrates each step:
    two adds, a rejected duplicate, a lookup, a failed removal and the sorted listing.
    """
    if registry is None:
        registry = StorageRegistry()

    for item_id, description, location in DEMO_ITEMS:
        print(f"Adding Item {item_id} - {description}...")
        registry.add(StoredItem(item_id, description, location))

    print(f"Attempting to add {DEMO_DUPLICATE[0]} again...")
    try_duplicate_addition(registry)

    try:
        print(f"Searching for {DEMO_LOOKUP_ID}...")
        found = registry.find_by_id(DEMO_LOOKUP_ID)
        print(f"Located: {found.description} in {found.location}")
    except ItemNotFoundError as e:
        print(f"Error: {e}")

    print(f"Attempting to delete {DEMO_MISSING_ID}...")
    try_missing_removal(registry)

    print("\nInventory sorted by description:")
    print(format_listing(registry.list_by_description()))
    return registry

def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    run_demo()

if __name__ == "__main__":
    main()
