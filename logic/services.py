# Business services

# --- Suppress NotOpenSSLWarning ---
import warnings
try:
    from urllib3.exceptions import NotOpenSSLWarning
    warnings.filterwarnings('ignore', category=NotOpenSSLWarning)
except ImportError:
    pass

import logging

import requests

from data import repository
from data.exceptions import DuplicateItemError, ItemNotFoundError
from data.models import StoredItem
from utils.helpers import format_response

# --- Configuration Constants ---
REQUEST_TIMEOUT_SECONDS = 10

logger = logging.getLogger(__name__)


def _resolve(registry):
    return repository.default_registry() if registry is None else registry

def create_item_service(item_id, description, location, registry=None):
    """
    Service to register a new item.
    It encapsulates building the StoredItem and adding it to the registry.
    """
    item = StoredItem(item_id, description, location)
    try:
        _resolve(registry).add(item)
    except DuplicateItemError as e:
        logger.warning("Rejected duplicate item %s", e.item_id)
        return format_response(str(e), 409)
    return format_response(item.to_dict(), 201)

def get_item_service(item_id, registry=None):
    """
    Service to retrieve an item.
    """
    try:
        item = _resolve(registry).find_by_id(item_id)
    except ItemNotFoundError as e:
        logger.warning("Lookup of unknown item %s", e.item_id)
        return format_response(str(e), 404)
    return format_response(item.to_dict())

def remove_item_service(item_id, registry=None):
    """
    Service to remove an item from every index of the registry.
    """
    try:
        _resolve(registry).remove(item_id)
    except ItemNotFoundError as e:
        logger.warning("Removal of unknown item %s", e.item_id)
        return format_response(str(e), 404)
    return format_response(item_id)

def list_items_service(registry=None):
    entries = _resolve(registry).list_by_description()
    return format_response([{"description": description, "location": location} for description, location in entries])

def import_items_service(url, registry=None):
    """
    Fetches a JSON array of {"id", "description", "location"} objects from url
    and registers each of them. Duplicate IDs and malformed entries are skipped;
    everything else is added.
    """
    target = _resolve(registry)
    try:
        response = requests.get(url, timeout=REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.error("Import from %s failed: %s", url, e)
        return format_response(f"Could not fetch {url}: {e}", 502)

    try:
        payload = response.json()
    except ValueError:
        logger.error("Import from %s returned invalid JSON", url)
        return format_response(f"Response from {url} is not valid JSON.", 400)
    if not isinstance(payload, list):
        logger.error("Import from %s did not return a list", url)
        return format_response(f"Response from {url} is not a list of items.", 400)

    added, duplicates, invalid = [], [], 0
    for entry in payload:
        try:
            item = StoredItem.from_dict(entry)
        except (KeyError, TypeError):
            invalid += 1
            continue
        if not all(isinstance(field, str) for field in (item.id, item.description, item.location)):
            invalid += 1
            continue
        try:
            target.add(item)
        except DuplicateItemError:
            duplicates.append(item.id)
            continue
        added.append(item.id)

    logger.debug("Imported %d item(s) from %s (%d duplicate, %d invalid)", len(added), url, len(duplicates), invalid)
    return format_response({"added": added, "duplicates": duplicates, "invalid": invalid})


if __name__ == "__main__":
    # Example usage of item services
    print(create_item_service("ITEM010", "Service Item 1", "Aisle 3, Shelf 1"))
    print(create_item_service("ITEM011", "Service Item 2", "Aisle 3, Shelf 2"))
    print(create_item_service("ITEM010", "Duplicate Service Item", "Aisle 9, Shelf 9")) # Test duplicate

    print(get_item_service("ITEM010"))
    print(get_item_service("ITEM999"))
    print(list_items_service())
