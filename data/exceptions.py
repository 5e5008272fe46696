# Registry errors

class RegistryError(ValueError):
    """
    Base class for caller errors raised by the storage registry.
    Carries the identifier that caused the failure.
    """
    def __init__(self, item_id, message):
        super().__init__(message)
        self.item_id = item_id


class DuplicateItemError(RegistryError):
    """Raised when adding an item whose ID is already registered."""
    def __init__(self, item_id):
        super().__init__(item_id, f"Item with ID {item_id} already exists.")


class ItemNotFoundError(RegistryError):
    """Raised when looking up or removing an ID that is not registered."""
    def __init__(self, item_id):
        super().__init__(item_id, f"Item with ID {item_id} not found.")
