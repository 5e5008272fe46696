# Data models

class StoredItem:
    """
    Represents one inventory record: an identifier, a description and a location.
    Fields are read-only once the item is constructed.
    """
    __slots__ = ("_id", "_description", "_location")

    def __init__(self, id, description, location):
        self._id = id
        self._description = description
        self._location = location

    @property
    def id(self):
        return self._id

    @property
    def description(self):
        return self._description

    @property
    def location(self):
        return self._location

    def to_dict(self):
        return {"id": self._id, "description": self._description, "location": self._location}

    @classmethod
    def from_dict(cls, data):
        """
        Builds an item from a mapping with 'id', 'description' and 'location' keys.
        Raises KeyError when one of them is missing.
        """
        return cls(data["id"], data["description"], data["location"])

    def __eq__(self, other):
        if not isinstance(other, StoredItem):
            return NotImplemented
        return (self._id, self._description, self._location) == (other._id, other._description, other._location)

    def __hash__(self):
        return hash((self._id, self._description, self._location))

    def __repr__(self):
        return f"StoredItem(id='{self._id}', description='{self._description}', location='{self._location}')"

if __name__ == "__main__":
    # Example usage
    item = StoredItem("ITEM001", "Wireless Mouse", "Aisle 2, Shelf 3")
    print(item)
