"""
Domain exceptions.

Normal store usage never raises: missing ids come back as None/False and
malformed time strings degrade to a zero duration. These are reserved for
caller mistakes that cannot be degraded safely.
"""


class GrowthlogError(Exception):
    """Base class for all growthlog errors"""


class InvalidWindowError(GrowthlogError):
    """A date window could not be built from the given arguments"""


class DuplicateEntryError(GrowthlogError):
    """An entry with the same id already exists in the store"""

    def __init__(self, entry_id: str):
        super().__init__(f"Entry {entry_id!r} already exists")
        self.entry_id = entry_id
