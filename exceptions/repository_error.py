from typing import Any


class RepositoryError(Exception):
    """Base class for failures raised by the repository layer."""


class NotFoundError(RepositoryError):
    def __init__(self, entity_name: str, entity_id: Any):
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} {entity_id} not found")


class PersistenceError(RepositoryError):
    """The storage engine failed to read or commit."""
