"""
repositories/exceptions.py
---------------------------
Exceptions raised by the data access layer.
Storage errors from psycopg2 are not wrapped; they propagate as-is.
"""


class RepositoryError(Exception):
    """
    Base exception for repository errors.

    - message: human-friendly message
    - error_code: canonical short code (e.g. 'not_found') the transport layer can map
    """

    def __init__(self, message: str, *, error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"{self.message} (code: {self.error_code})"
        return self.message


class EntityNotFoundError(RepositoryError):
    """Raised when an update or delete targets an id with no stored row."""

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} with id {entity_id} not found", error_code="not_found")
        self.entity = entity
        self.entity_id = entity_id


class EntityInUseError(RepositoryError):
    """Raised when deleting a row that another row still references."""

    def __init__(self, message: str):
        super().__init__(message, error_code="in_use")


class InvalidEntityError(RepositoryError):
    """Raised when an entity cannot be persisted in its current shape."""

    def __init__(self, message: str):
        super().__init__(message, error_code="invalid_entity")


__all__ = [
    "RepositoryError",
    "EntityNotFoundError",
    "EntityInUseError",
    "InvalidEntityError",
]
