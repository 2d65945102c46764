"""Framework-independent domain exceptions."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class StorageError(Exception):
    """Raised when the backing store cannot be reached or rejects a query.

    Wraps the driver/ORM exception so the application layer never depends
    on SQLAlchemy types.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"Storage failure during {operation}: {message}")
