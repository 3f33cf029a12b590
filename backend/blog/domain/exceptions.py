"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class StorageError(Exception):
    """Raised when the backing store fails for any reason other than a missing row.

    Wraps the driver/ORM exception so callers never depend on SQLAlchemy types.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"storage failure during {operation}: {message}")


class ArticleValidationError(Exception):
    """Raised when submitted article fields are rejected by the validator.

    ``errors`` maps field name to a human-readable message.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"invalid article fields: {fields}")
