"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class MissingFieldsError(Exception):
    """Raised when required fields are absent or empty."""

    def __init__(self, entity_type: str, fields: list[str]):
        self.entity_type = entity_type
        self.fields = fields
        super().__init__(f"{entity_type} is missing required fields: {', '.join(fields)}")


class StoreError(Exception):
    """Raised when a statement against the store fails.

    ``detail`` keeps the raw driver message so it can be reported back to
    the client unchanged.
    """

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class StoreConnectionError(StoreError):
    """The store could not be reached or the connection was lost."""


class StoreTimeoutError(StoreConnectionError):
    """A statement did not complete within the configured timeout."""


class ConstraintViolationError(StoreError):
    """The store rejected a write (null value, unique or check constraint)."""
