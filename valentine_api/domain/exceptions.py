"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class RequiredFieldError(Exception):
    """Raised when one or more required fields are empty after sanitization."""

    def __init__(self, fields: list[str], message: str):
        self.fields = fields
        self.message = message
        super().__init__(message)
