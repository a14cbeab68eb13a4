# gradebook/core/exceptions.py


class GradebookError(Exception):
    """Base class for errors raised by the gradebook."""


class DataIntegrityError(GradebookError):
    """A record was rejected before it reached the database."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NotFoundError(GradebookError):
    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class ConfigurationError(GradebookError):
    """No level configuration exists for the requested level."""
