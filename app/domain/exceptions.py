class EntityNotFoundError(Exception):
    """Raised when an id doesn't resolve to a stored document."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f'{entity} not found')
        self.entity = entity
        self.entity_id = entity_id


class InvalidRequestError(Exception):
    """Raised when a request is missing required fields or carries malformed data."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
