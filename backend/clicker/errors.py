"""Error taxonomy shared by services and HTTP handlers."""


class ClickerError(Exception):
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self):
        return {'error': self.message}


class ValidationError(ClickerError):
    """Bad client input, e.g. an empty username or negative clicks."""
    status_code = 400


class NotFoundError(ClickerError):
    status_code = 404


class StorageError(ClickerError):
    """Wraps a failure of the underlying database."""
    status_code = 500
