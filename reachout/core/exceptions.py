from typing import Any, Dict, List, Optional


class DataClientError(Exception):
    """A single store operation failed. Carries only a human-readable message."""

    def __init__(self, message: str, collection: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.collection = collection


class RecordNotFoundError(DataClientError):
    pass


class AuthError(Exception):
    """Sign-in was refused: unknown email, wrong password or inactive account."""

    def __init__(self, message: str = "Incorrect email or password"):
        super().__init__(message)
        self.message = message


class FormValidationError(Exception):
    """A submitted form could not be decoded into its typed record."""

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        super().__init__(self.summary)

    @property
    def summary(self) -> str:
        if not self.errors:
            return "Invalid form submission"
        first = self.errors[0]
        return f"{first['field']}: {first['message']}"
