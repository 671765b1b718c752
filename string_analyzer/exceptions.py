from fastapi import status


class StringAnalyzerError(Exception):
    """Base error raised by the core; carries the HTTP status it maps to."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request body or missing 'value' field"


class AlreadyExistsError(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "String already exists in the system"


class NotFoundError(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "String does not exist in the system"
