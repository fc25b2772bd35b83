from typing import Any

class BaseAppError(Exception):
    pass

class InfrastructureError(BaseAppError):
    def __init__(self, message: str, original_error: Exception | None = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)

# Transport errors are handed to the caller unchanged
class TransportError(BaseAppError):
    pass

class NetworkError(TransportError):
    pass

class APIError(TransportError):
    def __init__(self, message: str, status_code: int | None = None,
                 response_data: dict[str, Any] | None = None):
        self.status_code = status_code
        self.response_data = response_data
        super().__init__(message)

    @property
    def is_client_error(self) -> bool:
        return self.status_code is not None and 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return self.status_code is not None and 500 <= self.status_code < 600

class VerificationRequiredError(BaseAppError):
    pass

class ParseError(BaseAppError):
    def __init__(self, operation: str, response: Any = None):
        self.operation = operation
        self.response = response
        super().__init__(f"{operation} parse error")

class ValidationError(BaseAppError):
    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)
