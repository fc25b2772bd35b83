from .exceptions import (
    BaseAppError,
    InfrastructureError,
    TransportError,
    NetworkError,
    APIError,
    VerificationRequiredError,
    ParseError,
    ValidationError,
)
