"""Centralized exception hierarchy for servicecfg.

Errors carry a message key for lookup and English text for logging.
"""

MESSAGES: dict[str, str] = {
    "service.registry.duplicate": "Service already exists: {name}",
    "service.registry.not_found": "Service not found: {name}",
    "service.name.empty": "Service name must not be empty",
    "service.name.empty_segment": "Service name {name!r} contains an empty segment",
    "service.name.bad_segment": "Service name {name!r} contains an invalid segment {segment!r}",
    "codec.decode_failed": "Failed to decode {source}: {detail}",
    "codec.encode_failed": "Failed to encode config tree: {detail}",
    "codec.not_an_object": "Expected a JSON5 object at top level, got {type_name}",
    "tree.rejected_keys": "Rejected settings: {keys}",
}


class ServiceCfgError(Exception):
    """Base exception for all servicecfg errors."""

    def __init__(
        self,
        message_key: str,
        status_code: int = 500,
        retriable: bool = False,
        **params: object,
    ) -> None:
        """
        Initialize the error.

        Args:
            message_key: Key in MESSAGES (e.g., 'service.registry.not_found')
            status_code: Recommended status code for callers exposing the error
            retriable: Whether the operation can be retried
            **params: Parameters for string formatting of the message
        """
        super().__init__(message_key)
        self.message_key = message_key
        self.status_code = status_code
        self.retriable = retriable
        self.params = params

    def __str__(self) -> str:
        """Returns the English version of the error message for logging."""
        template = MESSAGES.get(self.message_key)
        if template:
            try:
                return template.format(**self.params)
            except (KeyError, IndexError, ValueError):
                pass
        params_str = ", ".join(f"{k}={v}" for k, v in self.params.items())
        return f"[{self.message_key}] {params_str} (retriable: {self.retriable})"


class ResourceNotFoundError(ServiceCfgError):
    """Raised when a requested resource is not found."""

    def __init__(self, message_key: str, **params: object) -> None:
        super().__init__(message_key, status_code=404, **params)


class ResourceConflictError(ServiceCfgError):
    """Raised when an operation conflicts with the current state (e.g., duplicate name)."""

    def __init__(self, message_key: str, **params: object) -> None:
        super().__init__(message_key, status_code=409, **params)


class ValidationError(ServiceCfgError):
    """Raised when input validation fails."""

    def __init__(self, message_key: str, **params: object) -> None:
        super().__init__(message_key, status_code=400, **params)


class OperationalError(ServiceCfgError):
    """Raised when an operational failure occurs (encoding, decoding, etc.)."""

    def __init__(self, message_key: str, retriable: bool = False, **params: object) -> None:
        super().__init__(message_key, status_code=500, retriable=retriable, **params)


class DuplicateServiceError(ResourceConflictError):
    """Raised by register() when the service name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__("service.registry.duplicate", name=name)
        self.name = name


class ServiceNotFoundError(ResourceNotFoundError):
    """Raised by single-service operations on an unknown name."""

    def __init__(self, name: str) -> None:
        super().__init__("service.registry.not_found", name=name)
        self.name = name


class InvalidServiceNameError(ValidationError):
    """Raised when a service name cannot be mapped to a file path."""


class CodecError(OperationalError):
    """Raised when a config tree cannot be encoded or decoded."""
