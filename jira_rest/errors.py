from __future__ import annotations


class TransportError(Exception):
    def __init__(self, status_code: int, body_snippet: str):
        super().__init__(f"Unexpected HTTP status {status_code}")
        self.status_code = status_code
        self.body_snippet = body_snippet


HttpTransportError = TransportError


class InvalidCredentialsError(Exception):
    def __init__(self, message: str = "Invalid credentials; log in again"):
        super().__init__(message)
        self.message = message


class DecodeError(ValueError):
    pass


class ConfigurationError(ValueError):
    pass
