"""Custom exception classes for stellar-initialize."""

from typing import List, Optional


class InitializeError(Exception):
    """Base exception for contract initialization errors."""

    pass


class CommandFailedError(InitializeError, RuntimeError):
    """Raised when an external tool exits with a nonzero status."""

    def __init__(self, command: List[str], returncode: int, message: Optional[str] = None):
        self.command = command
        self.returncode = returncode
        if message is None:
            message = f"Command exited with status {returncode}: {' '.join(command)}"
        super().__init__(message)


class ToolNotFoundError(InitializeError, FileNotFoundError):
    """Raised when an external tool executable cannot be found."""

    pass


class ConfigurationError(InitializeError, ValueError):
    """Raised when required configuration is missing or invalid."""

    pass


class InvalidDeploymentRecordError(InitializeError, ValueError):
    """Raised when a persisted deployment record cannot be parsed."""

    pass


class RpcUnavailableError(InitializeError, RuntimeError):
    """Raised when the configured RPC endpoint is unreachable or unhealthy."""

    pass
