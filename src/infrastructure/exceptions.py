from typing import Any, List, Optional


class InfrastructureError(Exception):
    """Base exception for infrastructure-related errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class RegistryError(InfrastructureError):
    """Raised when a registry operation fails."""
    pass


class UnsupportedTypeError(RegistryError):
    """Raised when a name is requested that no factory is registered for."""
    def __init__(self, registry_name: str, type_name: str, available: List[str]):
        super().__init__(
            f"{registry_name} type '{type_name}' not registered. "
            f"Available types: {available}",
            details={"type_name": type_name, "available": available},
        )
        self.registry_name = registry_name
        self.type_name = type_name
        self.available = available
