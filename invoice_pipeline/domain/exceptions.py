"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownStrategyError(DomainException):
    """Configuration names a strategy that is not registered"""

    def __init__(self, kind: str, name: str, available: list[str]):
        self.kind = kind
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown {kind} strategy '{name}'. Available: {', '.join(available)}"
        )
