"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException. Handlers
return these as values inside a ``Failure`` rather than raising them, so
the CLI layer can map each kind to its own exit status.

``StoreError`` sits outside that hierarchy: it marks a
transient persistence failure that the caller may retry.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A precondition on an operation's input was violated."""


class BeerNotFoundError(DomainException):
    """No live beer matches the requested identifier or name."""

    def __init__(self, key: object) -> None:
        super().__init__(f"Beer {key} not found")
        self.key = key


class BeerAlreadyExistsError(DomainException):
    """Another live beer already holds this name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Beer {name} already exists")
        self.name = name


class BeerStockExceededError(DomainException):
    """An increment would push the quantity above ``max``."""

    def __init__(self) -> None:
        super().__init__("Beer stock exceeded")


class NegativeStockError(DomainException):
    """A decrement would push the quantity below zero."""

    def __init__(self) -> None:
        super().__init__("Stock quantity can't be negative")


class StoreError(Exception):
    """The record store failed for a reason unrelated to business rules."""
