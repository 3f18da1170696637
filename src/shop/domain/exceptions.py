"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so the CLI
layer can catch them uniformly. The three direct subclasses map onto the
boundary's client-error kinds: bad input (ValidationError), missing entity
(EntityNotFoundError) and ownership violation (ForbiddenError).
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ForbiddenError(DomainException):
    """The entity exists but belongs to someone else."""


class InsufficientStockError(ValidationError):
    """A stock decrement asked for more units than are on hand."""


class InvalidQuantityError(ValidationError):
    """A quantity was zero, negative or not an integer."""


class InvalidPriceError(ValidationError):
    """A price was negative or not a number."""


class EmptyCartError(ValidationError):
    """Checkout was attempted on a cart with no lines."""


class AlreadyExistsError(ValidationError):
    """An entity with the same natural key is already registered."""


class NotInCartError(EntityNotFoundError):
    """The product has no line in the user's cart."""
