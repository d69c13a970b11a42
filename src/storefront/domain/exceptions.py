"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Checkout failures share the ``CheckoutError`` base: the checkout handler
catches exactly that family at its boundary and turns it into an outcome.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PermissionDeniedError(DomainException):
    """The principal is not allowed to perform the operation."""


# --- Checkout -----------------------------------------------------------------


class CheckoutError(DomainException):
    """Base class for every way a checkout attempt can fail."""


class EmptyCartError(CheckoutError):

    def __init__(self) -> None:
        super().__init__("Your cart is empty.")


class ProductMissingError(CheckoutError):

    def __init__(self, product_name: str) -> None:
        self.product_name = product_name
        super().__init__(f"Product {product_name} is no longer available.")


class InsufficientStockError(CheckoutError):

    def __init__(self, product_name: str, available: int) -> None:
        self.product_name = product_name
        self.available = available
        super().__init__(
            f"Insufficient stock for {product_name}. Only {available} available."
        )


class TransactionError(CheckoutError):
    """Wraps any storage failure raised inside the checkout transaction."""

    def __init__(self) -> None:
        super().__init__(
            "An error occurred while processing your order. Please try again."
        )


class AddressUpdateFailedError(DomainException):
    """Saving the shipping address onto the profile failed (non-fatal)."""
