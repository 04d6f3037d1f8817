"""
Exception types for the order processing domain.
"""


class OrderProcessingError(Exception):
    """Base class for errors raised by order processing collaborators."""
    pass


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing or malformed."""
    pass


class OrderStoreError(OrderProcessingError):
    """Raised when the order store cannot connect, save or fetch."""
    pass


class NotificationError(OrderProcessingError):
    """Raised when a customer notification cannot be delivered."""
    pass
