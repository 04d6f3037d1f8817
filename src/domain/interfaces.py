"""
Collaborator contracts for the order processing workflow.

Store and notifier implementations are supplied by the embedding
application; test doubles can stand in for them without a real backend.
"""

from typing import Protocol

from .models import Order


class OrderStore(Protocol):
    """Order persistence backend."""

    @property
    def is_connected(self) -> bool:
        """Whether the store is ready to accept writes."""
        ...

    def connect(self) -> None:
        """Establish connectivity to the backend."""
        ...

    def save(self, order: Order) -> None:
        """Persist the order. Raises on failure."""
        ...

    def get_by_id(self, order_id: int) -> Order:
        """Fetch a previously saved order."""
        ...


class Notifier(Protocol):
    """Outbound customer notification channel."""

    def send_order_confirmation(self, customer_email: str, order_id: int) -> None:
        """Send an order confirmation. Raises on failure."""
        ...
