"""
Order processing workflow - core business logic.

This module processes a single order end to end:
1. Validate the order
2. Reject non-positive amounts
3. Ensure the order store is connected
4. Save the order
5. Send a confirmation email for orders above the threshold (best effort)
6. Mark the order processed

Only a missing order or a missing collaborator raises. Every other outcome
is reported through the boolean result: False means either the amount was
not positive or the store failed, and callers cannot tell the two apart.
Notification failures are logged and never reach the caller.
"""

import logging
from decimal import Decimal
from typing import Callable

from .errors import InvalidArgumentError
from .interfaces import Notifier, OrderStore
from .models import Order, OperationResult

logger = logging.getLogger(__name__)

# Orders strictly above this amount get a confirmation email
EMAIL_THRESHOLD_AMOUNT = Decimal('100')


class OrderProcessor:
    """
    Validates, persists and confirms a single order.

    Stateless between calls: each process_order() depends only on its
    argument and on the collaborators' responses.
    """

    def __init__(self, store: OrderStore, notifier: Notifier):
        """
        Initialize order processor.

        Args:
            store: Order persistence backend
            notifier: Customer notification channel

        Raises:
            InvalidArgumentError: If either collaborator is None
        """
        if store is None:
            raise InvalidArgumentError("store is required")
        if notifier is None:
            raise InvalidArgumentError("notifier is required")

        self._store = store
        self._notifier = notifier

    def process_order(self, order: Order) -> bool:
        """
        Process a single order.

        Args:
            order: Order to process (mutated in place on success)

        Returns:
            bool: True if the order was saved, False if the amount is not
                positive or the store failed

        Raises:
            InvalidArgumentError: If order is None
        """
        self._validate_order(order)

        if not self._is_valid_amount(order):
            logger.info(f"Rejected order {order.id}: invalid amount {order.total_amount}")
            return False

        persisted = self._persist(order)
        if not persisted.success:
            logger.error(f"Database failure for order {order.id}: {persisted.error_message}")
            return False

        self._send_confirmation_if_needed(order)
        self._mark_processed(order)

        logger.info(f"Order {order.id} processed")
        return True

    def _validate_order(self, order: Order) -> None:
        if order is None:
            raise InvalidArgumentError("order is required")

    def _is_valid_amount(self, order: Order) -> bool:
        amount = order.total_amount
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))
        return amount.is_finite() and amount > 0

    def _persist(self, order: Order) -> OperationResult:
        """
        Ensure connectivity, then save.

        Connect is attempted at most once and its effect is not re-checked;
        a failure in the connectivity query, connect or save is reported as
        a failed result and save is not attempted after a failed connect.
        """
        connected = self._attempt(self._ensure_connected)
        if not connected.success:
            return connected

        return self._attempt(lambda: self._store.save(order))

    def _ensure_connected(self) -> None:
        if not self._store.is_connected:
            logger.info("Order store not connected, connecting")
            self._store.connect()

    def _send_confirmation_if_needed(self, order: Order) -> None:
        """
        Send the confirmation email for orders above the threshold.

        Note:
            Failures are logged and absorbed; they never change the result.
        """
        if order.total_amount <= EMAIL_THRESHOLD_AMOUNT:
            return

        sent = self._attempt(
            lambda: self._notifier.send_order_confirmation(order.customer_email, order.id)
        )
        if not sent.success:
            logger.warning(
                f"Confirmation email for order {order.id} not sent: {sent.error_message}"
            )

    def _mark_processed(self, order: Order) -> None:
        order.is_processed = True

    @staticmethod
    def _attempt(call: Callable[[], None]) -> OperationResult:
        """Run a collaborator call and capture any failure as a result value."""
        try:
            call()
            return OperationResult.ok()
        except Exception as e:
            return OperationResult.failed(e)
