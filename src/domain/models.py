"""
Data models for the order processing domain.

These type-safe data structures define clear contracts between components.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from .errors import InvalidArgumentError


def _to_decimal(value: Any) -> Decimal:
    """Coerce an amount to Decimal, going through str() to avoid float artifacts."""
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid order amount: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise InvalidArgumentError(f"Invalid order amount: {value!r}")

    # NaN and Infinity cannot be compared against zero or the email threshold
    if not amount.is_finite():
        raise InvalidArgumentError(f"Order amount must be finite: {value!r}")
    return amount


def _to_int(value: Any) -> int:
    """Accept ints and integral strings; reject bools and fractional values."""
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid order id: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidArgumentError(f"Invalid order id: {value!r}")


@dataclass
class Order:
    """
    A single business order.

    The caller owns the instance; OrderProcessor mutates is_processed in place.
    Callers must not share one Order across concurrent process_order calls.

    Attributes:
        id: Order identifier (meaningful only after persistence)
        customer_email: Destination address for the confirmation email
        total_amount: Signed order total
        is_processed: False until the order has been saved by the workflow
    """
    id: int = 0
    customer_email: str = ''
    total_amount: Decimal = Decimal('0')
    is_processed: bool = False

    def __post_init__(self):
        self.total_amount = _to_decimal(self.total_amount)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the JSON document stored by the order store.

        Returns:
            Dict with camelCase keys; totalAmount is a string to keep precision
        """
        return {
            'id': self.id,
            'customerEmail': self.customer_email,
            'totalAmount': str(self.total_amount),
            'isProcessed': self.is_processed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Order':
        """
        Build an Order from a JSON document or Lambda event payload.

        Accepts both camelCase and snake_case keys.

        Args:
            data: Order document

        Returns:
            Order: New unshared instance

        Raises:
            InvalidArgumentError: If data is not a dict or the amount is missing/invalid
        """
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Order payload must be an object, got {type(data).__name__}")

        amount = data.get('totalAmount', data.get('total_amount'))
        if amount is None:
            raise InvalidArgumentError("Order payload missing 'totalAmount'")

        raw_id = data.get('id', 0) or 0
        order_id = _to_int(raw_id)

        is_processed = data.get('isProcessed', data.get('is_processed', False))
        if not isinstance(is_processed, bool):
            raise InvalidArgumentError(f"isProcessed must be a boolean, got {is_processed!r}")

        return cls(
            id=order_id,
            customer_email=data.get('customerEmail', data.get('customer_email', '')) or '',
            total_amount=_to_decimal(amount),
            is_processed=is_processed
        )


@dataclass
class OperationResult:
    """
    Outcome of a single collaborator call made by the workflow.

    This explicit result type lets the workflow inspect failures instead of
    using exceptions for control flow.

    Attributes:
        success: Whether the call completed without raising
        error_message: Error description (if the call failed)
    """
    success: bool
    error_message: Optional[str] = None

    @classmethod
    def ok(cls) -> 'OperationResult':
        return cls(success=True)

    @classmethod
    def failed(cls, error: Exception) -> 'OperationResult':
        return cls(success=False, error_message=f"{error.__class__.__name__}: {error}")

    def __repr__(self) -> str:
        """Human-readable representation for logging."""
        if self.success:
            return "OperationResult(success=True)"
        else:
            return f"OperationResult(success=False, error={self.error_message})"
