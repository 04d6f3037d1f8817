"""
Tests for domain models (data structures).
"""

import pytest
import sys
import os
from decimal import Decimal

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from domain.errors import InvalidArgumentError
from domain.models import Order, OperationResult


class TestOrder:
    """Test Order dataclass."""

    def test_order_defaults(self):
        """Test a new order is unpersisted and unprocessed."""
        order = Order()

        assert order.id == 0
        assert order.customer_email == ''
        assert order.total_amount == Decimal('0')
        assert order.is_processed is False

    def test_amount_coerced_to_decimal(self):
        """Test int, float and string amounts become Decimal."""
        assert Order(total_amount=150).total_amount == Decimal('150')
        assert Order(total_amount=19.99).total_amount == Decimal('19.99')
        assert Order(total_amount='-50.25').total_amount == Decimal('-50.25')

    def test_invalid_amount_rejected(self):
        """Test non-numeric amounts raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="Invalid order amount"):
            Order(total_amount='abc')

        with pytest.raises(InvalidArgumentError):
            Order(total_amount=None)

    @pytest.mark.parametrize('amount', ['NaN', 'sNaN', 'Infinity', '-Infinity', float('inf'), Decimal('NaN')])
    def test_non_finite_amount_rejected(self, amount):
        """Test NaN and Infinity amounts raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="must be finite"):
            Order(total_amount=amount)

    def test_invalid_argument_is_value_error(self):
        """Test InvalidArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Order(total_amount='not-a-number')

    def test_to_dict(self):
        """Test JSON document keeps amount precision as a string."""
        order = Order(id=7, customer_email="test@mail.com", total_amount=Decimal('150.10'))

        assert order.to_dict() == {
            'id': 7,
            'customerEmail': 'test@mail.com',
            'totalAmount': '150.10',
            'isProcessed': False
        }

    def test_from_dict_camel_case(self):
        """Test building an order from a stored document."""
        order = Order.from_dict({
            'id': 3,
            'customerEmail': 'customer@mail.com',
            'totalAmount': '99.50',
            'isProcessed': True
        })

        assert order.id == 3
        assert order.customer_email == 'customer@mail.com'
        assert order.total_amount == Decimal('99.50')
        assert order.is_processed is True

    def test_from_dict_snake_case(self):
        """Test snake_case keys are accepted."""
        order = Order.from_dict({'customer_email': 'a@b.com', 'total_amount': 10})

        assert order.id == 0
        assert order.customer_email == 'a@b.com'
        assert order.total_amount == Decimal('10')
        assert order.is_processed is False

    def test_from_dict_missing_amount(self):
        """Test a payload without an amount is rejected."""
        with pytest.raises(InvalidArgumentError, match="totalAmount"):
            Order.from_dict({'customerEmail': 'a@b.com'})

    def test_from_dict_invalid_id(self):
        """Test a non-integer id is rejected."""
        with pytest.raises(InvalidArgumentError, match="Invalid order id"):
            Order.from_dict({'id': 'abc', 'totalAmount': 10})

    @pytest.mark.parametrize('raw_id', [1.9, True, '1.5', [1]])
    def test_from_dict_non_integer_id(self, raw_id):
        """Test fractional, boolean and non-scalar ids are rejected, not truncated."""
        with pytest.raises(InvalidArgumentError, match="Invalid order id"):
            Order.from_dict({'id': raw_id, 'totalAmount': 10})

    def test_from_dict_integral_string_id(self):
        assert Order.from_dict({'id': '12', 'totalAmount': 10}).id == 12

    @pytest.mark.parametrize('flag', ['false', 'true', 0, 1])
    def test_from_dict_non_boolean_processed_flag(self, flag):
        """Test string and integer processed flags are rejected."""
        with pytest.raises(InvalidArgumentError, match="isProcessed must be a boolean"):
            Order.from_dict({'totalAmount': 10, 'isProcessed': flag})

    def test_from_dict_not_a_dict(self):
        """Test a non-object payload is rejected."""
        with pytest.raises(InvalidArgumentError, match="must be an object"):
            Order.from_dict(['totalAmount', 10])


class TestOperationResult:
    """Test OperationResult dataclass."""

    def test_ok(self):
        result = OperationResult.ok()

        assert result.success is True
        assert result.error_message is None
        assert repr(result) == "OperationResult(success=True)"

    def test_failed(self):
        """Test failure captures the exception type and message."""
        result = OperationResult.failed(RuntimeError("disk full"))

        assert result.success is False
        assert result.error_message == "RuntimeError: disk full"
        assert "success=False" in repr(result)
        assert "disk full" in repr(result)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
