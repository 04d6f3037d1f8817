"""
AWS Lambda handlers for order processing.

Thin orchestration layer that delegates to OrderProcessor.
"""

import json
import logging
import os
from typing import Dict, Any

from domain.errors import InvalidArgumentError, OrderStoreError
from domain.models import Order
from domain.order_processor import OrderProcessor
from services.notifier import SesNotifier
from services.order_store import S3OrderStore

# Configure logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

# Add console handler for local testing (AWS Lambda provides handlers automatically)
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    formatter = logging.Formatter('%(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

ENVIRONMENT = os.environ.get('ENVIRONMENT', 'dev')

# Initialize collaborators once at module level (store connection reused across invocations)
order_store = S3OrderStore()
notifier = SesNotifier()
order_processor = OrderProcessor(order_store, notifier)


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body)
    }


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Process a single order.

    Expected event format:
    {
        "order": {
            "id": 0,
            "customerEmail": "customer@example.com",
            "totalAmount": "150.00"
        }
    }

    The order document may also be passed at the top level of the event.
    """
    logger.info(f"Environment: {ENVIRONMENT}")

    try:
        payload = event.get('order', event) if isinstance(event, dict) else None
        if not payload:
            raise InvalidArgumentError("order is required")

        order = Order.from_dict(payload)
        processed = order_processor.process_order(order)

        logger.info(f"Order {order.id} result: processed={processed}")

        return _response(200, {
            'processed': processed,
            'orderId': order.id,
            'isProcessed': order.is_processed
        })

    except InvalidArgumentError as e:
        logger.error(f"Validation error: {str(e)}")
        return _response(400, {'error': str(e)})

    except Exception as e:
        logger.error(f"Error processing order: {str(e)}", exc_info=True)
        return _response(500, {
            'error': 'Internal server error',
            'message': str(e)
        })


def get_order(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Fetch a saved order by id.

    Expected event format: {"orderId": 123}
    """
    raw_id = event.get('orderId')
    try:
        order_id = int(raw_id)
    except (TypeError, ValueError):
        return _response(400, {'error': 'orderId must be an integer'})

    try:
        order = order_store.get_by_id(order_id)
    except OrderStoreError as e:
        logger.warning(f"Order lookup failed: {str(e)}")
        return _response(404, {'error': str(e)})

    return _response(200, order.to_dict())


def health_check(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Simple health check endpoint for monitoring.
    """
    return _response(200, {
        'status': 'healthy',
        'environment': ENVIRONMENT,
        'storeConfigured': bool(order_store.bucket),
        'notifierConfigured': bool(notifier.sender)
    })
