"""
S3-backed order store.

Each order is stored as a JSON document at
{ORDERS_KEY_PREFIX}{ENVIRONMENT}/{order_id}.json in ORDERS_S3_BUCKET.
"""

import json
import logging
import os
import uuid
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from domain.errors import OrderStoreError
from domain.models import Order

logger = logging.getLogger(__name__)

# Configure S3 client with timeouts to prevent infinite hangs
s3_config = Config(
    retries={
        'max_attempts': 1,  # 1 attempt total (no retries)
        'mode': 'standard'
    },
    connect_timeout=10,
    read_timeout=60
)

# Initialize S3 client at module level (reused across invocations)
s3_client = boto3.client('s3', config=s3_config)
logger.info("Order store S3 client initialized with timeouts: connect=10s, read=60s, max_attempts=1")

# Configuration from environment
ORDERS_BUCKET = os.environ.get('ORDERS_S3_BUCKET', '')
ORDERS_KEY_PREFIX = os.environ.get('ORDERS_KEY_PREFIX', 'orders/')
ENVIRONMENT = os.environ.get('ENVIRONMENT', 'dev')


def _error_code(error: ClientError) -> str:
    return error.response.get('Error', {}).get('Code', 'Unknown')


def _new_order_id() -> int:
    """Generate a positive 31-bit order id."""
    return (uuid.uuid4().int >> 97) or 1


class S3OrderStore:
    """
    Order store backed by an S3 bucket.

    connect() verifies the bucket once; is_connected stays True afterwards
    for the lifetime of the instance.
    """

    def __init__(self, bucket: Optional[str] = None, key_prefix: Optional[str] = None):
        self.bucket = bucket if bucket is not None else ORDERS_BUCKET
        self.key_prefix = key_prefix if key_prefix is not None else ORDERS_KEY_PREFIX
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    def connect(self) -> None:
        """
        Verify the orders bucket exists and is reachable.

        Raises:
            OrderStoreError: If the bucket is not configured, missing or inaccessible
        """
        if not self.bucket:
            raise OrderStoreError("ORDERS_S3_BUCKET environment variable not set")

        try:
            s3_client.head_bucket(Bucket=self.bucket)
        except ClientError as e:
            code = _error_code(e)
            logger.error(f"Cannot reach orders bucket {self.bucket}: error_code={code}")
            raise OrderStoreError(f"Orders bucket unavailable: {self.bucket} ({code})")

        self._connected = True
        logger.info(f"Connected to orders bucket: {self.bucket}")

    def object_key(self, order_id: int) -> str:
        return f"{self.key_prefix}{ENVIRONMENT}/{order_id}.json"

    def save(self, order: Order) -> None:
        """
        Persist the order as JSON.

        Orders that have not been persisted yet get an id once the upload
        succeeds; a failed save leaves the order untouched.

        Args:
            order: Order to save

        Raises:
            OrderStoreError: If the upload fails
        """
        order_id = order.id if order.id > 0 else _new_order_id()
        key = self.object_key(order_id)
        document = order.to_dict()
        document['id'] = order_id
        body = json.dumps(document)

        try:
            s3_client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body.encode('utf-8'),
                ContentType='application/json'
            )
        except ClientError as e:
            code = _error_code(e)
            logger.error(
                f"Failed to save order: bucket={self.bucket}, key={key}, error_code={code}"
            )
            raise OrderStoreError(f"Failed to save order {order_id} ({code})")

        # Only a stored order gets its id
        if order.id != order_id:
            logger.info(f"Assigned order id: {order_id}")
            order.id = order_id

        logger.info(f"Saved order {order_id} to s3://{self.bucket}/{key}")

    def get_by_id(self, order_id: int) -> Order:
        """
        Fetch a saved order.

        Args:
            order_id: Order identifier

        Returns:
            Order: The stored order

        Raises:
            OrderStoreError: If the order does not exist or cannot be read
        """
        key = self.object_key(order_id)

        try:
            response = s3_client.get_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            code = _error_code(e)
            if code == 'NoSuchKey':
                logger.error(f"Order not found: s3://{self.bucket}/{key}")
                raise OrderStoreError(f"Order not found: {order_id}")
            logger.error(f"Failed to fetch order s3://{self.bucket}/{key}: {e}")
            raise OrderStoreError(f"Failed to fetch order {order_id} ({code})")

        data = json.loads(response['Body'].read().decode('utf-8'))
        return Order.from_dict(data)
