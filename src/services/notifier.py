"""
SES-backed customer notifier.

Sends order confirmation emails rendered from the order_confirmation.txt
template. The template's first line is the subject, the rest is the body.
"""

import logging
import os
from typing import Optional, Tuple

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from domain.errors import NotificationError
from services import templates as template_service

logger = logging.getLogger(__name__)

CONFIRMATION_TEMPLATE = 'order_confirmation.txt'

ses_config = Config(
    retries={
        'max_attempts': 1,  # 1 attempt total (no retries)
        'mode': 'standard'
    },
    connect_timeout=10,
    read_timeout=30
)

region = os.environ.get('AWS_REGION', os.environ.get('AWS_DEFAULT_REGION', 'us-west-2'))

# Module-level client (reused across invocations)
ses_client = boto3.client('ses', region_name=region, config=ses_config)

NOTIFICATION_SENDER = os.environ.get('NOTIFICATION_SENDER', '')


def render_confirmation(order_id: int) -> Tuple[str, str]:
    """
    Render the confirmation email for an order.

    Returns:
        Tuple of (subject, body)
    """
    template = template_service.load_template(CONFIRMATION_TEMPLATE)
    rendered = template_service.format_template(template, order_id=order_id)

    subject, _, body = rendered.partition('\n')
    return subject.strip(), body.strip()


class SesNotifier:
    """Sends order confirmations through Amazon SES."""

    def __init__(self, sender: Optional[str] = None):
        self.sender = sender if sender is not None else NOTIFICATION_SENDER

    def send_order_confirmation(self, customer_email: str, order_id: int) -> None:
        """
        Email an order confirmation to the customer.

        Args:
            customer_email: Recipient address
            order_id: Persisted order identifier

        Raises:
            NotificationError: If the sender is not configured, the address is
                invalid, or SES rejects the message
        """
        if not self.sender:
            raise NotificationError("NOTIFICATION_SENDER environment variable not set")
        if not customer_email or '@' not in customer_email:
            raise NotificationError(f"Invalid customer email: {customer_email!r}")

        subject, body = render_confirmation(order_id)

        try:
            response = ses_client.send_email(
                Source=self.sender,
                Destination={'ToAddresses': [customer_email]},
                Message={
                    'Subject': {'Data': subject, 'Charset': 'UTF-8'},
                    'Body': {'Text': {'Data': body, 'Charset': 'UTF-8'}}
                }
            )
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            error_message = e.response.get('Error', {}).get('Message', str(e))
            logger.error(
                f"Failed to send confirmation for order {order_id}: "
                f"error_code={error_code}, error_message={error_message}"
            )
            raise NotificationError(f"SES rejected confirmation for order {order_id} ({error_code})")

        logger.info(
            f"Sent confirmation for order {order_id} to {customer_email}: "
            f"message_id={response.get('MessageId')}"
        )
