"""
Confirmation email templates.

Templates ship inside the services package (services/email_templates/) and
are read once per warm Lambda container.
"""

import logging
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / 'email_templates'


@lru_cache(maxsize=None)
def load_template(template_name: str) -> str:
    """
    Load a packaged email template.

    Args:
        template_name: Template file name (e.g., "order_confirmation.txt")

    Returns:
        str: Template content

    Raises:
        ValueError: If the template is not packaged
    """
    template_path = TEMPLATES_DIR / template_name
    try:
        return template_path.read_text(encoding='utf-8')
    except FileNotFoundError:
        logger.error(f"Template not found: {template_path}")
        raise ValueError(f"Template '{template_name}' not found")


def format_template(template: str, **variables) -> str:
    """
    Substitute {name} fields in a template.

    Raises:
        ValueError: If a field used by the template has no value

    Example:
        >>> format_template("Order #{order_id} confirmed", order_id=42)
        'Order #42 confirmed'
    """
    try:
        return template.format(**variables)
    except KeyError as e:
        missing_var = str(e).strip("'")
        raise ValueError(f"Missing required variable in template: {missing_var}")


def clear_cache() -> None:
    load_template.cache_clear()
