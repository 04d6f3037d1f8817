"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest

# Add src to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

# Set up test environment variables before importing any modules
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-west-2')
os.environ.setdefault('ENVIRONMENT', 'test')
os.environ.setdefault('ORDERS_S3_BUCKET', 'orders-123456789012-test')
os.environ.setdefault('NOTIFICATION_SENDER', 'orders@example.com')


@pytest.fixture(autouse=True)
def clear_template_cache():
    """Start every test with an empty template cache."""
    from services import templates
    templates.clear_cache()
    yield
