"""
AWS-backed collaborators for the order processing workflow.

This package contains the S3 order store, the SES notifier and the email
template loader they share.
"""

__all__ = ['order_store', 'notifier', 'templates']
