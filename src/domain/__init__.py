"""
Domain layer for order processing business logic.

This layer contains:
- Data models (Order record, explicit result type)
- Collaborator contracts (order store, notifier)
- Business logic (order processing workflow)
"""
