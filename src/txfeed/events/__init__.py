"""
Events module for transaction messaging.
"""

from txfeed.events.transaction_events import PublishedTransaction, Transaction

__all__ = ["PublishedTransaction", "Transaction"]
