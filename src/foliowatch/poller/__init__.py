"""Remote progress polling."""

from foliowatch.poller._retrying_transport import RetryingTransport
from foliowatch.poller.client import ProgressClient

__all__ = ["ProgressClient", "RetryingTransport"]
