"""HTTP adapter – httpx-backed flag transport."""
from phlag_client.adapters.http.client import HttpxFlagTransport

__all__ = ["HttpxFlagTransport"]
