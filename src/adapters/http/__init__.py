"""
Transport HTTP bas niveau.

- HttpxTransport : implementation httpx de IHttpTransport
"""

from src.adapters.http.transport import HttpxTransport

__all__ = ["HttpxTransport"]
