"""Interfaces/abstractions of the core.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
- Inverts dependencies: the core depends on abstractions, not sockets.
"""

from gravatar_client.core.interfaces.transport import SocketFactory, SocketLike

__all__ = ["SocketFactory", "SocketLike"]
