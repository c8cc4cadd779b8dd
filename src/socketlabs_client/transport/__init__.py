"""Transport – the HTTP collaborator behind the client facade."""
from socketlabs_client.transport.base import Transport, TransportResponse
from socketlabs_client.transport.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport", "Transport", "TransportResponse"]
