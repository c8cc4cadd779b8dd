"""SocketLabsClient – validate, build, post and classify a single send."""
from __future__ import annotations

import platform
from typing import Any

from socketlabs_client import __version__
from socketlabs_client.config import DEFAULT_ENDPOINT_URL, ClientSettings, EnvSettingsLoader
from socketlabs_client.core import (
    DEFAULT_MAX_RECIPIENTS,
    InjectionRequestFactory,
    SendResponse,
    SendValidator,
    parse,
    transport_failure,
)
from socketlabs_client.core.validator import coerce_server_id
from socketlabs_client.errors import MessageBuildError, SendError, TransportError
from socketlabs_client.message import Message
from socketlabs_client.observability.logging import get_logger
from socketlabs_client.transport import HttpxTransport, Transport

__all__ = ["SocketLabsClient"]

_log = get_logger(__name__)


def _user_agent() -> str:
    return (
        f"socketlabs-python/{__version__} "
        f"({platform.python_implementation()}/{platform.python_version()})"
    )


class SocketLabsClient:
    """Send basic and bulk messages through the SocketLabs Injection API.

    Usage::

        client = SocketLabsClient(12345, "api-key")
        message = BasicMessage(
            subject="Hi",
            from_address=EmailAddress("a@example.com"),
            to=[EmailAddress("b@example.com")],
            text_body="body",
        )
        try:
            response = await client.send(message)
        except SendError as exc:
            print(exc.response.result)

    Configuration is fixed at construction. The proxy applies only to this
    client's transport.
    """

    def __init__(
        self,
        server_id: Any,
        api_key: Any,
        *,
        endpoint_url: str | None = None,
        proxy_url: str | None = None,
        max_recipients: int = DEFAULT_MAX_RECIPIENTS,
        transport: Transport | None = None,
        timeout: float | None = None,
    ) -> None:
        self._server_id = server_id
        self._api_key = api_key
        self._endpoint_url = endpoint_url or DEFAULT_ENDPOINT_URL
        self._max_recipients = max_recipients
        self._transport: Transport = transport or HttpxTransport(proxy_url=proxy_url, timeout=timeout)
        self._user_agent = _user_agent()

    @classmethod
    def from_settings(cls, settings: ClientSettings, *, transport: Transport | None = None) -> "SocketLabsClient":
        return cls(
            settings.server_id,
            settings.api_key,
            endpoint_url=settings.endpoint_url,
            proxy_url=settings.proxy_url,
            max_recipients=settings.max_recipients,
            transport=transport,
            timeout=settings.timeout,
        )

    @classmethod
    def from_env(cls, *, transport: Transport | None = None) -> "SocketLabsClient":
        """Build a client from ``SOCKETLABS_*`` environment variables."""
        return cls.from_settings(EnvSettingsLoader().load(), transport=transport)

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def server_id(self) -> Any:
        return self._server_id

    def __repr__(self) -> str:
        return f"SocketLabsClient(server_id={self._server_id!r}, endpoint_url={self._endpoint_url!r})"

    async def send(self, message: Message) -> SendResponse:
        """Send ``message`` and return the ``Success`` response.

        Raises
        ------
        SendError
            For any other outcome: invalid credentials, a message that fails
            validation, a transport failure (``UnknownError``) or a
            rejection from the Injection API.
        """
        validator = SendValidator(self._max_recipients)
        log = _log.bind(server_id=self._server_id, message_type=str(getattr(message, "message_type", None)))

        credentials = validator.validate_credentials(self._server_id, self._api_key)
        if not credentials.ok:
            log.warning("socketlabs.send.invalid_credentials", result=credentials.result.value)
            raise SendError(SendResponse.from_validation(credentials))

        try:
            wire = await InjectionRequestFactory(validator).generate_request(message)
        except MessageBuildError as exc:
            log.warning(
                "socketlabs.send.invalid_message",
                result=exc.validation.result.value,
                reason=exc.validation.response_message,
            )
            raise SendError(SendResponse.from_validation(exc.validation)) from exc

        payload = {
            "serverId": coerce_server_id(self._server_id),
            "apiKey": self._api_key,
            "messages": [wire],
        }
        headers = {"User-Agent": self._user_agent}

        log.debug("socketlabs.send.posting", endpoint=self._endpoint_url, recipients=len(wire["to"]))
        try:
            raw = await self._transport.post_json(self._endpoint_url, payload, headers)
        except TransportError as exc:
            log.warning("socketlabs.send.transport_failed", endpoint=self._endpoint_url, error=exc.message)
            raise SendError(transport_failure(exc.message), cause=exc) from exc

        response = parse(raw)
        log.info(
            "socketlabs.send.completed",
            status_code=raw.status_code,
            result=response.result.value,
            transaction_receipt=response.transaction_receipt,
        )
        if not response.succeeded:
            raise SendError(response)
        return response
