"""Async client for the Dekigokoro currency API."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import DekigokoroConfig, get_settings
from .exceptions import (
    DekigokoroDecodeError,
    DekigokoroTransportError,
    InvalidArgumentError,
    error_for_status,
)
from .models import (
    ChangeBalanceRequest,
    PlayerCurrency,
    PlayerCurrencyRanked,
    SetBalanceRequest,
)
from .paths import currency_path, rankings_path, require_int

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_LEADERBOARD_LIMIT = 100

_currency_adapter = TypeAdapter(PlayerCurrency)
_leaderboard_adapter = TypeAdapter(list[PlayerCurrencyRanked])


class DekigokoroClient:
    """Async HTTP client that owns one authorized transport for its lifetime."""

    def __init__(
        self,
        token: str,
        config: DekigokoroConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not isinstance(token, str) or not token.strip():
            raise InvalidArgumentError("Token must not be empty or whitespace.")

        self._token = token
        self.config = config or DekigokoroConfig()

        limits = httpx.Limits(
            max_connections=self.config.max_connections,
            max_keepalive_connections=self.config.max_keepalive_connections,
        )
        # The API expects the raw token, no "Bearer" scheme
        headers = {
            "Authorization": self._token,
            "User-Agent": self.config.user_agent,
        }
        self._client: httpx.AsyncClient | None = httpx.AsyncClient(
            base_url=self.config.base_url,
            headers=headers,
            timeout=self.config.timeout_seconds,
            limits=limits,
            transport=transport,
        )

        logger.info(f"Initialized DekigokoroClient (base_url={self.config.base_url})")

    async def __aenter__(self) -> DekigokoroClient:
        if self.closed:
            raise RuntimeError("DekigokoroClient is closed")
        return self

    async def __aexit__(
        self,
        exc_type: type | None,
        exc_val: Exception | None,
        exc_tb: Any,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the transport. Safe to call more than once."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Closed DekigokoroClient")

    @property
    def closed(self) -> bool:
        return self._client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("DekigokoroClient is closed")
        return self._client

    async def _request(
        self,
        method: str,
        endpoint: str,
        body: BaseModel | None = None,
        params: dict[str, Any] | None = None,
    ) -> str:
        """Send one request and return the raw response text.

        Args:
            method: HTTP verb
            endpoint: Path relative to the configured base URL
            body: Request model, serialized to JSON for write verbs
            params: Query parameters

        Raises:
            InvalidArgumentError: A body was given for a GET
            DekigokoroTransportError: The request never got a response
            DekigokoroHTTPError: The response status was not 2xx
        """
        method = method.upper()
        headers: dict[str, str] = {}
        content: str | None = None

        if body is not None:
            if method == "GET":
                raise InvalidArgumentError("GET requests cannot carry a body.")
            content = body.model_dump_json(by_alias=True)
            headers["Content-Type"] = "application/json"

        logger.debug(f"{method} {endpoint} params={params} body={content}")

        try:
            async with self.client.stream(
                method,
                endpoint,
                params=params,
                content=content,
                headers=headers,
            ) as response:
                await response.aread()
        except httpx.RequestError as e:
            logger.error(f"Network error on {method} {endpoint}: {e}")
            raise DekigokoroTransportError(
                f"{method} {endpoint} failed: {e}"
            ) from e

        text = response.text

        if not response.is_success:
            logger.error(
                f"{method} {endpoint} returned {response.status_code}: {text}"
            )
            error_cls = error_for_status(response.status_code)
            raise error_cls(
                f"{method} {endpoint} returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=text,
            )

        return text

    async def _request_model(
        self,
        method: str,
        endpoint: str,
        adapter: TypeAdapter[T],
        body: BaseModel | None = None,
        params: dict[str, Any] | None = None,
    ) -> T:
        text = await self._request(method, endpoint, body=body, params=params)
        try:
            return adapter.validate_json(text)
        except ValidationError as e:
            raise DekigokoroDecodeError(
                f"Could not decode response from {method} {endpoint}: {e}",
                body=text,
            ) from e

    async def get_player_currency(
        self, player_id: int, sub_key: str | None = None
    ) -> PlayerCurrency:
        """Fetch the current currency balance for a player."""
        return await self._request_model(
            "GET", currency_path(player_id, sub_key), _currency_adapter
        )

    async def set_player_currency(
        self, player_id: int, new_balance: int, sub_key: str | None = None
    ) -> PlayerCurrency:
        """Set the currency balance for a player."""
        endpoint = currency_path(player_id, sub_key)
        body = _build_body(SetBalanceRequest, balance=new_balance)

        logger.info(f"Setting balance for player {player_id} to {new_balance}")
        return await self._request_model("PUT", endpoint, _currency_adapter, body=body)

    async def change_player_currency(
        self, player_id: int, increment: int, sub_key: str | None = None
    ) -> PlayerCurrency:
        """Increment or decrement a player's balance.

        Args:
            player_id: ID of the player
            increment: Amount to add; negative to subtract
            sub_key: Optional currency sub key
        """
        endpoint = currency_path(player_id, sub_key)
        body = _build_body(ChangeBalanceRequest, increment=increment)

        logger.info(f"Changing balance for player {player_id} by {increment}")
        return await self._request_model(
            "PATCH", endpoint, _currency_adapter, body=body
        )

    async def get_player_currency_leaderboard(
        self,
        offset: int = 0,
        limit: int = MAX_LEADERBOARD_LIMIT,
        sub_key: str | None = None,
    ) -> list[PlayerCurrencyRanked]:
        """Fetch the currency leaderboard, ordered by balance.

        Args:
            offset: Position to get results after. Must be 0 or more.
            limit: Maximum rows to return, between 1 and 100.
            sub_key: Optional currency sub key
        """
        require_int("Offset", offset)
        require_int("Limit", limit)
        if limit < 1:
            raise InvalidArgumentError("Limit cannot be below 1.")
        if limit > MAX_LEADERBOARD_LIMIT:
            raise InvalidArgumentError(
                f"Limit cannot be over {MAX_LEADERBOARD_LIMIT}."
            )
        if offset < 0:
            raise InvalidArgumentError("Offset cannot be below 0.")

        params = {"offset": offset, "limit": limit}
        return await self._request_model(
            "GET", rankings_path(sub_key), _leaderboard_adapter, params=params
        )


def _build_body(model: type[BaseModel], **fields: Any) -> BaseModel:
    try:
        return model(**fields)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid {model.__name__}: {e}") from e


def create_dekigokoro_client(
    token: str | None = None,
    config: DekigokoroConfig | None = None,
) -> DekigokoroClient:
    """Create a DekigokoroClient, reading missing values from settings."""
    if token is None or config is None:
        settings = get_settings()
        token = token if token is not None else settings.token
        config = config or settings.client_config()
    return DekigokoroClient(token=token, config=config)
