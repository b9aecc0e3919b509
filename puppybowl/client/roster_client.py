from typing import Any, Dict, List, Optional, Union

import httpx
from loguru import logger

from puppybowl.config.settings import settings
from puppybowl.models.player import NewPlayer, Player
from puppybowl.models.responses import (
    NewPlayerResponse,
    PlayerListResponse,
    PlayerResponse,
    unwrap_envelope,
)


class RosterAPIError(Exception):
    """Base exception for roster API failures."""

    pass


class FetchError(RosterAPIError):
    """Exception raised when reading players fails."""

    pass


class FetchAllError(FetchError):
    """Exception raised when the full roster cannot be fetched."""

    def __init__(self, message: str = "Failed to fetch all players"):
        super().__init__(message)


class FetchOneError(FetchError):
    """Exception raised when a single player cannot be fetched."""

    def __init__(self, player_id: Any):
        self.player_id = player_id
        super().__init__(f"Failed to fetch player #{player_id}")


class CreateError(RosterAPIError):
    """Exception raised when the API does not accept a new player."""

    def __init__(self, message: str = "Failed to add new player"):
        super().__init__(message)


class RemoveError(RosterAPIError):
    """Exception raised when a player cannot be removed."""

    def __init__(self, player_id: Any):
        self.player_id = player_id
        super().__init__(f"Failed to remove player #{player_id}")


class RosterClient:
    """Async client for the Puppy Bowl players endpoints.

    Every operation logs a diagnostic and re-raises on failure. Nothing is
    retried and nothing is cached; callers re-fetch after mutations.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
    ):
        self.client = client or httpx.AsyncClient(
            base_url=base_url or settings.api_url,
            timeout=httpx.Timeout(settings.request_timeout),
            follow_redirects=True,
        )

    async def _make_request(
        self,
        method: str,
        url: str,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Sends a single request and raises for non-success statuses."""
        logger.debug(f"Making request: {method} {url}")
        headers = {"Content-Type": "application/json"} if json_data is not None else None
        response = await self.client.request(
            method, url, headers=headers, json=json_data
        )
        response.raise_for_status()  # Raises HTTPStatusError for 4xx/5xx
        logger.debug(f"Request successful: {response.status_code} for {method} {url}")
        return response

    async def fetch_all_players(self) -> List[Player]:
        """Fetches the full roster.

        Returns:
            The players in the order the API lists them.

        Raises:
            FetchAllError: on a non-success status, a transport failure or an
                undecodable body.
        """
        try:
            response = await self._make_request("GET", "/players")
            body = PlayerListResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Uh oh, trouble fetching all players! {e}")
            raise FetchAllError() from e
        logger.info(f"Fetched {len(body.players)} players")
        return body.players

    async def fetch_single_player(self, player_id: int) -> Optional[Player]:
        """Fetches one player by id.

        Returns None when the API answers successfully but carries no player.

        Raises:
            FetchOneError: on a non-success status, a transport failure or an
                undecodable body.
        """
        try:
            response = await self._make_request("GET", f"/players/{player_id}")
            body = PlayerResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Oh no, trouble fetching player #{player_id}! {e}")
            raise FetchOneError(player_id) from e
        if body.player is None:
            logger.warning(f"API returned no data for player #{player_id}")
        return body.player

    async def add_new_player(
        self, draft: Union[NewPlayer, Dict[str, Any]]
    ) -> NewPlayerResponse:
        """Creates a player.

        Args:
            draft: A NewPlayer or a mapping with at least ``name`` and ``breed``.

        Returns:
            The response envelope as sent by the API. The created player is
            available through ``created_player``.

        Raises:
            CreateError: when the draft is invalid or the API rejects it.
        """
        try:
            if not isinstance(draft, NewPlayer):
                draft = NewPlayer.model_validate(draft)
            response = await self._make_request(
                "POST", "/players", json_data=draft.to_payload()
            )
            body = NewPlayerResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Oops, something went wrong with adding that player! {e}")
            raise CreateError() from e
        if not body.success:
            logger.error(
                f"Oops, something went wrong with adding that player! {body.error}"
            )
            raise CreateError(f"Failed to add new player: {body.error}")
        created = body.created_player
        logger.info(f"Added new player #{created.id if created else '?'}")
        return body

    async def remove_player(self, player_id: int) -> None:
        """Deletes a player from the roster.

        Raises:
            RemoveError: on a non-success status, a failure envelope or a
                transport failure.
        """
        try:
            response = await self._make_request("DELETE", f"/players/{player_id}")
            # Some deployments answer 200 with a failure envelope
            content_type = response.headers.get("content-type", "")
            if response.content and content_type.startswith("application/json"):
                unwrap_envelope(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                f"Whoops, trouble removing player #{player_id} from the roster! {e}"
            )
            raise RemoveError(player_id) from e
        logger.info(f"Removed player #{player_id}")

    async def close(self):
        """Closes the underlying HTTP client."""
        await self.client.aclose()
        logger.info("Closed roster HTTP client")
