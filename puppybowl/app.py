"""Bootstrap and control wiring for the roster page.

Importing this module never starts the app; ``main.py`` runs ``init`` when
executed as a script. Tests and other callers use the functions directly.
"""

from typing import Optional

from loguru import logger

from puppybowl.client.roster_client import RosterClient
from puppybowl.rendering.container import Container
from puppybowl.rendering.forms import render_new_player_form
from puppybowl.rendering.views import render_all_players, render_single_player

DETAILS_CONTROL = "details-btn"
REMOVE_CONTROL = "remove-btn"
BACK_CONTROL = "back-btn"


async def init(roster: RosterClient, container: Container) -> Container:
    """Fetches the roster, renders it, then installs the creation form."""
    players = await roster.fetch_all_players()
    render_all_players(container, players)

    render_new_player_form(container, roster)
    return container


async def show_player_details(
    roster: RosterClient, container: Container, player_id: int
) -> None:
    player = await roster.fetch_single_player(player_id)
    if player is None:
        logger.warning(f"Player #{player_id} not found; keeping current view")
        return
    render_single_player(container, player)


async def remove_player_and_refresh(
    roster: RosterClient, container: Container, player_id: int
) -> None:
    await roster.remove_player(player_id)
    render_all_players(container, await roster.fetch_all_players())


async def back_to_all_players(roster: RosterClient, container: Container) -> None:
    render_all_players(container, await roster.fetch_all_players())


async def dispatch_control(
    roster: RosterClient,
    container: Container,
    css_class: str,
    player_id: Optional[int] = None,
) -> None:
    """Runs the transition for an activated card control.

    Raises:
        ValueError: for an unknown control, or a player control without an id.
    """
    logger.debug(f"Control activated: {css_class} (player_id={player_id})")
    if css_class == BACK_CONTROL:
        await back_to_all_players(roster, container)
        return
    if css_class not in (DETAILS_CONTROL, REMOVE_CONTROL):
        raise ValueError(f"Unknown control: {css_class}")
    if player_id is None:
        raise ValueError(f"Control {css_class} requires a player id")
    if css_class == DETAILS_CONTROL:
        await show_player_details(roster, container, player_id)
    else:
        await remove_player_and_refresh(roster, container, player_id)


__all__ = [
    "init",
    "show_player_details",
    "remove_player_and_refresh",
    "back_to_all_players",
    "dispatch_control",
]
