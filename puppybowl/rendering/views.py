"""HTML views for the roster. Each call fully replaces the container content."""

from html import escape
from typing import Sequence

from puppybowl.models.player import Player
from puppybowl.rendering.container import Container

EMPTY_ROSTER_NOTICE = "<p>No players available</p>"
UNASSIGNED_TEAM = "Unassigned"


def _image(player: Player) -> str:
    return f'<img src="{escape(player.image_url or "")}" alt="{escape(player.name)}">'


def _player_card(player: Player) -> str:
    return f"""
      <div class="player-card">
        <h2>{escape(player.name)}</h2>
        <p>ID: {player.id}</p>
        {_image(player)}
        <button class="details-btn" data-player-id="{player.id}">See Details</button>
        <button class="remove-btn" data-player-id="{player.id}">Remove from Roster</button>
      </div>
    """


def render_all_players(container: Container, players: Sequence[Player]) -> None:
    """Shows one card per player, or a notice when the roster is empty."""
    if not players:
        container.replace(EMPTY_ROSTER_NOTICE)
        return
    container.replace("".join(_player_card(player) for player in players))


def render_single_player(container: Container, player: Player) -> None:
    """Shows the detail card of a single player."""
    team = player.team or UNASSIGNED_TEAM
    container.replace(
        f"""
    <div class="player-card">
      <h2>{escape(player.name)}</h2>
      <p>ID: {player.id}</p>
      <p>Breed: {escape(player.breed or "")}</p>
      {_image(player)}
      <p>Team: {escape(team)}</p>
      <button class="back-btn">Back to All Players</button>
    </div>
  """
    )
