from loguru import logger

from puppybowl.client.roster_client import RosterAPIError, RosterClient
from puppybowl.rendering.container import Container, FormSubmission
from puppybowl.rendering.views import render_all_players

NEW_PLAYER_FORM_ID = "new-player-form"

NEW_PLAYER_FORM = f"""
    <form id="{NEW_PLAYER_FORM_ID}">
      <label for="name">Name:</label>
      <input type="text" id="name" name="name">
      <label for="breed">Breed:</label>
      <input type="text" id="breed" name="breed">
      <button type="submit">Add New Player</button>
    </form>
  """


def render_new_player_form(container: Container, roster: RosterClient) -> None:
    """Shows the creation form and binds its submit handler.

    A successful submission creates the player and re-renders the roster.
    A failed one is logged and leaves the form in place for another try.
    """
    container.replace(NEW_PLAYER_FORM)

    async def handle_submit(event: FormSubmission) -> None:
        event.prevent_default()
        draft = {"name": event.value("name"), "breed": event.value("breed")}
        try:
            await roster.add_new_player(draft)
            updated_players = await roster.fetch_all_players()
        except RosterAPIError as e:
            logger.error(f"Error adding new player: {e}")
            return
        render_all_players(container, updated_players)

    container.on_submit(NEW_PLAYER_FORM_ID, handle_submit)
