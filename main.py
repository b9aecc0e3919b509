import sys
import asyncio
from pathlib import Path

# --- Settings/Logging ---
from puppybowl.logging.setup import setup_logging
from puppybowl.config.settings import settings

setup_logging()

from loguru import logger

from puppybowl.app import init
from puppybowl.client.roster_client import RosterClient
from puppybowl.rendering.container import Container, render_document

from rich import print
from rich.panel import Panel
from rich.syntax import Syntax


async def main() -> None:
    """Renders the roster page once against the live API."""
    logger.info(f"Starting Puppy Bowl roster client for {settings.api_url}")

    roster = RosterClient()
    container = Container()
    try:
        await init(roster, container)

        print(
            Panel(
                Syntax(container.html.strip(), "html", word_wrap=True),
                title=f"<{container.selector}>",
            )
        )

        if settings.render_output:
            output_path = Path(settings.render_output)
            try:
                output_path.write_text(render_document(container), encoding="utf-8")
                logger.success(f"Saved rendered page to {output_path}")
            except OSError as e:
                logger.error(f"Failed to write rendered page to {output_path}: {e}")
    finally:
        await roster.close()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
