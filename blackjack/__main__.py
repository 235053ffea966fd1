"""Play one game of blackjack in the terminal."""

import logging
from random import Random

from config import AppConfig, config
from blackjack.cards import EmptyDeckError
from blackjack.console import ConsoleDecisions, ConsoleDisplay
from blackjack.game import BlackjackGame

logger = logging.getLogger(__name__)


def configure_logging(app_config: AppConfig) -> None:
    """Send log records to stderr, or to the configured file."""
    settings = app_config.logging
    logging.basicConfig(
        level=getattr(logging, settings.level, logging.WARNING),
        format=settings.format,
        filename=settings.file,
    )


def main(app_config: AppConfig | None = None) -> int:
    """
    Run a single game.

    Returns:
        Process exit status: 0 after any finished game, 1 if the game
        could not continue, 130 if the player interrupted it
    """
    app_config = app_config or config
    configure_logging(app_config)

    display = ConsoleDisplay(color=app_config.display.color)
    seed = app_config.game.seed
    rng = Random(seed) if seed is not None else None
    game = BlackjackGame(ConsoleDecisions(), display, rng=rng)

    display.render_welcome()
    try:
        outcome = game.play()
    except EmptyDeckError as exc:
        logger.exception("Game could not continue")
        display.render_error(f"The game cannot continue: {exc}")
        return 1
    except EOFError:
        logger.info("Input closed before the game finished")
        return 1
    except KeyboardInterrupt:
        return 130
    finally:
        display.reset()

    logger.info("Game finished: %s", outcome)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
