# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "> "


def _default_write(text: str) -> None:
    print(text, end="", flush=True)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> None:
    """
    Line-at-a-time REPL around the command registry.

    Writes the prompt, reads one line, dispatches it, writes every output line
    (newline-terminated). Ends on `quit`, EOF or Ctrl+C.
    Malformed commands are reported and the loop keeps going.
    """
    prompt = str(getattr(state.settings, "prompt", DEFAULT_PROMPT))
    read_line = read_line or input
    write = write or _default_write

    logger.info("Console connector started.")

    while True:
        write(prompt)
        try:
            line = read_line()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("\n")
            break

        try:
            result = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed. line=%r", line)
            write("Internal error while handling a command.\n")
            continue

        for out in result.lines:
            write(out + "\n")

        if result.error is not None:
            logger.warning("Command failed: %s", result.error)
            write(f"Error: {result.error}\n")

        if result.quit:
            logger.info("Console quit command received.")
            break

    logger.info("Console connector finished.")
