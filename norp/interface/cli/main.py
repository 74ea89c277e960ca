import argparse
import sys
from contextlib import nullcontext
from pathlib import Path
from typing import Callable, List, Optional

from dependency_injector import providers

from norp.application.commands.parser import CommandParser
from norp.application.ports.logger import ILogger
from norp.application.session import Session
from norp.application.use_cases.execute_command import CommandExecutor
from norp.container import Container, container as default_container
from norp.domain.errors import NorpError

PROMPT = "> "


def _report_fatal(error: NorpError, logger: Optional[ILogger] = None) -> int:
    if logger is not None:
        logger.error(f"{type(error).__name__}: {error}")
    print(f"Application error: {error}", file=sys.stderr)
    return 1


def run_loop(
    session: Session,
    parser: CommandParser,
    executor: CommandExecutor,
    logger: ILogger,
    read_line: Callable[[str], str] = input,
) -> int:
    """
    Reads, parses, executes and prints until the player quits or input ends.
    Returns the process exit status.
    """
    while True:
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            logger.info("Input closed, ending session.")
            return 0

        try:
            command = parser.parse(line)
            logger.debug(f"Parsed {line!r} as {type(command).__name__}{command.args}.")
            result = executor.execute(command, session)
        except NorpError as e:
            if e.fatal:
                return _report_fatal(e, logger)
            logger.warning(f"{type(e).__name__}: {e}")
            print(e)
            continue

        if result.message:
            print(result.message)
        if result.should_quit:
            logger.info("Player quit.")
            return 0


def main(argv: Optional[List[str]] = None, container: Container = default_container) -> int:
    """Builds the session from the config file and hands it to the run loop."""
    arg_parser = argparse.ArgumentParser(prog="norp", description="A tiny text adventure.")
    arg_parser.add_argument(
        "config",
        nargs="?",
        type=Path,
        help="Path to the TOML config file (default: ./data/norp.config.toml).",
    )
    args = arg_parser.parse_args(argv)
    overriding = (
        container.config_path.override(providers.Object(args.config))
        if args.config is not None
        else nullcontext()
    )
    # The override and the cached settings end with this run.
    with overriding:
        try:
            return _play(container)
        finally:
            container.reset_singletons()


def _play(container: Container) -> int:
    logger = None
    try:
        container.settings()
        logger = container.logger()
        container.logging_event_handler().subscribe(container.event_bus())
        session = container.session()
        logger.info(f"Loaded {len(session.world)} location(s) from {session.settings.locations_file}.")
        print(session.current_location().render())
    except NorpError as e:
        return _report_fatal(e, logger)

    return run_loop(
        session,
        container.command_parser(),
        container.command_executor(),
        logger,
    )


if __name__ == "__main__":
    sys.exit(main())
