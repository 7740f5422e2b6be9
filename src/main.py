import argparse
import logging
import signal
import sys
from typing import Optional

from app_config import AppConfig, AppConfigurationError, load_app_config
from notifications import (
    NotificationConfig,
    NotificationConfigurationError,
    build_notifier,
)
from pomodoro import SessionController, SessionStore
from runtime import PluginDependencies, PomodoroPlugin, TerminalHost

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: int = logging.INFO, log_file: str = "") -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        filename=log_file or None,
        force=True,
    )
    return logging.getLogger("pomodoro_pane")


def setup_signal_handlers(host: TerminalHost) -> None:
    """Set up graceful shutdown on SIGTERM and SIGHUP."""

    def signal_handler(signum: int, frame) -> None:
        logging.getLogger("pomodoro_pane").info(
            "%s received, stopping", signal.Signals(signum).name
        )
        host.stop()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGHUP, signal_handler)


def build_plugin(app_config: AppConfig, host: TerminalHost) -> PomodoroPlugin:
    notifier = build_notifier(
        NotificationConfig.from_settings(app_config.notifications),
        logger=logging.getLogger("notifications"),
    )
    controller = SessionController(notifier, logger=logging.getLogger("pomodoro"))
    store = SessionStore(
        app_config.storage.state_file,
        logger=logging.getLogger("pomodoro.store"),
    )
    return PomodoroPlugin(
        PluginDependencies(
            store=store,
            controller=controller,
            scheduler=host,
            logger=logging.getLogger("runtime"),
            utc_offset_hours=app_config.display.utc_offset_hours,
        )
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pomodoro-pane",
        description="Pomodoro work/rest cycle in a terminal pane.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.toml (default: $POMODORO_CONFIG_FILE or ./config.toml)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logger = setup_logging()

    try:
        app_config = load_app_config(args.config)
    except AppConfigurationError as error:
        logger.error("Configuration error: %s", error)
        return 1

    logger = setup_logging(
        level=logging.getLevelName(app_config.logging.level),
        log_file=app_config.logging.file,
    )
    if app_config.source_file:
        logger.info("Loaded config from %s", app_config.source_file)

    if not sys.stdin.isatty():
        logger.error("pomodoro-pane needs an interactive terminal on stdin")
        return 1

    host = TerminalHost(
        focus_events=app_config.display.focus_events,
        logger=logging.getLogger("runtime.host"),
    )
    try:
        plugin = build_plugin(app_config, host)
    except NotificationConfigurationError as error:
        logger.error("Configuration error: %s", error)
        return 1

    setup_signal_handlers(host)
    host.run(plugin)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
