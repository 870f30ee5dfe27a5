"""BlogSpace - demo entry point.

Run with: python -m blogspace.app.main
"""

from __future__ import annotations

import asyncio
import logging
import logging.handlers
import os
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

from blogspace.app.state import Store
from blogspace.app.ui.feed import render_snapshot
from blogspace.shared.core.configuration import ConfigManager, LoggingConfig, ValidationLevel
from blogspace.shared.core.errors import BlogError
from blogspace.shared.core.event_bus import EventBus

PROJECT_ROOT = Path(__file__).parent.parent.parent.resolve()

logger = logging.getLogger(__name__)

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(settings: LoggingConfig, root: Path = PROJECT_ROOT) -> Path:
    """Rotating file log at the configured level, console for warnings and up.

    Returns the log file path.
    """
    logs_dir = Path(settings.log_dir)
    if not logs_dir.is_absolute():
        logs_dir = root / logs_dir
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = logs_dir / "blogspace.log"

    file_log_level = LOG_LEVEL_MAP.get(settings.level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)
    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=settings.max_bytes,
        backupCount=settings.backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVEL_MAP.get(settings.console_level.upper(), logging.WARNING))
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    return log_file_path


async def run_demo(store: Store, console: Console) -> None:
    """Sign in with the demo account and print the feed."""
    await store.start()
    render_snapshot(console, store.app.snapshot(), store.app.comments_for)

    identifier = os.getenv("BLOGSPACE_DEMO_USER", "demo@example.com")
    secret = os.getenv("BLOGSPACE_DEMO_PASSWORD", "password")
    try:
        await store.app.login(identifier, secret)
    except BlogError as e:
        console.print(f"[red]{e.message}[/red]")
        return

    snapshot = store.app.snapshot()
    if snapshot.posts:
        await store.app.toggle_comments(snapshot.posts[0].id)
    await store.bus.wait_until_idle()
    render_snapshot(console, store.app.snapshot(), store.app.comments_for)


def main() -> None:
    load_dotenv(dotenv_path=PROJECT_ROOT / ".env")

    config = ConfigManager(PROJECT_ROOT / "config").get_config(ValidationLevel.LENIENT)
    log_file_path = configure_logging(config.logging)
    logger.info(f"Logging to {log_file_path}")

    store = Store(EventBus(), config)
    asyncio.run(run_demo(store, Console()))


if __name__ == "__main__":
    main()
