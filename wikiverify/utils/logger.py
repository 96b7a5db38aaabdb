import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: int = logging.INFO) -> None:
    """Configure wikiverify logging.

    Args:
        home: Directory holding ``wikiverify.log``. If None, WIKIVERIFY_HOME (or ~/.wikiverify).
        level: Level of the ``wikiverify`` logger
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        from wikiverify.api.config.WikiVerifyConfig import WikiVerifyConfig

        home = WikiVerifyConfig.get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "wikiverify.log"

    root_logger = logging.getLogger("wikiverify")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach handlers added by configure_logging (used between test runs)."""
    global _CONFIGURED
    root_logger = logging.getLogger("wikiverify")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
