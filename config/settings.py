"""Runtime settings read from the environment."""

import logging
import os

DEFAULT_STORE_PATH = os.path.join(os.path.expanduser("~"), ".suite_scenarios.json")


def store_path():
    return os.getenv("SCENARIO_STORE_PATH", DEFAULT_STORE_PATH)


def owner_id():
    """Owner key for the saved scenario; one scenario per owner."""
    return os.getenv("SCENARIO_OWNER_ID", "local")


def configure_logging(level=None):
    """Configure root logging once; level defaults to SCENARIO_LOG_LEVEL or WARNING."""
    level = level or os.getenv("SCENARIO_LOG_LEVEL", "WARNING")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
