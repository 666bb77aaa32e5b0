"""Settings read from the environment."""

import os
from typing import Any, Dict

DEFAULT_HOME = os.path.join(os.path.expanduser("~"), ".taskcols")


def default_database_url() -> str:
    return "sqlite:///" + os.path.join(os.getenv("TASKCOLS_HOME", DEFAULT_HOME), "taskcols.db")


def load_config() -> Dict[str, Any]:
    database_url = os.getenv("TASKCOLS_DATABASE_URL") or default_database_url()
    if database_url.startswith("sqlite:///"):
        directory = os.path.dirname(database_url[len("sqlite:///"):])
        if directory:
            os.makedirs(directory, exist_ok=True)
    return {
        "database_url": database_url,
        "api_host": os.getenv("TASKCOLS_API_HOST", "127.0.0.1"),
        "api_port": int(os.getenv("TASKCOLS_API_PORT", "8000")),
    }
