import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("LIBRARY_APP_NAME", "Library Management System")
    log_level: str = os.getenv("LIBRARY_LOG_LEVEL", "WARNING").upper()

    # Catalog behaviour
    seed_data: bool = _env_flag("LIBRARY_SEED_DATA", "True")
    # Refuse returns whose transaction is not an outstanding borrow of that book
    strict_returns: bool = _env_flag("LIBRARY_STRICT_RETURNS", "False")

    # CLI output: plain | json | rich
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()


settings = Settings()
