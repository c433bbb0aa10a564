import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Management System")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")
    environment: str = os.getenv("ENVIRONMENT", "development")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # CLI output: plain | json | rich
    default_output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()

    # Inventory display
    currency_symbol: str = os.getenv("CURRENCY_SYMBOL", "$")
    title_column_width: int = int(os.getenv("TITLE_COLUMN_WIDTH", "30"))
    author_column_width: int = int(os.getenv("AUTHOR_COLUMN_WIDTH", "20"))


settings = Settings()
