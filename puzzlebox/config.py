from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PUZZLEBOX_")

    app_name: str = "puzzlebox"

    # Echo every input line with its annotation while solving
    verbose_logging: bool = False

    # Puzzle inputs live at <data_dir>/day<N>/data.txt
    data_dir: Path = Path("data")

    log_level: LogLevel = "INFO"

    def input_path(self, day: int) -> Path:
        """Default input file for a given day."""
        return self.data_dir / f"day{day}" / DATA_FILENAME


settings = Settings()


# =============================================================================
# INPUT FILES
# =============================================================================

DATA_FILENAME = "data.txt"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
