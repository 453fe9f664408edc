"""
Configuration settings for the board grid mapper.
Load configuration from environment variables or a .env file.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from a .env file in the working directory
env_file = Path.cwd() / '.env'
if env_file.exists():
    load_dotenv(env_file)


def _float_env(name: str, default: float) -> float:
    """Read a float from the environment, falling back on bad input."""
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    """Read an int from the environment, falling back on bad input."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    """Application settings loaded from environment variables."""

    # Relative exports land here; the default follows the working directory
    OUTPUT_DATA_DIR = Path(os.getenv('PCBGRID_OUTPUT_DIR', os.curdir))

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE = os.getenv('LOG_FILE') or None

    # ============================================================================
    # Board defaults (used when interactive input cannot be parsed)
    # ============================================================================
    BOARD_WIDTH = _float_env('PCBGRID_BOARD_WIDTH', 100.0)
    BOARD_HEIGHT = _float_env('PCBGRID_BOARD_HEIGHT', 100.0)

    # ============================================================================
    # Grid resolution
    # ============================================================================
    GRID_ROWS = _int_env('PCBGRID_GRID_ROWS', 4)
    GRID_COLS = _int_env('PCBGRID_GRID_COLS', 4)
    SECONDARY_RES = _int_env('PCBGRID_SECONDARY_RES', 3)

    @classmethod
    def default_board(cls, width: float = None, height: float = None):
        """Build a BoardSpec from the configured grid resolution."""
        from pcbgrid.schemas import BoardSpec

        return BoardSpec(
            width=cls.BOARD_WIDTH if width is None else width,
            height=cls.BOARD_HEIGHT if height is None else height,
            rows=cls.GRID_ROWS,
            cols=cls.GRID_COLS,
            secondary_res=cls.SECONDARY_RES,
        )

    @classmethod
    def validate_required_settings(cls) -> list[str]:
        """
        Validate that all settings hold usable values.
        Returns list of problems found.
        """
        problems = []

        if cls.BOARD_WIDTH <= 0:
            problems.append('PCBGRID_BOARD_WIDTH must be > 0')
        if cls.BOARD_HEIGHT <= 0:
            problems.append('PCBGRID_BOARD_HEIGHT must be > 0')
        if not 1 <= cls.GRID_ROWS <= 26:
            problems.append('PCBGRID_GRID_ROWS must be between 1 and 26')
        if cls.GRID_COLS < 1:
            problems.append('PCBGRID_GRID_COLS must be >= 1')
        if cls.SECONDARY_RES < 1:
            problems.append('PCBGRID_SECONDARY_RES must be >= 1')

        return problems


# Create settings instance
settings = Settings()
