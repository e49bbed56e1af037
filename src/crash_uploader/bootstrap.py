"""Bootstrap configuration module.

Loads configuration from a .env file into the process environment before
UploaderConfig.from_env() reads it. Variables already set in the
environment take precedence over the .env file.
"""

from pathlib import Path

from dotenv import load_dotenv


def load_dotenv_if_exists(dotenv_path: str | Path = ".env") -> bool:
    """Load environment variables from .env file if it exists.

    Uses python-dotenv to parse and load the .env file. If the file doesn't
    exist, the function continues silently without raising an error.

    Args:
        dotenv_path: Path to the .env file. Defaults to ".env" in current directory.

    Returns:
        True if at least one variable was read from the file

    Example:
        >>> load_dotenv_if_exists("/nonexistent/.env")  # Missing file is not an error
        False
    """
    # override=False means existing env vars are NOT overridden by .env values
    return load_dotenv(dotenv_path=dotenv_path, override=False)
