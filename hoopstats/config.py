from dataclasses import dataclass
import os

# Default export filename constant
DEFAULT_EXPORT_PATH = 'basketball_stats.json'
DEFAULT_EXPORT_INDENT = 2


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be a whole number, got {value!r}") from None


def get_export_path() -> str:
    """
    Get the export path from environment variable or default.

    Uses HOOPSTATS_EXPORT_PATH environment variable if set, otherwise
    returns the default filename in the current directory.

    Returns:
        Path to write the JSON export to
    """
    return os.getenv('HOOPSTATS_EXPORT_PATH', DEFAULT_EXPORT_PATH)


@dataclass
class Config:
    export_path: str = DEFAULT_EXPORT_PATH
    export_indent: int = DEFAULT_EXPORT_INDENT
    # Raise on blank names / unknown player ids instead of ignoring them
    strict: bool = False
    # Count made free throws in total points (off by default)
    count_free_throws: bool = False

    @classmethod
    def from_env(cls) -> 'Config':
        return cls(
            export_path = get_export_path(),
            export_indent = _env_int('HOOPSTATS_EXPORT_INDENT', DEFAULT_EXPORT_INDENT),
            strict = _env_flag('HOOPSTATS_STRICT'),
            count_free_throws = _env_flag('HOOPSTATS_COUNT_FREE_THROWS'),
        )
