"""Version of the compiled data format, shown by ``main.py --version``."""

DATA_FORMAT_VERSION = "1.0.0"


def get_version() -> str:
    """Get current data format version."""
    return DATA_FORMAT_VERSION
