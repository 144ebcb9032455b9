"""Read and write a KEY=VALUE environment file."""

import logging
from pathlib import Path

from update_env.models import Entry

logger = logging.getLogger(__name__)


def read_env(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. A missing file reads as empty."""
    result = {}
    if not path.exists():
        logger.debug("%s does not exist, starting empty", path)
        return result
    # Undecodable bytes survive a rewrite as surrogates
    content = path.read_bytes().decode("utf-8", errors="surrogateescape")
    for line in content.split("\n"):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            logger.debug("Skipping malformed line in %s: %r", path, line)
            continue
        result[key] = value.strip()
    logger.debug("Loaded %d variables from %s", len(result), path)
    return result


def write_env(path: Path, values: dict[str, str]) -> None:
    """Overwrite the .env file with values, one KEY=VALUE per line."""
    lines = [f"{k}={v}" for k, v in values.items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8",
                    errors="surrogateescape")
    logger.debug("Wrote %d variables to %s", len(values), path)


def set_var(path: Path, key: str, value: str) -> None:
    values = read_env(path)
    values[key] = value
    write_env(path, values)
    logger.info("Set %s in %s", key, path)


def get_var(path: Path, key: str) -> str | None:
    """Return the value for key, or None when it is not defined."""
    return read_env(path).get(key)


def list_vars(path: Path) -> list[Entry]:
    return [Entry(key, value) for key, value in read_env(path).items()]


def delete_var(path: Path, key: str) -> bool:
    """Remove key from the file. Returns False, without writing, if absent."""
    values = read_env(path)
    if key not in values:
        return False
    del values[key]
    write_env(path, values)
    logger.info("Deleted %s from %s", key, path)
    return True
