"""Loading of animator controller dumps.

A controller dump is a JSON document exported from the Unity editor that
lists the controller's name and its parameters in declaration order. It
is read from disk or fetched over HTTP; either way the top level must be
a JSON object.
"""

import json
from pathlib import Path
from typing import Any, Dict
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30
REQUEST_HEADERS = {"Accept": "application/json"}


class DumpLoadError(Exception):
    """Raised when a controller dump cannot be read or parsed."""

    pass


def _require_object(data: Any, source: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DumpLoadError(
            f"Controller dump from {source} must be a JSON object, "
            f"got {type(data).__name__}"
        )
    return data


def read_dump_file(file_path: str | Path) -> Dict[str, Any]:
    """Read a controller dump from a local file.

    Raises:
        DumpLoadError: If the file is missing, unreadable or not a JSON object.
    """
    path = Path(file_path)
    logger.debug("Reading controller dump %s", path)

    if not path.is_file():
        raise DumpLoadError(f"File not found: {path}")
    if path.suffix.lower() != ".json":
        logger.warning("Controller dump %s does not have a .json extension", path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DumpLoadError(f"Error reading {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DumpLoadError(f"Invalid JSON in {path}: {e}") from e

    return _require_object(data, str(path))


def fetch_dump(url: str, timeout: int = DEFAULT_TIMEOUT) -> Dict[str, Any]:
    """Fetch a controller dump over HTTP(S).

    Raises:
        DumpLoadError: On a malformed URL, a failed request or a non-object body.
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise DumpLoadError(f"Invalid URL: {url}")

    logger.debug("Fetching controller dump %s", url)
    try:
        response = requests.get(url, headers=REQUEST_HEADERS, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    # JSONDecodeError subclasses RequestException, so it has to come first
    except requests.exceptions.JSONDecodeError as e:
        raise DumpLoadError(f"Invalid JSON response from {url}: {e}") from e
    except requests.exceptions.Timeout as e:
        raise DumpLoadError(f"Request timeout after {timeout}s for {url}") from e
    except requests.exceptions.HTTPError as e:
        raise DumpLoadError(
            f"HTTP error {e.response.status_code} for {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise DumpLoadError(f"Request error for {url}: {e}") from e

    return _require_object(data, url)


def load_dump(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """Load a controller dump from exactly one of a file or a URL."""
    if (file_path is None) == (url is None):
        raise DumpLoadError("Exactly one of file_path or url must be provided")

    if file_path is not None:
        data = read_dump_file(file_path)
        source = str(file_path)
    else:
        data = fetch_dump(url, timeout)
        source = url

    logger.info("Loaded controller dump from %s", source)
    return data
