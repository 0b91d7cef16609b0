"""Load health_data.json from disk or over HTTP into a HealthDocument."""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Optional

import requests

from .errors import LoadError
from .models import HealthDocument
from .validator import validate_document

LOGGER = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def source_name(source: str | Path) -> str:
    return str(source).rstrip("/").split("/")[-1] or str(source)


def _fetch_text(url: str, timeout: Optional[float]) -> str:
    try:
        resp = requests.get(url, headers={"Cache-Control": "no-store"}, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise LoadError(f"Could not load {source_name(url)} ({e})") from e
    LOGGER.info(f"Fetched {url}, status {resp.status_code}")
    if not resp.ok:
        raise LoadError(f"Could not load {source_name(url)} (HTTP {resp.status_code})")
    return resp.text


def _read_text(path: str | Path) -> str:
    p = Path(path)
    if not p.exists():
        raise LoadError(f"Could not load {p.name} (file not found: {p})")
    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Could not load {p.name} ({e})") from e


def parse_document(text: str) -> HealthDocument:
    try:
        data: Any = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError is a ValueError; so are over-long integer literals
        raise LoadError(f"JSON parse error: {e}") from e
    return HealthDocument.from_dict(validate_document(data))


def load_document(source: str | Path, timeout: Optional[float] = None) -> HealthDocument:
    """Read and parse the document at ``source`` (path or http(s) URL).

    Raises LoadError on any transport, status, parse or structure failure;
    nothing partially parsed is returned.
    """
    source = str(source)
    text = _fetch_text(source, timeout) if is_url(source) else _read_text(source)
    try:
        document = parse_document(text)
    except LoadError as e:
        LOGGER.error(f"Invalid document from {source}: {e}")
        raise
    LOGGER.info(f"Loaded {source}: {document.counts()}")
    return document


__all__ = ["load_document", "parse_document", "is_url", "source_name"]
