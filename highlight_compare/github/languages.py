"""
Language catalog loading.

Reads GitHub Linguist's ``languages.yml`` and turns it into the list of
language hints to render. The fence alias is the first listed alias, falling
back to the lower-cased language name.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import requests
import yaml

from highlight_compare.exceptions import LanguageCatalogError
from highlight_compare.schemas import Language

logger = logging.getLogger(__name__)


def languages_from_catalog(
    catalog: Dict[str, Any],
    types: Optional[Iterable[str]] = None,
) -> List[Language]:
    """
    Convert a parsed Linguist catalog into language hints.

    Args:
        catalog: Mapping of language name -> Linguist attributes
        types: Keep only these Linguist types (e.g. ``programming``); all if None

    Returns:
        Language list in catalog order
    """
    if not isinstance(catalog, dict):
        raise LanguageCatalogError("Language catalog must be a mapping of name -> attributes")

    wanted = set(types) if types else None
    languages = []
    for name, info in catalog.items():
        info = info or {}
        if wanted is not None and info.get("type") not in wanted:
            continue
        aliases = info.get("aliases") or []
        alias = aliases[0] if aliases else str(name).lower()
        languages.append(Language(name=str(name), alias=alias))
    return languages


def parse_catalog(yaml_text: str, types: Optional[Iterable[str]] = None) -> List[Language]:
    """Parse ``languages.yml`` text into language hints."""
    try:
        catalog = yaml.safe_load(yaml_text)
    except yaml.YAMLError as e:
        raise LanguageCatalogError(f"Invalid language catalog: {e}") from e
    return languages_from_catalog(catalog or {}, types=types)


def load_languages(
    source: str,
    timeout: float = 30.0,
    types: Optional[Iterable[str]] = None,
) -> List[Language]:
    """
    Load language hints from a URL or a local ``languages.yml`` file.

    Args:
        source: HTTP(S) URL or filesystem path
        timeout: Request timeout in seconds (URLs only)
        types: Optional Linguist type filter

    Returns:
        Language list in catalog order
    """
    if source.startswith(("http://", "https://")):
        logger.info(f"Fetching languages from {source}")
        try:
            response = requests.get(source, timeout=timeout)
        except requests.RequestException as e:
            raise LanguageCatalogError(f"Could not fetch language catalog: {e}") from e
        if not response.ok:
            raise LanguageCatalogError(f"HTTP error! status: {response.status_code}")
        yaml_text = response.text
    else:
        path = Path(source)
        if not path.exists():
            raise LanguageCatalogError(f"Language catalog not found: {path}")
        yaml_text = path.read_text(encoding="utf-8")

    languages = parse_catalog(yaml_text, types=types)
    logger.info(f"Loaded {len(languages)} languages")
    return languages
