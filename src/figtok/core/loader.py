"""
Token loader for Tokens Studio exports.

Tokens Studio writes either one JSON document holding every token set, or a
directory with one JSON file per set:

    tokens.json                      tokens/
      $metadata.tokenSetOrder          $metadata.json
      $themes                          $themes.json
      <set slug>: {...}                core/colors.json  (slug "core/colors")

Token sets are nested groups; any object with a ``type`` (or DTCG ``$type``)
is a token and its path inside the set becomes the token name.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from enum import StrEnum
from pathlib import Path
from typing import Any

from .errors import LoadError, make_load_error
from .ir import Theme, Token, TokenKind, TokenSet, TokenSetStatus, make_token
from .store import TokenLibrary

logger = logging.getLogger(__name__)

METADATA_FILE = "$metadata.json"
THEMES_FILE = "$themes.json"


class FileMode(StrEnum):
    """Single JSON document or a directory of JSON files."""

    SINGLE_FILE = "single_file"
    MULTI_FILE = "multi_file"


def load(entry: Path, *, strict_names: bool = False) -> TokenLibrary:
    """
    Load all tokens, token sets and themes below ``entry``.

    Args:
        entry: A ``.json`` export or a directory of set files
        strict_names: Passed through to ``TokenLibrary``

    Returns:
        Populated token library

    Raises:
        LoadError: If the input is missing or malformed
    """
    entry = Path(entry)
    mode = get_file_mode(entry)
    if not entry.exists():
        raise make_load_error(f"No token input found at {entry}")

    if mode == FileMode.SINGLE_FILE:
        source_sets, source_themes, files = load_from_file(entry)
    else:
        source_sets, source_themes, files = load_from_dir(entry)

    tokens, token_sets = parse_tokens(source_sets, files)
    themes = parse_themes(source_themes, known_sets=token_sets.keys())

    logger.debug(
        "Loaded %d tokens in %d sets and %d themes from %s",
        len(tokens),
        len(token_sets),
        len(themes),
        entry,
    )
    return TokenLibrary(tokens, token_sets, themes, strict_names=strict_names)


def get_file_mode(path: Path) -> FileMode:
    """Pick the input mode from the entry path's suffix."""
    if not path.suffix:
        return FileMode.MULTI_FILE
    if path.suffix == ".json":
        return FileMode.SINGLE_FILE
    raise make_load_error(f"Unsupported input file extension: {path.suffix}", file=path)


# =============================================================================
# Reading
# =============================================================================


def load_from_file(
    path: Path,
) -> tuple[dict[str, Any], list[Any], dict[str, Path]]:
    """Read every token set and theme from a single JSON document."""
    data = _read_json(path)
    if not isinstance(data, dict):
        raise make_load_error("Expected a JSON object at the top level", file=path)

    fallback = [key for key in data if not key.startswith("$")]
    order = _set_order(data.get("$metadata"), fallback, path)

    token_sets: dict[str, Any] = {}
    for slug in order:
        if slug not in data:
            raise make_load_error(f"Token set '{slug}' is listed but not defined", file=path)
        token_sets[slug] = data[slug]

    themes = data.get("$themes", [])
    return token_sets, themes, dict.fromkeys(token_sets, path)


def load_from_dir(
    path: Path,
) -> tuple[dict[str, Any], list[Any], dict[str, Path]]:
    """Read ``$metadata.json``, ``$themes.json`` and one file per token set."""
    if not path.is_dir():
        raise make_load_error(f"Token input is not a directory: {path}", file=path)

    metadata_path = path / METADATA_FILE
    metadata = _read_json(metadata_path) if metadata_path.exists() else None
    order = _set_order(metadata, _discover_sets(path), metadata_path)

    themes_path = path / THEMES_FILE
    themes = _read_json(themes_path) if themes_path.exists() else []

    token_sets: dict[str, Any] = {}
    files: dict[str, Path] = {}
    for slug in order:
        set_path = path / f"{slug}.json"
        if not set_path.exists():
            raise make_load_error(f"Token set file for '{slug}' not found", file=set_path)
        token_sets[slug] = _read_json(set_path)
        files[slug] = set_path

    return token_sets, themes, files


def _discover_sets(path: Path) -> list[str]:
    """Every ``*.json`` below ``path`` except ``$``-prefixed files, as slugs."""
    slugs = []
    for file in path.rglob("*.json"):
        relative = file.relative_to(path).with_suffix("")
        if any(part.startswith("$") for part in relative.parts):
            continue
        slugs.append(relative.as_posix())
    return sorted(slugs)


def _set_order(metadata: Any, fallback: list[str], path: Path) -> list[str]:
    if metadata is None:
        logger.debug("No $metadata found, using token set order %s", fallback)
        return fallback
    order = metadata.get("tokenSetOrder") if isinstance(metadata, dict) else None
    if not isinstance(order, list) or not all(isinstance(slug, str) for slug in order):
        raise make_load_error("$metadata.tokenSetOrder must be a list of set names", file=path)
    return order


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise make_load_error("Could not read token file", file=path, detail=str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise make_load_error("Invalid JSON", file=path, detail=str(exc)) from exc


# =============================================================================
# Parsing
# =============================================================================


def parse_tokens(
    source: dict[str, Any], files: dict[str, Path] | None = None
) -> tuple[dict[str, Token], dict[str, TokenSet]]:
    """
    Build tokens and token sets from raw set data.

    Args:
        source: Set slug -> raw JSON object, in set order
        files: Set slug -> file it was read from (for error context)

    Returns:
        (token id -> token, set slug -> token set), both in declaration order
    """
    files = files or {}
    tokens: dict[str, Token] = {}
    token_sets: dict[str, TokenSet] = {}

    for slug, data in source.items():
        file = files.get(slug)
        if not isinstance(data, dict):
            raise make_load_error(f"Token set '{slug}' must be a JSON object", file=file)

        set_name = ".".join(slug.split("/"))
        ids: list[str] = []
        for token in _walk_group(set_name, data, [], file):
            if token.id in tokens:
                raise make_load_error(f"Duplicate token id '{token.id}'", file=file, token=token.name)
            tokens[token.id] = token
            ids.append(token.id)

        token_sets[slug] = TokenSet(name=slug, token_ids=ids)

    return tokens, token_sets


def _walk_group(
    set_name: str, data: dict[str, Any], prefix: list[str], file: Path | None
) -> Iterator[Token]:
    """Recursively yield the tokens of a group, depth first in key order."""
    for key, node in data.items():
        if key.startswith("$"):
            continue

        path = [*prefix, key]
        name = ".".join(path)
        if not isinstance(node, dict):
            raise make_load_error("Expected a token or a group of tokens", file=file, token=name)

        kind = _token_field(node, "type")
        if not isinstance(kind, str):
            yield from _walk_group(set_name, node, path, file)
            continue

        try:
            kind = TokenKind(kind)
        except ValueError:
            raise make_load_error(f"Unknown token type '{kind}'", file=file, token=name) from None

        value = _token_field(node, "value")
        if value is None:
            raise make_load_error("Token has no value", file=file, token=name)

        try:
            yield make_token(f"{set_name}.{name}", name, kind, value)
        except ValueError as exc:
            raise make_load_error(
                f"Invalid value for {kind.value} token", file=file, token=name, detail=str(exc)
            ) from exc


def _token_field(node: dict[str, Any], field: str) -> Any:
    # Tokens Studio uses "type"/"value", the DTCG format "$type"/"$value"
    if field in node:
        return node[field]
    return node.get(f"${field}")


def parse_themes(source: Any, known_sets: Iterable[str] | None = None) -> dict[str, Theme]:
    """
    Build themes from the ``$themes`` list.

    Disabled sets are dropped. Sets that are not in ``known_sets`` are dropped
    with a warning. A theme with a ``group`` is named ``<group>/<name>``.
    """
    if not isinstance(source, list):
        raise make_load_error("$themes must be a list of theme definitions")

    known = set(known_sets) if known_sets is not None else None
    themes: dict[str, Theme] = {}

    for definition in source:
        if not isinstance(definition, dict) or not isinstance(definition.get("name"), str):
            raise make_load_error("Each theme needs a string 'name'")

        name = definition["name"]
        if isinstance(definition.get("group"), str):
            name = f"{definition['group']}/{name}"
        if name in themes:
            raise make_load_error(f"Duplicate theme '{name}'")

        selected = definition.get("selectedTokenSets", {})
        if not isinstance(selected, dict):
            raise make_load_error(f"Theme '{name}' selectedTokenSets must be an object")

        sets: dict[str, TokenSetStatus] = {}
        for set_name, raw_status in selected.items():
            try:
                status = TokenSetStatus(raw_status)
            except ValueError:
                raise LoadError(
                    f"Theme '{name}' gives set '{set_name}' unknown status {raw_status!r}"
                ) from None
            if status == TokenSetStatus.DISABLED:
                continue
            if known is not None and set_name not in known:
                logger.warning("Theme %r references unknown token set %r, skipping", name, set_name)
                continue
            sets[set_name] = status

        themes[name] = Theme(name=name, sets=sets)

    return themes
