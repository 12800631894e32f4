"""
Token storage.

``TokenStore`` is the read-only lookup interface the resolver and serializers
depend on. ``TokenLibrary`` is the in-memory implementation built by the
loader. It is never mutated after construction, so per-theme views are
computed lazily and cached.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .errors import AmbiguousReferenceError, UnknownThemeError, UnknownTokenError, make_load_error
from .ir import Theme, Token, TokenSet

logger = logging.getLogger(__name__)


class TokenStore(Protocol):
    """Read-only access to loaded tokens."""

    def lookup(self, id: str) -> Token:
        """Return the token with ``id`` or raise ``UnknownTokenError``."""
        ...

    def active_tokens(self, theme: str | None = None) -> list[Token]:
        """Tokens visible under ``theme`` (all tokens when None), in order."""
        ...

    def find(self, name: str, theme: str | None = None) -> Token | None:
        """First active token whose ``name`` equals ``name``."""
        ...


class TokenLibrary:
    """
    In-memory token store.

    Args:
        tokens: Token id -> token, in declaration order
        token_sets: Set slug -> set, in ``tokenSetOrder`` order
        themes: Theme name -> theme, in declaration order
        strict_names: Raise ``AmbiguousReferenceError`` when a referenced
            name matches several active tokens instead of using the first

    Raises:
        LoadError: If a token set lists an id missing from ``tokens``
    """

    def __init__(
        self,
        tokens: dict[str, Token],
        token_sets: dict[str, TokenSet] | None = None,
        themes: dict[str, Theme] | None = None,
        *,
        strict_names: bool = False,
    ) -> None:
        self._tokens = dict(tokens)
        self._token_sets = dict(token_sets or {})
        self._themes = dict(themes or {})
        self.strict_names = strict_names

        for token_set in self._token_sets.values():
            for token_id in token_set.token_ids:
                if token_id not in self._tokens:
                    raise make_load_error(
                        f"Token set '{token_set.name}' lists unknown token '{token_id}'"
                    )

        self._active: dict[str | None, list[Token]] = {}
        self._names: dict[str | None, dict[str, list[Token]]] = {}

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    @property
    def tokens(self) -> dict[str, Token]:
        return dict(self._tokens)

    @property
    def token_sets(self) -> list[TokenSet]:
        return list(self._token_sets.values())

    @property
    def themes(self) -> list[Theme]:
        return list(self._themes.values())

    def token_set(self, name: str) -> TokenSet:
        return self._token_sets[name]

    def theme(self, name: str) -> Theme:
        try:
            return self._themes[name]
        except KeyError:
            raise UnknownThemeError(f"Unknown theme: {name!r}") from None

    def tokens_in_set(self, name: str) -> list[Token]:
        """Tokens of one set, in declaration order."""
        return [self._tokens[token_id] for token_id in self._token_sets[name].token_ids]

    # -------------------------------------------------------------------------
    # TokenStore
    # -------------------------------------------------------------------------

    def lookup(self, id: str) -> Token:
        try:
            return self._tokens[id]
        except KeyError:
            raise UnknownTokenError(f"Unknown token id: {id!r}") from None

    def active_tokens(self, theme: str | None = None) -> list[Token]:
        """
        Tokens visible under ``theme``.

        Without a theme every token is active, in declaration order. With a
        theme, tokens of its source sets come first, then its enabled sets.
        """
        if theme not in self._active:
            if theme is None:
                active = list(self._tokens.values())
            else:
                active = []
                for set_name in self.theme(theme).active_sets:
                    if set_name not in self._token_sets:
                        logger.debug("Theme %r skips unknown token set %r", theme, set_name)
                        continue
                    active.extend(self.tokens_in_set(set_name))
            self._active[theme] = active
        return list(self._active[theme])

    def find(self, name: str, theme: str | None = None) -> Token | None:
        matches = self._name_index(theme).get(name)
        if not matches:
            return None
        if len(matches) > 1 and self.strict_names:
            raise AmbiguousReferenceError(name, [token.id for token in matches])
        return matches[0]

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def duplicate_names(self, theme: str | None = None) -> dict[str, list[str]]:
        """Names shared by more than one active token, mapped to their ids."""
        return {
            name: [token.id for token in matches]
            for name, matches in self._name_index(theme).items()
            if len(matches) > 1
        }

    def _name_index(self, theme: str | None) -> dict[str, list[Token]]:
        if theme not in self._names:
            index: dict[str, list[Token]] = {}
            for token in self.active_tokens(theme):
                index.setdefault(token.name, []).append(token)
            for name, matches in index.items():
                if len(matches) > 1:
                    logger.warning(
                        "Token name %r is shared by %s; references resolve to %s",
                        name,
                        ", ".join(token.id for token in matches),
                        matches[0].id,
                    )
            self._names[theme] = index
        return self._names[theme]
