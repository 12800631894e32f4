"""
Serializer base class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..core.resolver import Resolver
from ..core.store import TokenLibrary


class Serializer(ABC):
    """
    Renders a token library into output files.

    Subclasses implement ``render``, which is pure: it returns relative path
    -> file contents and never touches the filesystem.
    """

    format: str = ""

    @abstractmethod
    def render(self, library: TokenLibrary, resolver: Resolver) -> dict[str, str]:
        """Render every output file for ``library``."""
        ...
