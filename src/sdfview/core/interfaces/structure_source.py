"""Interface for collaborators that turn an identifier into Molfile text."""

from abc import ABC, abstractmethod


class StructureSource(ABC):
    """Supplies raw structure file text for a user-supplied identifier."""

    @abstractmethod
    def fetch_text(self, identifier: str) -> str:
        """
        Return the raw text for identifier.

        Raises:
            KeyError: If the source has nothing for identifier
        """


def looks_like_sdf(text: str) -> bool:
    """Reject empty responses and markup (HTML/XML error pages)."""
    stripped = text.strip()
    return bool(stripped) and not stripped.startswith("<")
