"""Base abstraction for document serialization backends."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from stencil_docx.layout import Document


class DocumentBackend(Protocol):
    """Protocol for document serialization backends.

    The DocumentGenerator builds a format-neutral Document; a backend turns it
    into the bytes of a concrete file format.
    """

    def render(self, document: Document) -> bytes:
        """Serialize a document model to file contents."""
        ...
