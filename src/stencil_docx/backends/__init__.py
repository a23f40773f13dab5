"""Document serialization backends."""

from stencil_docx.backends.base import DocumentBackend
from stencil_docx.backends.docx import DocxBackend

__all__ = [
    "DocumentBackend",
    "DocxBackend",
]
