"""Generate Word documentation from component metadata."""

from stencil_docx.config import GeneratorConfig, load_config
from stencil_docx.document import DocumentGenerator
from stencil_docx.generator import create_docx_generator
from stencil_docx.models import ComponentDoc, DocsSet, DocsTag, PropDoc, SlotDoc
from stencil_docx.parser import load_docs, parse_docs

__all__ = [
    "ComponentDoc",
    "DocsSet",
    "DocsTag",
    "DocumentGenerator",
    "GeneratorConfig",
    "PropDoc",
    "SlotDoc",
    "create_docx_generator",
    "load_config",
    "load_docs",
    "parse_docs",
]
