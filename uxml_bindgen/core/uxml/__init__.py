"""
UXML Document Model

Parses UXML text into the document model consumed by the binding generator.
"""

from .uxml_ast import (
    UXMLDocument,
    UXMLElement,
    UXMLAttribute,
    UXMLTemplate,
    UXMLChild,
    UXMLNodeKind,
)
from .uxml_importer import UXMLImporter
from .element_types import ElementType, ElementTypeRegistry

__all__ = [
    "UXMLDocument",
    "UXMLElement",
    "UXMLAttribute",
    "UXMLTemplate",
    "UXMLChild",
    "UXMLNodeKind",
    "UXMLImporter",
    "ElementType",
    "ElementTypeRegistry",
]
