"""
UXML Document Model

Structured view of a parsed UXML document. The binding generator only reads
these objects; the importer is the sole producer.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from enum import Enum


class UXMLNodeKind(str, Enum):
    """Special UXML tags that are not visual element types."""

    TEMPLATE = "Template"
    INSTANCE = "Instance"
    STYLE = "Style"


@dataclass
class UXMLAttribute:
    name: str
    value: str


@dataclass
class UXMLElement:
    """
    A visual element in the hierarchy.

    ``element_type`` is the qualified type name, e.g.
    ``UnityEngine.UIElements.Button``, or ``Instance`` for template instances.
    """

    element_type: str
    attributes: List[UXMLAttribute] = field(default_factory=list)
    children: List[UXMLElement] = field(default_factory=list)

    # Template alias (only for Instance elements)
    template: Optional[str] = None

    def get_attribute(self, name: str) -> Optional[str]:
        """Get attribute value by name."""
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return None

    @property
    def name(self) -> Optional[str]:
        return self.get_attribute("name")


@dataclass
class UXMLTemplate:
    """A ``<Template name=".." src=".."/>`` declaration."""

    name: str
    src: Optional[str] = None


@dataclass(frozen=True)
class UXMLChild:
    """
    Flat descriptor of a named element, as consumed by the generator.

    ``type`` is ``Template``, ``Instance`` or a qualified element type name.
    """

    name: str
    type: str
    template: Optional[str] = None


@dataclass
class UXMLDocument:
    """A complete UXML document."""

    name: str
    path: Optional[Path] = None
    is_editor_extension: bool = False

    # Synthetic container for the top-level elements
    root: Optional[UXMLElement] = None

    templates: List[UXMLTemplate] = field(default_factory=list)

    def get_all_elements(self) -> List[UXMLElement]:
        """Get all elements in the document via DFS."""
        if not self.root:
            return []

        elements = []
        stack = [self.root]

        while stack:
            elem = stack.pop()
            elements.append(elem)
            # Add children in reverse order to maintain DFS order
            stack.extend(reversed(elem.children))

        return elements

    def get_children(self) -> List[UXMLChild]:
        """
        Flatten the document into generator input.

        Template declarations come first, followed by every named element in
        document order. Unnamed elements are not bindable and are left out.
        """
        children = [
            UXMLChild(name=t.name, type=UXMLNodeKind.TEMPLATE.value)
            for t in self.templates
        ]

        for elem in self.get_all_elements():
            if elem is self.root:
                continue
            name = elem.name
            if not name:
                continue
            children.append(
                UXMLChild(name=name, type=elem.element_type, template=elem.template)
            )

        return children
