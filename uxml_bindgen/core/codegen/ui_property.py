from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..uxml.element_types import ElementType, ElementTypeRegistry, DEFAULT_REGISTRY
from ..uxml.uxml_ast import UXMLChild, UXMLNodeKind
from .codegen import as_identifier

INSTANCE = UXMLNodeKind.INSTANCE.value
TEMPLATE = UXMLNodeKind.TEMPLATE.value


@dataclass(frozen=True)
class UIProperty:
    """A named element that may become a generated property."""

    type_name: str
    name: str
    original_name: str
    template: Optional[str] = None
    type: Optional[ElementType] = None

    @property
    def is_instance(self) -> bool:
        return self.type_name == INSTANCE

    @property
    def is_template(self) -> bool:
        return self.type_name == TEMPLATE

    @classmethod
    def from_child(
        cls,
        child: UXMLChild,
        registry: ElementTypeRegistry = DEFAULT_REGISTRY,
    ) -> "UIProperty":
        if child.type == INSTANCE:
            element_type = None
        elif child.type == TEMPLATE:
            # The template's own name is the type instances are declared with
            element_type = ElementType(as_identifier(child.name))
        else:
            element_type = registry.resolve(child.type)

        return cls(
            type_name=child.type,
            name=as_identifier(child.name),
            original_name=child.name,
            template=child.template if child.type == INSTANCE else None,
            type=element_type,
        )
