"""
Property and initialization statement factory.

Turns the named children of a UXML document into pairs of C# property
declarations and the statements that assign them from the live visual tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set

from ..errors import DuplicatePropertyError, ReservedPropertyError
from ..logger import get_logger
from ..uxml.element_types import ElementTypeRegistry, DEFAULT_REGISTRY
from ..uxml.uxml_ast import UXMLDocument
from .codegen import string_literal
from .ui_property import UIProperty

log = get_logger(__name__)

DOCUMENT_FIELD_NAME = "_document"


@dataclass(frozen=True)
class InitializationStatement:
    property: str
    statement: str
    # C# namespace the property type lives in, None for templates and custom types
    namespace: Optional[str] = None


def generate_initialize_statements(
    document: UXMLDocument,
    query_accessor: str,
    document_reference: str = DOCUMENT_FIELD_NAME,
    registry: ElementTypeRegistry = DEFAULT_REGISTRY,
    reserved_names: Iterable[str] = (),
) -> List[InitializationStatement]:
    """
    Build one property/statement pair per bindable element.

    Args:
        document: Parsed UXML document
        query_accessor: C# expression invoked with an element name to fetch
            the element, e.g. ``Root?.Q``
        document_reference: Expression passed to template instance constructors
        registry: Element type registry used to resolve element tags
        reserved_names: Member names of the enclosing class that no property
            may take

    Returns:
        Statements in document order

    Raises:
        DuplicatePropertyError: two elements share a property name
        ReservedPropertyError: an element maps to one of ``reserved_names``
    """
    properties = [UIProperty.from_child(c, registry) for c in document.get_children()]

    templates: Dict[str, UIProperty] = {}
    for prop in properties:
        if not prop.is_template:
            continue
        if prop.original_name in templates:
            log.warning(
                f"Template '{prop.original_name}' is declared more than once in "
                f"'{_document_label(document)}'. Keeping the first declaration."
            )
            continue
        templates[prop.original_name] = prop

    properties = [p for p in properties if not p.is_template]

    _check_for_duplicate_properties(document, properties)
    _check_for_reserved_properties(document, properties, set(reserved_names))

    statements = []
    for prop in properties:
        template = templates.get(prop.template) if prop.is_instance else None
        property_type_name = _resolve_type_name(prop, template)

        if property_type_name is None:
            log.warning(
                f"Failed to get property type: '{prop.type_name}', field: "
                f"'{prop.name}' for document '{_document_label(document)}'. "
                f"Property will be ignored."
            )
            continue

        declaration = f"public {property_type_name} {prop.name} {{ get; private set; }}"
        query = f"{query_accessor}({string_literal(prop.original_name)})"

        if prop.is_instance:
            statement = (
                f"{prop.name} = new {property_type_name}({document_reference}, {query});"
            )
        else:
            statement = f"{prop.name} = ({property_type_name}){query};"

        namespace = prop.type.namespace if prop.type is not None else None
        statements.append(InitializationStatement(declaration, statement, namespace))

    return statements


def _resolve_type_name(prop: UIProperty, template: Optional[UIProperty]) -> Optional[str]:
    if prop.is_instance:
        return template.name if template is not None else None
    return prop.type.name if prop.type is not None else None


def _check_for_duplicate_properties(
    document: UXMLDocument, properties: List[UIProperty]
) -> None:
    groups: Dict[str, List[str]] = {}
    for prop in properties:
        groups.setdefault(prop.name, []).append(prop.original_name)

    conflicts = [names for names in groups.values() if len(names) > 1]
    if not conflicts:
        return

    for names in conflicts:
        log.error(f"Conflict detected between {', '.join(names)}.")

    raise DuplicatePropertyError(document.name, conflicts)


def _check_for_reserved_properties(
    document: UXMLDocument, properties: List[UIProperty], reserved: Set[str]
) -> None:
    clashes = [p for p in properties if p.name in reserved]
    if not clashes:
        return

    for prop in clashes:
        log.error(f"Element '{prop.original_name}' maps to reserved member '{prop.name}'.")

    raise ReservedPropertyError(document.name, [p.original_name for p in clashes])


def _document_label(document: UXMLDocument) -> str:
    return str(document.path) if document.path is not None else document.name
