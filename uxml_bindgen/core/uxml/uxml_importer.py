"""
UXML Importer - UXML Text → Document Model

Parses UXML files into :class:`UXMLDocument` objects for the binding generator.
Element tags keep their namespace as a dotted prefix so that the type registry
can tell ``ui:Button`` from a user control of the same short name.
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Tuple
import xml.etree.ElementTree as ET

from .uxml_ast import (
    UXMLDocument,
    UXMLElement,
    UXMLAttribute,
    UXMLNodeKind,
    UXMLTemplate,
)
from ..errors import UXMLParseError
from ..logger import get_logger

log = get_logger(__name__)

EDITOR_EXTENSION_ATTRIBUTE = "editor-extension-mode"


def split_tag(tag: str) -> Tuple[Optional[str], str]:
    """Split an ElementTree tag into (namespace, local name)."""
    if tag.startswith("{") and "}" in tag:
        namespace, local = tag[1:].split("}", 1)
        return namespace, local
    return None, tag


def qualified_type_name(tag: str) -> str:
    namespace, local = split_tag(tag)
    if namespace and not namespace.startswith(("http:", "https:")):
        return f"{namespace}.{local}"
    return local


class UXMLImporter:
    """Imports UXML text into the document model."""

    def import_uxml(self, uxml_path: Path) -> UXMLDocument:
        """
        Import UXML from file.

        Args:
            uxml_path: Path to UXML file

        Returns:
            UXMLDocument object
        """
        log.debug(f"Importing UXML from {uxml_path}")

        try:
            tree = ET.parse(str(uxml_path))
        except ET.ParseError as e:
            raise UXMLParseError(uxml_path, str(e)) from e
        except OSError as e:
            raise UXMLParseError(uxml_path, e.strerror or str(e)) from e

        return self._build_document(tree.getroot(), uxml_path.stem, uxml_path)

    def import_uxml_text(
        self,
        uxml_text: str,
        asset_name: str = "Imported",
        path: Optional[Path] = None,
    ) -> UXMLDocument:
        """
        Import UXML from text string.

        Args:
            uxml_text: UXML text content
            asset_name: Name for the document (becomes the class name)
            path: Optional path recorded on the document

        Returns:
            UXMLDocument object
        """
        log.debug(f"Importing UXML text for {asset_name}")

        try:
            root_xml = ET.fromstring(uxml_text)
        except ET.ParseError as e:
            raise UXMLParseError(path, str(e)) from e

        return self._build_document(root_xml, asset_name, path)

    def _build_document(
        self, root_xml: ET.Element, name: str, path: Optional[Path]
    ) -> UXMLDocument:
        _, root_tag = split_tag(root_xml.tag)
        if root_tag != "UXML":
            raise UXMLParseError(path, f"root element is <{root_tag}>, expected <UXML>")

        doc = UXMLDocument(
            name=name,
            path=path,
            is_editor_extension=self._is_editor_extension(root_xml),
        )
        doc.templates = self._extract_templates_from_xml(root_xml)
        doc.root = self._extract_visual_tree_from_xml(root_xml)
        return doc

    def _is_editor_extension(self, root_xml: ET.Element) -> bool:
        value = root_xml.get(EDITOR_EXTENSION_ATTRIBUTE, "")
        return value.strip().lower() == "true"

    def _extract_templates_from_xml(self, root_xml: ET.Element) -> List[UXMLTemplate]:
        templates = []

        for elem in root_xml.iter():
            if not isinstance(elem.tag, str):
                continue
            _, tag = split_tag(elem.tag)
            if tag != UXMLNodeKind.TEMPLATE.value:
                continue

            name = elem.get("name", "")
            if name:
                templates.append(UXMLTemplate(name=name, src=elem.get("src")))
            else:
                log.warning("Ignoring <Template> declaration without a name")

        return templates

    def _extract_visual_tree_from_xml(self, root_xml: ET.Element) -> UXMLElement:
        """
        Build the visual tree under a synthetic container.

        The container stands for the UXML root itself and carries no name,
        so it never becomes a binding.
        """
        container = UXMLElement(element_type="UXML")

        for child in root_xml:
            parsed = self._parse_xml_element(child)
            if parsed is not None:
                container.children.append(parsed)

        return container

    def _parse_xml_element(self, xml_elem: ET.Element) -> Optional[UXMLElement]:
        # Comments and processing instructions have callable tags
        if not isinstance(xml_elem.tag, str):
            return None

        _, tag = split_tag(xml_elem.tag)
        if tag in (UXMLNodeKind.TEMPLATE.value, UXMLNodeKind.STYLE.value):
            return None

        if tag == UXMLNodeKind.INSTANCE.value:
            element = UXMLElement(
                element_type=UXMLNodeKind.INSTANCE.value,
                template=xml_elem.get("template"),
            )
        else:
            element = UXMLElement(element_type=qualified_type_name(xml_elem.tag))

        for key, value in xml_elem.attrib.items():
            _, attr_name = split_tag(key)
            element.attributes.append(UXMLAttribute(name=attr_name, value=value))

        for child in xml_elem:
            parsed = self._parse_xml_element(child)
            if parsed is not None:
                element.children.append(parsed)

        return element
