from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple

import pytest

from uxml_bindgen.core.uxml import (
    UXMLAttribute,
    UXMLDocument,
    UXMLElement,
    UXMLTemplate,
)


def _make_document(
    name: str,
    elements: Sequence[Tuple[str, str]] = (),
    instances: Sequence[Tuple[str, str]] = (),
    templates: Sequence[str] = (),
    editor: bool = False,
    path: Optional[Path] = None,
) -> UXMLDocument:
    """Build a flat document: (name, type) elements then (name, template) instances."""
    root = UXMLElement(element_type="UXML")
    for elem_name, elem_type in elements:
        root.children.append(
            UXMLElement(
                element_type=elem_type,
                attributes=[UXMLAttribute(name="name", value=elem_name)],
            )
        )
    for inst_name, template in instances:
        root.children.append(
            UXMLElement(
                element_type="Instance",
                attributes=[UXMLAttribute(name="name", value=inst_name)],
                template=template,
            )
        )
    return UXMLDocument(
        name=name,
        path=path,
        is_editor_extension=editor,
        root=root,
        templates=[UXMLTemplate(name=t) for t in templates],
    )


@pytest.fixture
def make_document():
    return _make_document
