from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .logger import get_logger
from .uxml.uxml_ast import UXMLDocument
from .uxml.uxml_importer import UXMLImporter

log = get_logger(__name__)


@dataclass
class UIDocumentAsset:
    """A UXML file on disk together with its parsed document."""

    name: str
    path: Path
    full_path: Path
    uxml_document: UXMLDocument

    @classmethod
    def load(
        cls, full_path: Path, importer: Optional[UXMLImporter] = None
    ) -> "UIDocumentAsset":
        importer = importer or UXMLImporter()
        document = importer.import_uxml(full_path)
        return cls(
            name=full_path.stem,
            path=full_path.parent,
            full_path=full_path,
            uxml_document=document,
        )

    @classmethod
    def from_document(cls, document: UXMLDocument) -> "UIDocumentAsset":
        full_path = document.path or Path(f"{document.name}.uxml")
        return cls(
            name=document.name,
            path=full_path.parent,
            full_path=full_path,
            uxml_document=document,
        )


def expand_uxml_paths(paths: Iterable[Path]) -> List[Path]:
    """Expand directories to the .uxml files they contain, keeping file arguments as given."""
    expanded: List[Path] = []
    for path in paths:
        if path.is_dir():
            found = sorted(path.glob("*.uxml"))
            if not found:
                log.warning(f"No .uxml files found in {path}")
            expanded.extend(found)
        else:
            expanded.append(path)
    return expanded
