"""Exception types raised by the binding generator."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional


class BindgenError(Exception):
    """Base class for all generator failures."""


class InvalidDocumentError(BindgenError):
    """The document cannot produce bindings at all."""


class DuplicatePropertyError(InvalidDocumentError):
    """Two or more elements map to the same property name."""

    def __init__(self, document_name: str, conflicts: List[List[str]]):
        self.document_name = document_name
        self.conflicts = conflicts
        details = "; ".join(", ".join(group) for group in conflicts)
        super().__init__(
            f"Failed to generate bindings for document: {document_name} "
            f"because of duplicate properties ({details})."
        )


class ReservedPropertyError(InvalidDocumentError):
    """Elements map to a member name the generated class already uses."""

    def __init__(self, document_name: str, names: List[str]):
        self.document_name = document_name
        self.names = names
        super().__init__(
            f"Failed to generate bindings for document: {document_name} "
            f"because element names clash with generated members ({', '.join(names)})."
        )


class UXMLParseError(BindgenError):
    def __init__(self, path: Optional[Path], reason: str):
        self.path = path
        self.reason = reason
        where = str(path) if path is not None else "<text>"
        super().__init__(f"Failed to parse UXML document {where}: {reason}")


class SettingsError(BindgenError):
    pass
