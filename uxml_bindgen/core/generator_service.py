from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Type, Union

from .codegen.bindings_generator import BindingsGenerator, EditorWindowBindingsGenerator
from .codegen.script_generator import EditorWindowScriptGenerator, ScriptGenerator
from .document_asset import UIDocumentAsset
from .logger import get_logger
from .settings import BindingSettings
from .uxml.element_types import ElementTypeRegistry

log = get_logger(__name__)

BINDINGS_SUFFIX = ".g.cs"
SCRIPT_SUFFIX = ".cs"

# Keyed by UXMLDocument.is_editor_extension
BINDINGS_GENERATORS: Dict[
    bool, Union[Type[BindingsGenerator], Type[EditorWindowBindingsGenerator]]
] = {
    False: BindingsGenerator,
    True: EditorWindowBindingsGenerator,
}
SCRIPT_GENERATORS: Dict[
    bool, Union[Type[ScriptGenerator], Type[EditorWindowScriptGenerator]]
] = {
    False: ScriptGenerator,
    True: EditorWindowScriptGenerator,
}


def build_auto_generated_file_path(
    source_asset_path: Path,
    output_file_name: str,
    settings: BindingSettings,
    create_dir: bool = True,
) -> Path:
    """
    Resolve where a generated file goes.

    With an empty ``binding_output_path`` the file is placed beside the source
    asset; otherwise in that directory, which is created if missing.
    """
    if not settings.binding_output_path:
        return source_asset_path.parent / output_file_name

    output_dir = Path(settings.binding_output_path)
    if create_dir:
        output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir / output_file_name


def bindings_file_path(
    document: UIDocumentAsset, settings: BindingSettings, create_dir: bool = True
) -> Path:
    return build_auto_generated_file_path(
        document.full_path, f"{document.name}{BINDINGS_SUFFIX}", settings, create_dir
    )


def script_file_path(document: UIDocumentAsset) -> Path:
    # Scripts are user code and always live beside the document
    return document.path / f"{document.name}{SCRIPT_SUFFIX}"


def generate_bindings(
    document: UIDocumentAsset,
    output_file: Path,
    registry: Optional[ElementTypeRegistry] = None,
) -> None:
    """Generate the bindings partial class of ``document`` into ``output_file``."""
    generator_cls = BINDINGS_GENERATORS[document.uxml_document.is_editor_extension]
    generator = generator_cls(registry) if registry is not None else generator_cls()

    log.info(f"Generating UI bindings for {document.full_path}")

    result = generator.generate(document)
    result.save(output_file)

    log.info(f"Done generating: {document.name} (output: {output_file})")


def generate_script(document: UIDocumentAsset, output_file: Path) -> None:
    """Generate the behaviour script of ``document`` into ``output_file``."""
    generator = SCRIPT_GENERATORS[document.uxml_document.is_editor_extension]()

    log.info(f"Generating UI script for {output_file}")

    result = generator.generate(document)
    result.save(output_file)

    log.info(f"Done generating: {document.name} (output: {output_file})")


def clear_bindings(document: UIDocumentAsset, settings: BindingSettings) -> bool:
    """
    Delete previously generated bindings of ``document``.

    Returns:
        True if a file was removed, False if there was nothing to clear
    """
    path = bindings_file_path(document, settings, create_dir=False)
    if not path.exists():
        log.debug(f"No generated bindings to clear for {document.name} ({path})")
        return False

    path.unlink()
    log.info(f"Cleared bindings: {path}")
    return True


def registry_for(settings: BindingSettings) -> ElementTypeRegistry:
    return ElementTypeRegistry(settings.custom_element_types)
