"""
Bindings generators.

Emit the auto-generated half of a partial class: one typed property per named
UXML element and an ``InitializeDocument`` method that assigns them by
querying the visual tree.
"""

from __future__ import annotations
from typing import List, Optional, Sequence

from ..document_asset import UIDocumentAsset
from ..uxml.element_types import ElementTypeRegistry, DEFAULT_REGISTRY
from .codegen import CodeGen, GENERATED_CODE_HEADER, as_identifier, string_literal
from .result import GenerationResult
from .statements import (
    DOCUMENT_FIELD_NAME,
    InitializationStatement,
    generate_initialize_statements,
)

ROOT_VISUAL_ELEMENT_FIELD_NAME = "_rootVisualElement"
ROOT_PROPERTY_NAME = "Root"
INITIALIZE_DOCUMENT_METHOD_NAME = "InitializeDocument"
DOCUMENT_ROOT_VISUAL_ELEMENT = "rootVisualElement"
QUERY_METHOD_NAME = "Q"

EDITOR_WINDOW_ROOT_NAME = "windowRoot"

# Declared by the behaviour script half of the partial class
ON_ENABLE_METHOD_NAME = "OnEnable"
SHOW_WINDOW_METHOD_NAME = "ShowWindow"
CREATE_GUI_METHOD_NAME = "CreateGUI"


def require_asset(document_asset: Optional[UIDocumentAsset]) -> UIDocumentAsset:
    if document_asset is None:
        raise ValueError("Cannot generate binding with a null document asset.")
    return document_asset


def _write_usings(
    gen: CodeGen, base: Sequence[str], statements: List[InitializationStatement]
) -> None:
    namespaces = set(base)
    namespaces.update(s.namespace for s in statements if s.namespace)
    for namespace in sorted(namespaces):
        gen.line(f"using {namespace};")
    gen.line()


def _write_properties(gen: CodeGen, statements: List[InitializationStatement]) -> None:
    if not statements:
        return
    for statement in statements:
        gen.line(statement.property)
    gen.line()


class BindingsGenerator:
    """Bindings for runtime documents hosted by a ``UIDocument`` component."""

    usings = ("System", "UnityEngine", "UnityEngine.UIElements")

    def __init__(self, registry: ElementTypeRegistry = DEFAULT_REGISTRY):
        self.registry = registry

    def generate(self, document_asset: Optional[UIDocumentAsset]) -> GenerationResult:
        document_asset = require_asset(document_asset)
        class_name = as_identifier(document_asset.name)

        statements = generate_initialize_statements(
            document_asset.uxml_document,
            f"{ROOT_PROPERTY_NAME}?.{QUERY_METHOD_NAME}",
            document_reference=DOCUMENT_FIELD_NAME,
            registry=self.registry,
            reserved_names=(
                class_name,
                DOCUMENT_FIELD_NAME,
                ROOT_VISUAL_ELEMENT_FIELD_NAME,
                ROOT_PROPERTY_NAME,
                INITIALIZE_DOCUMENT_METHOD_NAME,
                ON_ENABLE_METHOD_NAME,
            ),
        )

        gen = CodeGen()
        _write_usings(gen, self.usings, statements)

        with gen.block(f"public partial class {class_name}"):
            gen.lines(
                "[SerializeField]",
                f"private UIDocument {DOCUMENT_FIELD_NAME};",
                "[NonSerialized]",
                f"private VisualElement {ROOT_VISUAL_ELEMENT_FIELD_NAME};",
            )
            gen.line()

            with gen.block(f"public VisualElement {ROOT_PROPERTY_NAME}"):
                with gen.block("get"):
                    gen.line(
                        f"return {ROOT_VISUAL_ELEMENT_FIELD_NAME} ?? "
                        f"{DOCUMENT_FIELD_NAME}?.{DOCUMENT_ROOT_VISUAL_ELEMENT};"
                    )
            gen.line()

            _write_properties(gen, statements)

            self._write_constructors(gen, class_name)
            gen.line()

            with gen.block(f"public void {INITIALIZE_DOCUMENT_METHOD_NAME}()"):
                for statement in statements:
                    gen.line(statement.statement)

        return GenerationResult(GENERATED_CODE_HEADER + gen.output())

    def _write_constructors(self, gen: CodeGen, class_name: str) -> None:
        with gen.block(f"public {class_name}()"):
            pass
        gen.line()
        with gen.block(f"public {class_name}(UIDocument document, VisualElement root)"):
            gen.line(f"{DOCUMENT_FIELD_NAME} = document;")
            gen.line(f"{ROOT_VISUAL_ELEMENT_FIELD_NAME} = root;")


class EditorWindowBindingsGenerator:
    """
    Bindings for documents authored in editor extension mode.

    The partial class is completed by an ``EditorWindow`` which owns
    ``rootVisualElement``; the document is cloned into it on initialization.
    """

    usings = ("System", "UnityEditor", "UnityEngine", "UnityEngine.UIElements")

    def __init__(self, registry: ElementTypeRegistry = DEFAULT_REGISTRY):
        self.registry = registry

    def generate(self, document_asset: Optional[UIDocumentAsset]) -> GenerationResult:
        document_asset = require_asset(document_asset)
        class_name = as_identifier(document_asset.name)

        statements = generate_initialize_statements(
            document_asset.uxml_document,
            f"{EDITOR_WINDOW_ROOT_NAME}?.{QUERY_METHOD_NAME}",
            document_reference="null",
            registry=self.registry,
            reserved_names=(
                class_name,
                INITIALIZE_DOCUMENT_METHOD_NAME,
                SHOW_WINDOW_METHOD_NAME,
                CREATE_GUI_METHOD_NAME,
            ),
        )

        gen = CodeGen()
        _write_usings(gen, self.usings, statements)

        with gen.block(f"public partial class {class_name}"):
            _write_properties(gen, statements)

            with gen.block(f"public void {INITIALIZE_DOCUMENT_METHOD_NAME}()"):
                asset_path = string_literal(document_asset.full_path.as_posix())
                gen.lines(
                    f"var visualTree = AssetDatabase.LoadAssetAtPath<VisualTreeAsset>({asset_path});",
                    f"VisualElement {EDITOR_WINDOW_ROOT_NAME} = visualTree?.CloneTree();",
                )
                with gen.block(f"if ({EDITOR_WINDOW_ROOT_NAME} != null)"):
                    gen.line(f"{DOCUMENT_ROOT_VISUAL_ELEMENT}.Add({EDITOR_WINDOW_ROOT_NAME});")
                for statement in statements:
                    gen.line(statement.statement)

        return GenerationResult(GENERATED_CODE_HEADER + gen.output())
