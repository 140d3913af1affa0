"""
Behaviour script generators.

The script is the user-owned half of the partial class. It is written once
and then edited by hand, so it carries no auto-generated header.
"""

from __future__ import annotations
from typing import Optional

from ..document_asset import UIDocumentAsset
from .bindings_generator import (
    CREATE_GUI_METHOD_NAME,
    INITIALIZE_DOCUMENT_METHOD_NAME,
    ON_ENABLE_METHOD_NAME,
    SHOW_WINDOW_METHOD_NAME,
    require_asset,
)
from .codegen import CodeGen, as_identifier, string_literal
from .result import GenerationResult


class ScriptGenerator:
    """``MonoBehaviour`` that initializes its bindings when enabled."""

    def generate(self, document_asset: Optional[UIDocumentAsset]) -> GenerationResult:
        document_asset = require_asset(document_asset)

        gen = CodeGen()
        gen.lines("using UnityEngine;", "using UnityEngine.UIElements;", "")
        gen.line("[RequireComponent(typeof(UIDocument))]")
        with gen.block(f"public partial class {as_identifier(document_asset.name)} : MonoBehaviour"):
            with gen.block(f"private void {ON_ENABLE_METHOD_NAME}()"):
                gen.line(f"{INITIALIZE_DOCUMENT_METHOD_NAME}();")

        return GenerationResult(gen.output())


class EditorWindowScriptGenerator:
    """``EditorWindow`` with a menu entry that opens it."""

    def generate(self, document_asset: Optional[UIDocumentAsset]) -> GenerationResult:
        document_asset = require_asset(document_asset)
        class_name = as_identifier(document_asset.name)

        gen = CodeGen()
        gen.lines(
            "using UnityEditor;",
            "using UnityEngine;",
            "using UnityEngine.UIElements;",
            "",
        )
        with gen.block(f"public partial class {class_name} : EditorWindow"):
            gen.line(f"[MenuItem({string_literal('Window/' + class_name)})]")
            with gen.block(f"public static void {SHOW_WINDOW_METHOD_NAME}()"):
                gen.lines(
                    f"{class_name} window = GetWindow<{class_name}>();",
                    f"window.titleContent = new GUIContent({string_literal(class_name)});",
                )
            gen.line()
            with gen.block(f"private void {CREATE_GUI_METHOD_NAME}()"):
                gen.line(f"{INITIALIZE_DOCUMENT_METHOD_NAME}();")

        return GenerationResult(gen.output())
