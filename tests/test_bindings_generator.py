from pathlib import Path

import pytest

from uxml_bindgen.core.codegen import (
    BindingsGenerator,
    EditorWindowBindingsGenerator,
    EditorWindowScriptGenerator,
    ScriptGenerator,
)
from uxml_bindgen.core.codegen.codegen import GENERATED_CODE_HEADER
from uxml_bindgen.core.document_asset import UIDocumentAsset
from uxml_bindgen.core.errors import DuplicatePropertyError, ReservedPropertyError
from uxml_bindgen.core.uxml import UXMLImporter


MENU_BINDINGS = GENERATED_CODE_HEADER + """using System;
using UnityEngine;
using UnityEngine.UIElements;

public partial class Menu
{
    [SerializeField]
    private UIDocument _document;
    [NonSerialized]
    private VisualElement _rootVisualElement;

    public VisualElement Root
    {
        get
        {
            return _rootVisualElement ?? _document?.rootVisualElement;
        }
    }

    public Button StartButton { get; private set; }

    public Menu()
    {
    }

    public Menu(UIDocument document, VisualElement root)
    {
        _document = document;
        _rootVisualElement = root;
    }

    public void InitializeDocument()
    {
        StartButton = (Button)Root?.Q("StartButton");
    }
}
"""


def asset(document) -> UIDocumentAsset:
    return UIDocumentAsset.from_document(document)


class TestBindingsGenerator:
    def test_single_button(self, make_document):
        doc = make_document("Menu", elements=[("StartButton", "Button")])

        result = BindingsGenerator().generate(asset(doc))

        assert result.code == MENU_BINDINGS

    def test_empty_document_has_scaffold_only(self, make_document):
        doc = make_document("Empty")

        code = BindingsGenerator().generate(asset(doc)).code

        assert code.startswith(GENERATED_CODE_HEADER)
        assert "private UIDocument _document;" in code
        assert "private VisualElement _rootVisualElement;" in code
        assert "public VisualElement Root" in code
        assert "public Empty()\n    {\n    }" in code
        assert "public Empty(UIDocument document, VisualElement root)" in code
        assert "public void InitializeDocument()\n    {\n    }\n}\n" in code
        assert "{ get; private set; }" not in code

    def test_member_order(self, make_document):
        doc = make_document("Menu", elements=[("Title", "Label")])

        code = BindingsGenerator().generate(asset(doc)).code

        markers = [
            "[SerializeField]",
            "[NonSerialized]",
            "public VisualElement Root",
            "public Label Title",
            "public Menu()",
            "public Menu(UIDocument document, VisualElement root)",
            "public void InitializeDocument()",
        ]
        positions = [code.index(m) for m in markers]
        assert positions == sorted(positions)

    def test_instance_property(self, make_document):
        doc = make_document(
            "Profile",
            instances=[("Avatar", "AvatarWidget")],
            templates=["AvatarWidget"],
        )

        code = BindingsGenerator().generate(asset(doc)).code

        assert "public AvatarWidget Avatar { get; private set; }" in code
        assert 'Avatar = new AvatarWidget(_document, Root?.Q("Avatar"));' in code

    def test_missing_template_still_emits_remaining(self, make_document):
        doc = make_document(
            "Profile",
            elements=[("Title", "Label")],
            instances=[("Avatar", "Nope")],
        )

        code = BindingsGenerator().generate(asset(doc)).code

        assert "Avatar" not in code
        assert 'Title = (Label)Root?.Q("Title");' in code

    def test_duplicates_abort(self, make_document):
        doc = make_document("Menu", elements=[("ok-btn", "Button"), ("OkBtn", "Button")])

        with pytest.raises(DuplicatePropertyError):
            BindingsGenerator().generate(asset(doc))

    def test_none_asset_is_rejected(self):
        with pytest.raises(ValueError):
            BindingsGenerator().generate(None)

    def test_output_is_deterministic(self, make_document):
        doc = make_document(
            "Menu",
            elements=[("Title", "Label"), ("Start", "Button")],
            instances=[("Avatar", "AvatarWidget")],
            templates=["AvatarWidget"],
        )

        first = BindingsGenerator().generate(asset(doc)).code
        second = BindingsGenerator().generate(asset(doc)).code

        assert first == second

    def test_class_name_is_sanitized(self, make_document):
        doc = make_document("main-menu")

        code = BindingsGenerator().generate(asset(doc)).code

        assert "public partial class MainMenu\n" in code
        assert "public MainMenu()" in code

    def test_scaffold_member_names_are_rejected(self, make_document):
        doc = make_document("Menu", elements=[("root", "VisualElement"), ("menu", "Label")])

        with pytest.raises(ReservedPropertyError) as excinfo:
            BindingsGenerator().generate(asset(doc))

        assert excinfo.value.names == ["root", "menu"]
        assert "root, menu" in str(excinfo.value)

    @pytest.mark.parametrize("name", ["Root", "initialize-document", "on-enable", "Menu"])
    def test_each_reserved_name(self, make_document, name):
        doc = make_document("Menu", elements=[(name, "Button")])

        with pytest.raises(ReservedPropertyError):
            BindingsGenerator().generate(asset(doc))

    def test_editor_types_bring_their_namespace(self, make_document):
        doc = make_document("Inspector", elements=[("Target", "ObjectField")])

        code = BindingsGenerator().generate(asset(doc)).code

        assert "using UnityEditor.UIElements;\n" in code
        assert 'Target = (ObjectField)Root?.Q("Target");' in code


class TestEditorWindowBindingsGenerator:
    def test_editor_window_bindings(self, make_document):
        doc = make_document(
            "ToolWindow",
            elements=[("Apply", "Button")],
            instances=[("Header", "HeaderWidget")],
            templates=["HeaderWidget"],
            editor=True,
            path=Path("Assets/Editor/ToolWindow.uxml"),
        )

        code = EditorWindowBindingsGenerator().generate(asset(doc)).code

        assert code.startswith(GENERATED_CODE_HEADER)
        assert "using UnityEditor;" in code
        assert "public partial class ToolWindow\n" in code
        assert "_document" not in code
        assert "public VisualElement Root" not in code
        assert (
            'var visualTree = AssetDatabase.LoadAssetAtPath<VisualTreeAsset>('
            '"Assets/Editor/ToolWindow.uxml");'
        ) in code
        assert "rootVisualElement.Add(windowRoot);" in code
        assert 'Apply = (Button)windowRoot?.Q("Apply");' in code
        assert 'Header = new HeaderWidget(null, windowRoot?.Q("Header"));' in code

    def test_none_asset_is_rejected(self):
        with pytest.raises(ValueError):
            EditorWindowBindingsGenerator().generate(None)

    def test_editor_controls_add_editor_usings(self):
        uxml = (
            '<ui:UXML xmlns:ui="UnityEngine.UIElements" '
            'xmlns:uie="UnityEditor.UIElements" editor-extension-mode="True">'
            '<uie:ObjectField name="Target" /><uie:Toolbar name="Bar" />'
            "</ui:UXML>"
        )
        doc = UXMLImporter().import_uxml_text(uxml, "ToolWindow")

        code = EditorWindowBindingsGenerator().generate(asset(doc)).code

        assert (
            "using System;\n"
            "using UnityEditor;\n"
            "using UnityEditor.UIElements;\n"
            "using UnityEngine;\n"
            "using UnityEngine.UIElements;\n"
            "\n"
            "public partial class ToolWindow\n"
        ) in code
        assert 'Target = (ObjectField)windowRoot?.Q("Target");' in code
        assert 'Bar = (Toolbar)windowRoot?.Q("Bar");' in code

    @pytest.mark.parametrize("name", ["tool-window", "show-window", "CreateGUI"])
    def test_window_member_names_are_rejected(self, make_document, name):
        doc = make_document("ToolWindow", elements=[(name, "Button")], editor=True)

        with pytest.raises(ReservedPropertyError):
            EditorWindowBindingsGenerator().generate(asset(doc))


class TestScriptGenerators:
    def test_monobehaviour_script(self, make_document):
        code = ScriptGenerator().generate(asset(make_document("Menu"))).code

        assert code == (
            "using UnityEngine;\n"
            "using UnityEngine.UIElements;\n"
            "\n"
            "[RequireComponent(typeof(UIDocument))]\n"
            "public partial class Menu : MonoBehaviour\n"
            "{\n"
            "    private void OnEnable()\n"
            "    {\n"
            "        InitializeDocument();\n"
            "    }\n"
            "}\n"
        )

    def test_editor_window_script(self, make_document):
        doc = make_document("ToolWindow", editor=True)

        code = EditorWindowScriptGenerator().generate(asset(doc)).code

        assert "auto-generated" not in code
        assert "public partial class ToolWindow : EditorWindow" in code
        assert '[MenuItem("Window/ToolWindow")]' in code
        assert "ToolWindow window = GetWindow<ToolWindow>();" in code
        assert "private void CreateGUI()" in code
        assert "InitializeDocument();" in code
