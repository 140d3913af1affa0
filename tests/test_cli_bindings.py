from pathlib import Path

import pytest

from uxml_bindgen.cli.main import main
from uxml_bindgen.core.settings import OUTPUT_PATH_ENV


MENU = (
    '<ui:UXML xmlns:ui="UnityEngine.UIElements">'
    '<ui:Button name="StartButton" /><ui:Label name="Title" />'
    "</ui:UXML>"
)
BROKEN = (
    '<ui:UXML xmlns:ui="UnityEngine.UIElements">'
    '<ui:Button name="ok" /><ui:Button name="Ok" />'
    "</ui:UXML>"
)


@pytest.fixture
def project(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(OUTPUT_PATH_ENV, raising=False)
    ui = tmp_path / "Assets" / "UI"
    ui.mkdir(parents=True)
    (ui / "Menu.uxml").write_text(MENU, encoding="utf-8")
    return tmp_path


def test_generate_bindings_beside_document(project: Path):
    assert main(["generate-bindings", "Assets/UI/Menu.uxml"]) == 0

    code = (project / "Assets" / "UI" / "Menu.g.cs").read_text(encoding="utf-8")
    assert "public Button StartButton { get; private set; }" in code
    assert "public Label Title { get; private set; }" in code


def test_generate_bindings_to_configured_directory(project: Path):
    (project / "uxml-bindgen.json").write_text(
        '{"binding_output_path": "Assets/Generated"}', encoding="utf-8"
    )

    assert main(["generate-bindings", "Assets/UI"]) == 0

    assert (project / "Assets" / "Generated" / "Menu.g.cs").exists()
    assert not (project / "Assets" / "UI" / "Menu.g.cs").exists()


def test_generate_bindings_explicit_out(project: Path):
    assert main(["generate-bindings", "Assets/UI/Menu.uxml", "--out", "out/Custom.g.cs"]) == 0

    assert (project / "out" / "Custom.g.cs").exists()


def test_out_rejected_for_many_documents(project: Path):
    (project / "Assets" / "UI" / "Other.uxml").write_text(MENU, encoding="utf-8")

    assert main(["generate-bindings", "Assets/UI", "--out", "x.g.cs"]) == 1
    assert not (project / "x.g.cs").exists()


def test_failing_document_does_not_stop_others(project: Path, caplog):
    (project / "Assets" / "UI" / "Broken.uxml").write_text(BROKEN, encoding="utf-8")

    assert main(["generate-bindings", "Assets/UI"]) == 1

    assert (project / "Assets" / "UI" / "Menu.g.cs").exists()
    assert not (project / "Assets" / "UI" / "Broken.g.cs").exists()
    assert "Failed to generate bindings for" in caplog.text


def test_disabled_settings_do_nothing(project: Path):
    (project / "uxml-bindgen.json").write_text('{"enabled": false}', encoding="utf-8")

    assert main(["generate-bindings", "Assets/UI/Menu.uxml"]) == 0
    assert not (project / "Assets" / "UI" / "Menu.g.cs").exists()


def test_invalid_settings_file_fails(project: Path):
    (project / "bad.json").write_text("[]", encoding="utf-8")

    assert main(["--settings", "bad.json", "generate-bindings", "Assets/UI/Menu.uxml"]) == 1


def test_generate_script_does_not_overwrite(project: Path):
    script = project / "Assets" / "UI" / "Menu.cs"

    assert main(["generate-script", "Assets/UI/Menu.uxml"]) == 0
    assert "MonoBehaviour" in script.read_text(encoding="utf-8")

    script.write_text("// user code", encoding="utf-8")
    assert main(["generate-script", "Assets/UI/Menu.uxml"]) == 0
    assert script.read_text(encoding="utf-8") == "// user code"

    assert main(["generate-script", "Assets/UI/Menu.uxml", "--force"]) == 0
    assert "MonoBehaviour" in script.read_text(encoding="utf-8")


def test_clear_bindings(project: Path):
    generated = project / "Assets" / "UI" / "Menu.g.cs"
    main(["generate-bindings", "Assets/UI/Menu.uxml"])
    assert generated.exists()

    assert main(["clear-bindings", "Assets/UI/Menu.uxml"]) == 0
    assert not generated.exists()


def test_clear_bindings_without_generated_file(project: Path):
    before = sorted(p.relative_to(project) for p in project.rglob("*"))

    assert main(["clear-bindings", "Assets/UI/Menu.uxml"]) == 0

    assert sorted(p.relative_to(project) for p in project.rglob("*")) == before


def test_missing_uxml_file(project: Path, caplog):
    assert main(["generate-bindings", "Assets/UI/Nope.uxml"]) == 1
    assert "Failed to generate bindings for" in caplog.text
