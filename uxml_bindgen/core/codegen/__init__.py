"""
C# Binding Generation

Statement factory and generators that turn a UXML document into source text.
"""

from .bindings_generator import BindingsGenerator, EditorWindowBindingsGenerator
from .script_generator import ScriptGenerator, EditorWindowScriptGenerator
from .statements import InitializationStatement, generate_initialize_statements
from .ui_property import UIProperty
from .result import GenerationResult

__all__ = [
    "BindingsGenerator",
    "EditorWindowBindingsGenerator",
    "ScriptGenerator",
    "EditorWindowScriptGenerator",
    "InitializationStatement",
    "generate_initialize_statements",
    "UIProperty",
    "GenerationResult",
]
