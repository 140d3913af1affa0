"""
Element type registry.

Maps UXML tags to the C# types the bindings are declared with. Unity resolves
these through reflection; here the known UI Toolkit controls are listed and
user controls are registered from settings.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

RUNTIME_NAMESPACE = "UnityEngine.UIElements"
EDITOR_NAMESPACE = "UnityEditor.UIElements"

RUNTIME_ELEMENTS = (
    "BindableElement",
    "Box",
    "Button",
    "DoubleField",
    "DropdownField",
    "EnumField",
    "FloatField",
    "Foldout",
    "GroupBox",
    "Hash128Field",
    "IMGUIContainer",
    "Image",
    "IntegerField",
    "Label",
    "ListView",
    "LongField",
    "MinMaxSlider",
    "MultiColumnListView",
    "MultiColumnTreeView",
    "ProgressBar",
    "RadioButton",
    "RadioButtonGroup",
    "RectField",
    "RectIntField",
    "RepeatButton",
    "Scroller",
    "ScrollView",
    "Slider",
    "SliderInt",
    "Tab",
    "TabView",
    "TemplateContainer",
    "TextElement",
    "TextField",
    "Toggle",
    "ToggleButtonGroup",
    "TreeView",
    "TwoPaneSplitView",
    "UnsignedIntegerField",
    "UnsignedLongField",
    "Vector2Field",
    "Vector2IntField",
    "Vector3Field",
    "Vector3IntField",
    "Vector4Field",
    "VisualElement",
)

EDITOR_ELEMENTS = (
    "ColorField",
    "CurveField",
    "EnumFlagsField",
    "GradientField",
    "InspectorElement",
    "LayerField",
    "LayerMaskField",
    "MaskField",
    "ObjectField",
    "PropertyField",
    "TagField",
    "Toolbar",
    "ToolbarBreadcrumbs",
    "ToolbarButton",
    "ToolbarMenu",
    "ToolbarPopupSearchField",
    "ToolbarSearchField",
    "ToolbarSpacer",
    "ToolbarToggle",
)


@dataclass(frozen=True)
class ElementType:
    """Concrete type of a bindable element."""

    name: str
    namespace: Optional[str] = None

    @property
    def full_name(self) -> str:
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name


class ElementTypeRegistry:
    """Resolves qualified or bare UXML tags to :class:`ElementType`."""

    def __init__(self, custom_types: Iterable[str] = ()):
        self._types: Dict[str, ElementType] = {}

        for name in RUNTIME_ELEMENTS:
            self._register(ElementType(name, RUNTIME_NAMESPACE), short=True)
        for name in EDITOR_ELEMENTS:
            self._register(ElementType(name, EDITOR_NAMESPACE), short=True)

        # Custom controls keep their qualified name so no using is needed
        for qualified in custom_types:
            qualified = qualified.strip()
            if qualified:
                self._types[qualified] = ElementType(qualified)

    def _register(self, element_type: ElementType, short: bool) -> None:
        self._types[element_type.full_name] = element_type
        if short:
            self._types.setdefault(element_type.name, element_type)

    def resolve(self, tag: str) -> Optional[ElementType]:
        return self._types.get(tag)


DEFAULT_REGISTRY = ElementTypeRegistry()
