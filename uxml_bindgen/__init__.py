"""Generate strongly typed C# bindings from Unity UXML documents."""

__version__ = "0.1.0"
