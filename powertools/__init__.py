"""Text, writer, container, shape and JSON-event utilities with a '$' formatter."""

__version__ = "0.1.0"

__all__ = [
    "textformat",
    "writer",
    "strings",
    "containers",
    "graphics",
    "json_events",
    "fileutil",
]