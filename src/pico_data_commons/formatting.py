from typing import Any


def _render_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_render_value(v) for v in value) + "]"
    return str(value)


def render_fields(*pairs: tuple[str, Any]) -> str:
    """Render ``(name, value)`` pairs as ``{name: value, ...}`` in the given order."""
    body = ", ".join(f"{name}: {_render_value(value)}" for name, value in pairs)
    return "{" + body + "}"
