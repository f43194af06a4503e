from __future__ import annotations

from errors import UnknownAttributeError
from parser import Node

SVG_DEFAULTS = {
    'fill': 'none',
    'stroke': 'none',
    'stroke-width': '1',
    'x': '0',
    'y': '0',
    'cx': '0',
    'cy': '0',
    'r': '0',
    'display': 'inline',
}

IGNORED_ATTRIBUTES = {'id', 'version', 'xml:space'}

STYLE_KEYS = {'fill', 'fill-opacity', 'stroke', 'display'}

def is_ignored_attribute(name: str) -> bool:
    return name in IGNORED_ATTRIBUTES or name.startswith('xmlns')

def check_attributes(node: Node, allowed: set[str]):
    for name in node.attributes:
        if name not in allowed and not is_ignored_attribute(name):
            raise UnknownAttributeError(f"Unknown attribute '{name}' on <{node.tag}>", name)

def get_attribute_with_default(node: Node, attr_name: str) -> str:
    value = node.get_attribute(attr_name)

    if value is not None:
        return value

    return SVG_DEFAULTS.get(attr_name, None)

def parse_style(style: str) -> dict[str, str]:
    values = {}
    for declaration in style.split(';'):
        if not declaration.strip():
            continue
        if ':' not in declaration:
            raise UnknownAttributeError(f"Malformed style declaration '{declaration}'", declaration)
        key, value = declaration.split(':', 1)
        key = key.strip()
        if key not in STYLE_KEYS:
            raise UnknownAttributeError(f"Unknown style element '{key}'", key)
        values[key] = value.strip()
    return values
