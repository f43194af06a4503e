from __future__ import annotations
import re

from errors import SVGError, UnknownElementError

xml_pattern = re.compile(r'(\<[^>]*?\>)', flags=re.DOTALL | re.MULTILINE)
comment_pattern = re.compile(r'\<!--.*?--\>', flags=re.DOTALL | re.MULTILINE)
first_word_pattern = re.compile(r'^\s*[/!?]*\s*([\w:.-]+)')

def is_self_terminating(svg_value: str) -> bool:
    return svg_value.rstrip().endswith('/>')

def is_terminator(svg_value: str) -> bool:
    return svg_value.strip().startswith('</')

def is_declaration(svg_value: str) -> bool:
    # <?xml ...?>, <!DOCTYPE ...>, <![CDATA[...
    return svg_value.strip().startswith(('<?', '<!'))

def get_tag(svg_value: str) -> str:
    content = svg_value.strip()
    if content.startswith('</'):
        content = content[2:]
    elif content.startswith('<'):
        content = content[1:]
    if content.endswith('>'):
        content = content[:-1]
    if content.endswith('/'):
        content = content[:-1]

    match = first_word_pattern.search(content)
    if match:
        return match.group(1)
    return ""

def parse_attributes(element: str) -> dict[str, str]:
    attributes = {}

    content = element.strip()
    if content.startswith('</'):
        return attributes
    if content.startswith('<'):
        content = content[1:]
    if content.endswith('>'):
        content = content[:-1]
    if content.endswith('/'):
        content = content[:-1].rstrip()

    parts = content.split(None, 1)
    if len(parts) < 2:
        return attributes

    attr_string = parts[1]

    state = 0
    accumulator = ""
    current_key = ""
    quote = ""

    for char in attr_string:
        if state == 0:
            if char == '=':
                current_key = accumulator.strip()
                accumulator = ""
                state = 1
            elif not char.isspace():
                accumulator += char
        elif state == 1:
            if char == '"' or char == "'":
                quote = char
                state = 2
        elif state == 2:
            if char == quote:
                attributes[current_key] = accumulator
                accumulator = ""
                current_key = ""
                state = 0
            else:
                accumulator += char

    if state != 0 or accumulator.strip():
        raise SVGError(f"Malformed attributes in {element.strip()}", element.strip())

    return attributes

def tokenize(data: str) -> list[str]:
    data = comment_pattern.sub('', data)
    entries = xml_pattern.findall(data)
    return [x for x in entries if not is_declaration(x)]

class Node:
    def __init__(self, tag: str, attributes: dict[str, str] = None, children: list['Node'] = None):
        self.tag = tag
        self.attributes = attributes if attributes is not None else {}
        self.children = children if children is not None else []

    @classmethod
    def from_element(cls, element: str) -> 'Node':
        return cls(get_tag(element), parse_attributes(element))

    def get_attribute(self, attr_name: str, default: str = None) -> str:
        return self.attributes.get(attr_name, default)

    def __repr__(self) -> str:
        return f"Node({self.tag!r}, {self.attributes!r}, {len(self.children)} children)"

def build_tree(entries: list[str]) -> Node:
    if not entries:
        raise UnknownElementError("No root <svg> element found")

    iterator = iter(entries)
    svg_element = next(iterator)
    tag = get_tag(svg_element)
    if tag != "svg" or is_terminator(svg_element):
        raise UnknownElementError(f"Invalid root element: expected 'svg' but was '{tag}'", tag)

    root = Node.from_element(svg_element)
    if is_self_terminating(svg_element):
        return root

    stack = [root]
    for svg_element in iterator:
        if not stack:
            break

        if is_terminator(svg_element):
            tag = get_tag(svg_element)
            if tag != stack[-1].tag:
                raise SVGError(f"Mismatched closing tag </{tag}>, expected </{stack[-1].tag}>", tag)
            stack.pop()
            continue

        child = Node.from_element(svg_element)
        stack[-1].children.append(child)
        if not is_self_terminating(svg_element):
            stack.append(child)

    if stack:
        raise SVGError(f"Unclosed element <{stack[-1].tag}>", stack[-1].tag)

    return root

def parse_svg_string(data: str) -> Node:
    return build_tree(tokenize(data))

def parse_svg_file(path: str) -> Node:
    with open(path, 'r', encoding='utf-8') as file:
        data = file.read()

    return parse_svg_string(data)
