from __future__ import annotations
from dataclasses import dataclass

from errors import ColorError

HEX_DIGITS = '0123456789abcdefABCDEF'


@dataclass(frozen=True)
class Color:
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self):
        for name in ('r', 'g', 'b', 'a'):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ColorError(f"Invalid {name} component: {value}", str(value))

    @property
    def is_transparent(self) -> bool:
        return self.a == 0

    def with_alpha(self, a: int) -> 'Color':
        return Color(self.r, self.g, self.b, a)

    def to_floats(self) -> tuple[float, float, float, float]:
        return (byte_to_float(self.r), byte_to_float(self.g),
                byte_to_float(self.b), byte_to_float(self.a))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"


TRANSPARENT = Color()

NAMED_COLORS = {
    'aliceblue': '#f0f8ff',
    'antiquewhite': '#faebd7',
    'aqua': '#00ffff',
    'aquamarine': '#7fffd4',
    'azure': '#f0ffff',
    'beige': '#f5f5dc',
    'bisque': '#ffe4c4',
    'black': '#000000',
    'blanchedalmond': '#ffebcd',
    'blue': '#0000ff',
    'blueviolet': '#8a2be2',
    'brown': '#a52a2a',
    'burlywood': '#deb887',
    'cadetblue': '#5f9ea0',
    'chartreuse': '#7fff00',
    'chocolate': '#d2691e',
    'coral': '#ff7f50',
    'cornflowerblue': '#6495ed',
    'cornsilk': '#fff8dc',
    'crimson': '#dc143c',
    'cyan': '#00ffff',
    'darkblue': '#00008b',
    'darkcyan': '#008b8b',
    'darkgoldenrod': '#b8860b',
    'darkgray': '#a9a9a9',
    'darkgreen': '#006400',
    'darkgrey': '#a9a9a9',
    'darkkhaki': '#bdb76b',
    'darkmagenta': '#8b008b',
    'darkolivegreen': '#556b2f',
    'darkorange': '#ff8c00',
    'darkorchid': '#9932cc',
    'darkred': '#8b0000',
    'darksalmon': '#e9967a',
    'darkseagreen': '#8fbc8f',
    'darkslateblue': '#483d8b',
    'darkslategray': '#2f4f4f',
    'darkslategrey': '#2f4f4f',
    'darkturquoise': '#00ced1',
    'darkviolet': '#9400d3',
    'deeppink': '#ff1493',
    'deepskyblue': '#00bfff',
    'dimgray': '#696969',
    'dimgrey': '#696969',
    'dodgerblue': '#1e90ff',
    'firebrick': '#b22222',
    'floralwhite': '#fffaf0',
    'forestgreen': '#228b22',
    'fuchsia': '#ff00ff',
    'gainsboro': '#dcdcdc',
    'ghostwhite': '#f8f8ff',
    'gold': '#ffd700',
    'goldenrod': '#daa520',
    'gray': '#808080',
    'green': '#008000',
    'greenyellow': '#adff2f',
    'grey': '#808080',
    'honeydew': '#f0fff0',
    'hotpink': '#ff69b4',
    'indianred': '#cd5c5c',
    'indigo': '#4b0082',
    'ivory': '#fffff0',
    'khaki': '#f0e68c',
    'lavender': '#e6e6fa',
    'lavenderblush': '#fff0f5',
    'lawngreen': '#7cfc00',
    'lemonchiffon': '#fffacd',
    'lightblue': '#add8e6',
    'lightcoral': '#f08080',
    'lightcyan': '#e0ffff',
    'lightgoldenrodyellow': '#fafad2',
    'lightgray': '#d3d3d3',
    'lightgreen': '#90ee90',
    'lightgrey': '#d3d3d3',
    'lightpink': '#ffb6c1',
    'lightsalmon': '#ffa07a',
    'lightseagreen': '#20b2aa',
    'lightskyblue': '#87cefa',
    'lightslategray': '#778899',
    'lightslategrey': '#778899',
    'lightsteelblue': '#b0c4de',
    'lightyellow': '#ffffe0',
    'lime': '#00ff00',
    'limegreen': '#32cd32',
    'linen': '#faf0e6',
    'magenta': '#ff00ff',
    'maroon': '#800000',
    'mediumaquamarine': '#66cdaa',
    'mediumblue': '#0000cd',
    'mediumorchid': '#ba55d3',
    'mediumpurple': '#9370db',
    'mediumseagreen': '#3cb371',
    'mediumslateblue': '#7b68ee',
    'mediumspringgreen': '#00fa9a',
    'mediumturquoise': '#48d1cc',
    'mediumvioletred': '#c71585',
    'midnightblue': '#191970',
    'mintcream': '#f5fffa',
    'mistyrose': '#ffe4e1',
    'moccasin': '#ffe4b5',
    'navajowhite': '#ffdead',
    'navy': '#000080',
    'oldlace': '#fdf5e6',
    'olive': '#808000',
    'olivedrab': '#6b8e23',
    'orange': '#ffa500',
    'orangered': '#ff4500',
    'orchid': '#da70d6',
    'palegoldenrod': '#eee8aa',
    'palegreen': '#98fb98',
    'paleturquoise': '#afeeee',
    'palevioletred': '#db7093',
    'papayawhip': '#ffefd5',
    'peachpuff': '#ffdab9',
    'peru': '#cd853f',
    'pink': '#ffc0cb',
    'plum': '#dda0dd',
    'powderblue': '#b0e0e6',
    'purple': '#800080',
    'red': '#ff0000',
    'rosybrown': '#bc8f8f',
    'royalblue': '#4169e1',
    'saddlebrown': '#8b4513',
    'salmon': '#fa8072',
    'sandybrown': '#f4a460',
    'seagreen': '#2e8b57',
    'seashell': '#fff5ee',
    'sienna': '#a0522d',
    'silver': '#c0c0c0',
    'skyblue': '#87ceeb',
    'slateblue': '#6a5acd',
    'slategray': '#708090',
    'slategrey': '#708090',
    'snow': '#fffafa',
    'springgreen': '#00ff7f',
    'steelblue': '#4682b4',
    'tan': '#d2b48c',
    'teal': '#008080',
    'thistle': '#d8bfd8',
    'tomato': '#ff6347',
    'turquoise': '#40e0d0',
    'violet': '#ee82ee',
    'wheat': '#f5deb3',
    'white': '#ffffff',
    'whitesmoke': '#f5f5f5',
    'yellow': '#ffff00',
    'yellowgreen': '#9acd32',
}

def byte_to_float(value: int) -> float:
    return (value & 0xFF) / 255.0

def parse_byte_hex(hex_str: str) -> int:
    if len(hex_str) != 2:
        raise ColorError(f"Invalid hex byte '{hex_str}': expected 2 characters but was {len(hex_str)}",
                         hex_str)
    for ch in hex_str:
        if ch not in HEX_DIGITS:
            raise ColorError(f"Unknown hexadecimal character '{ch}'", hex_str)
    return int(hex_str, 16)

def parse_hex_color(hex_str: str) -> Color:
    if len(hex_str) != 7 or not hex_str.startswith('#'):
        raise ColorError(f"Unknown color '{hex_str}'", hex_str)
    r = parse_byte_hex(hex_str[1:3])
    g = parse_byte_hex(hex_str[3:5])
    b = parse_byte_hex(hex_str[5:7])
    return Color(r, g, b, 0xFF)

def parse_color(color_str: str) -> Color:
    if not color_str:
        raise ColorError("Empty color value", color_str)

    value = color_str.strip()
    name = value.lower()

    if name == 'none':
        return TRANSPARENT

    if name in NAMED_COLORS:
        return parse_hex_color(NAMED_COLORS[name])

    if value.startswith('#'):
        try:
            return parse_hex_color(value)
        except ColorError:
            raise ColorError(f"Unknown color '{color_str}'", color_str) from None

    raise ColorError(f"Unknown color '{color_str}'", color_str)

def apply_opacity(color: Color, opacity_str: str) -> Color:
    try:
        opacity = float(opacity_str)
    except (ValueError, TypeError):
        raise ColorError(f"Invalid opacity value '{opacity_str}'", opacity_str) from None
    if opacity < 0.0 or opacity > 1.0:
        raise ColorError(f"Invalid opacity value: expected between 0.0 and 1.0 but was {opacity}",
                         opacity_str)
    return color.with_alpha(int(opacity * 255.0))

def blend_colors(foreground: tuple[int, int, int, int], 
                 background: tuple[int, int, int, int]) -> tuple[int, int, int, int]:
    fg_r, fg_g, fg_b, fg_a = foreground
    bg_r, bg_g, bg_b, bg_a = background
    
    fg_alpha = fg_a / 255.0
    bg_alpha = bg_a / 255.0
    
    out_alpha = fg_alpha + bg_alpha * (1 - fg_alpha)
    
    if out_alpha == 0:
        return (0, 0, 0, 0)
    
    out_r = int((fg_r * fg_alpha + bg_r * bg_alpha * (1 - fg_alpha)) / out_alpha)
    out_g = int((fg_g * fg_alpha + bg_g * bg_alpha * (1 - fg_alpha)) / out_alpha)
    out_b = int((fg_b * fg_alpha + bg_b * bg_alpha * (1 - fg_alpha)) / out_alpha)
    out_a = int(out_alpha * 255)
    
    return (out_r, out_g, out_b, out_a)


class Palette:
    """Frozen two-way lookup between colors and their generated names."""

    def __init__(self, color_to_name: dict[Color, str]):
        self._color_to_name = dict(color_to_name)
        self._name_to_color = {name: color for color, name in color_to_name.items()}

    def name_of(self, color: Color) -> str:
        if color not in self._color_to_name:
            raise KeyError(f"Unknown color '{color}'")
        return self._color_to_name[color]

    def color_of(self, name: str) -> Color:
        if name not in self._name_to_color:
            raise KeyError(f"Unknown color name '{name}'")
        return self._name_to_color[name]

    def __contains__(self, color: Color) -> bool:
        return color in self._color_to_name

    def __len__(self) -> int:
        return len(self._color_to_name)

    def items(self) -> list[tuple[str, Color]]:
        return [(name, color) for color, name in self._color_to_name.items()]


class PaletteBuilder:
    def __init__(self):
        self._color_to_name: dict[Color, str] = {}

    def add(self, color: Color) -> str:
        if color not in self._color_to_name:
            self._color_to_name[color] = f"c{len(self._color_to_name)}"
        return self._color_to_name[color]

    def build(self) -> Palette:
        return Palette(self._color_to_name)
