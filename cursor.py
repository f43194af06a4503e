from __future__ import annotations

from errors import PathSyntaxError
from geometry import Point

WHITESPACE = ' \t\n\r\f'
NUMBER_START = '0123456789+-.'
DIGITS = '0123456789'


class Cursor:
    def __init__(self, data: str):
        self.data = data
        self.index = 0

    def has_next(self) -> bool:
        return self.index < len(self.data)

    def current(self) -> str:
        if not self.has_next():
            raise IndexError(f"Cursor exhausted at index {self.index}")
        return self.data[self.index]

    def move(self):
        self.index += 1

    def skip_spaces(self):
        while self.has_next() and self.data[self.index] in WHITESPACE:
            self.index += 1

    def skip_spaces_and_commas(self):
        while self.has_next() and self.data[self.index] in WHITESPACE + ',':
            self.index += 1

    def at_number(self) -> bool:
        return self.has_next() and self.data[self.index] in NUMBER_START

    def _consume_digits(self) -> str:
        start = self.index
        while self.has_next() and self.data[self.index] in DIGITS:
            self.index += 1
        return self.data[start:self.index]

    def _error(self, message: str, start: int) -> PathSyntaxError:
        if self.has_next():
            ch = self.current()
            message = f"{message}: found '{ch}' (U+{ord(ch):04X}) at index {self.index}"
        else:
            message = f"{message}: unexpected end of path data at index {self.index}"
        return PathSyntaxError(message, self.data[start:self.index + 1], self.index)

    def parse_number(self) -> float:
        # [sign] digits [. digits] [(e|E) [sign] digits]; stops at a second '.' or a bare sign
        start = self.index
        if self.has_next() and self.data[self.index] in '+-':
            self.index += 1

        integer_part = self._consume_digits()
        fraction_part = ''
        if self.has_next() and self.data[self.index] == '.':
            self.index += 1
            fraction_part = self._consume_digits()

        if not integer_part and not fraction_part:
            raise self._error("Malformed number", start)

        if self.has_next() and self.data[self.index] in 'eE':
            self.index += 1
            if self.has_next() and self.data[self.index] in '+-':
                self.index += 1
            if not self._consume_digits():
                raise self._error("Malformed exponent", start)

        return float(self.data[start:self.index])

    def parse_point(self) -> Point:
        x = self.parse_number()
        self.skip_spaces_and_commas()
        y = self.parse_number()
        return Point(x, y)

    def parse_flag(self) -> bool:
        start = self.index
        if not self.has_next() or self.data[self.index] not in '01':
            raise self._error("Invalid arc flag", start)
        flag = self.data[self.index] == '1'
        self.index += 1
        return flag


def parse_points(data: str) -> list[Point]:
    cursor = Cursor(data)
    points = []
    cursor.skip_spaces_and_commas()
    while cursor.has_next():
        points.append(cursor.parse_point())
        cursor.skip_spaces_and_commas()
    return points
