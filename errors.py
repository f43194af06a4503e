from __future__ import annotations


class SVGError(ValueError):
    def __init__(self, message: str, value: str = None, position: int = None):
        super().__init__(message)
        self.value = value
        self.position = position


class PathSyntaxError(SVGError):
    pass


class UnknownElementError(SVGError):
    pass


class UnknownAttributeError(SVGError):
    pass


class ColorError(SVGError):
    pass


class SizeError(SVGError):
    pass


class ViewBoxError(SVGError):
    pass


class ValidationError(SVGError):
    pass


class TriangulationError(SVGError):
    """Raised when a fill has too few vertices to build a triangle fan."""
