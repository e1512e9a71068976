"""
Error taxonomy for the geometry core.

Every algorithm that cannot produce a result raises one of these instead of
returning a placeholder value, so callers can tell a computed zero from a
failed computation. All of them are ``ValueError`` subclasses.
"""


class GeometryError(ValueError):
    """Base class for geometry failures."""


class DegenerateGeometryError(GeometryError):
    """A line with fewer than 2 coordinates, a ring with fewer than 3, or a
    polygon whose exterior has no positive area."""


class EmptyGeometryError(GeometryError):
    """A polygon, multi-geometry or collection without any coordinates or
    members."""


class UnsupportedVariantError(GeometryError, TypeError):
    """An object that is not one of the recognized geometry variants."""

    def __init__(self, obj: object, context: str = ""):
        self.obj = obj
        where = f" in {context}" if context else ""
        super().__init__(f"unsupported geojson type {type(obj).__name__}{where}")


class NoResultError(GeometryError):
    """A composite query found no qualifying sub-geometry."""
