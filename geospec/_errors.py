from typing import Optional

__all__ = (
    "GeoJSONError",
    "DecodeError",
    "JSONSyntaxError",
    "ValidationError",
    "MalformedGeometryError",
    "MissingFieldError",
    "TypeMismatchError",
    "UnsupportedGeometryTypeError",
    "UnsupportedTopLevelTypeError",
    "InvalidIdentifierError",
    "InvalidFeatureTypeError",
    "DepthLimitError",
    "EncodeError",
)


class GeoJSONError(Exception):
    """The base exception class for all errors in geospec"""


class DecodeError(GeoJSONError, ValueError):
    """An error occurred while decoding an object"""


class JSONSyntaxError(DecodeError):
    """The input is not valid JSON"""


class ValidationError(DecodeError):
    """The input is valid JSON, but doesn't match the GeoJSON schema.

    Parameters
    ----------
    msg : str
        A description of the problem.
    path : str, optional
        The location of the offending node, rendered like ``$.features[0]``.
    """

    def __init__(self, msg: str, path: Optional[str] = None):
        self.msg = msg
        self.path = path
        if path is not None:
            msg = f"{msg} - at `{path}`"
        super().__init__(msg)


class MalformedGeometryError(ValidationError):
    """A geometry node or one of its coordinate arrays is malformed"""


class MissingFieldError(ValidationError):
    """A required member is absent"""

    def __init__(self, field: str, path: Optional[str] = None):
        self.field = field
        super().__init__(f"Object missing required field `{field}`", path)


class TypeMismatchError(ValidationError):
    """A member exists but has the wrong JSON kind"""

    def __init__(self, expected: str, got: str, path: Optional[str] = None):
        self.expected = expected
        self.got = got
        super().__init__(f"Expected `{expected}`, got `{got}`", path)


class UnsupportedGeometryTypeError(ValidationError):
    """A geometry ``type`` string names no supported geometry kind"""

    def __init__(self, type_name, path: Optional[str] = None):
        self.type_name = type_name
        super().__init__(self._describe(type_name), path)

    @staticmethod
    def _describe(type_name):
        return f"Unsupported geometry type {type_name!r}"


class UnsupportedTopLevelTypeError(UnsupportedGeometryTypeError):
    """A document's ``type`` is missing or names no GeoJSON object"""

    @staticmethod
    def _describe(type_name):
        if type_name is None:
            return "GeoJSON object missing required field `type`"
        return f"Unsupported GeoJSON type {type_name!r}"


class InvalidIdentifierError(ValidationError):
    """A feature ``id`` is neither a string nor a number"""


class InvalidFeatureTypeError(ValidationError):
    """A feature's ``type`` is present but isn't ``"Feature"``"""

    def __init__(self, type_name, path: Optional[str] = None):
        self.type_name = type_name
        super().__init__(
            f"Feature `type` must be 'Feature', got {type_name!r}", path
        )


class DepthLimitError(ValidationError):
    """The input is nested deeper than the configured limit"""


class EncodeError(GeoJSONError):
    """An error occurred while encoding an object"""
