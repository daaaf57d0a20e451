import logging
from typing import Any, Optional

import msgspec

from ._decode import Converter, check_type
from ._encode import to_builtins as _to_builtins
from ._errors import DepthLimitError, EncodeError, JSONSyntaxError
from ._types import GeoJSON
from ._utils import DEFAULT_MAX_DEPTH, check_max_depth

__all__ = ("Decoder", "Encoder", "decode", "encode")

logger = logging.getLogger(__name__)


def __dir__():
    return __all__


def _read(buf):
    # File-like objects are read whole, streaming isn't supported
    if hasattr(buf, "read"):
        buf = buf.read()
    if not isinstance(buf, (str, bytes, bytearray, memoryview)):
        raise TypeError(
            f"Expected `str`, bytes-like, or a readable file, got `{type(buf).__name__}`"
        )
    return buf


class Decoder:
    """A GeoJSON decoder.

    Parameters
    ----------
    type : type, optional
        The kind of object to decode. Defaults to `GeoJSON`, which accepts any
        geometry, feature, or feature collection (or ``null``). May also be
        `Geometry`, `Feature`, `FeatureCollection`, or a single geometry type
        like `Point`, in which case any other document is an error.
    require_properties : bool, optional
        If True, features missing a ``properties`` member are an error.
        Otherwise they decode with empty properties. Default is False.
    max_depth : int, optional
        The maximum nesting depth of arrays and objects accepted. Default
        is 256.
    """

    def __init__(
        self,
        type: Any = GeoJSON,
        *,
        require_properties: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.type = check_type(type)
        self.require_properties = require_properties
        self.max_depth = check_max_depth(max_depth)
        self._decoder = msgspec.json.Decoder()
        self._converter = Converter(
            require_properties=require_properties, max_depth=max_depth
        )

    def __repr__(self):
        return f"Decoder({self.type!r})"

    def decode(self, buf):
        """Deserialize a GeoJSON document.

        Parameters
        ----------
        buf : str, bytes-like, or file-like
            The document to decode. File-like objects are read to the end.

        Returns
        -------
        obj : GeoJSON or None
            The decoded object. ``None`` is only returned for a ``null``
            document when decoding `GeoJSON`.

        Raises
        ------
        JSONSyntaxError
            If ``buf`` isn't valid JSON.
        ValidationError
            If ``buf`` is valid JSON, but not valid GeoJSON of the requested
            type. The raised exception is a subclass naming the problem.
        """
        buf = _read(buf)
        try:
            obj = self._decoder.decode(buf)
        except msgspec.DecodeError as exc:
            raise JSONSyntaxError(str(exc)) from None
        except RecursionError:
            raise DepthLimitError("Maximum recursion depth exceeded") from None
        out = self._converter.convert(obj, self.type)
        logger.debug(
            "Decoded %s from a document of length %d", type(out).__name__, len(buf)
        )
        return out


class Encoder:
    """A GeoJSON encoder.

    Parameters
    ----------
    max_depth : int, optional
        The maximum nesting depth of arrays and objects written. Default
        is 256.
    """

    def __init__(self, *, max_depth: int = DEFAULT_MAX_DEPTH):
        self.max_depth = check_max_depth(max_depth)
        self._encoder = msgspec.json.Encoder()

    def __repr__(self):
        return f"Encoder(max_depth={self.max_depth})"

    def encode(self, obj) -> bytes:
        """Serialize a GeoJSON object.

        Parameters
        ----------
        obj : GeoJSON or None
            The object to serialize.

        Returns
        -------
        data : bytes
            The serialized object.

        Raises
        ------
        EncodeError
            If ``obj`` holds a value that can't be written.
        TypeError
            If ``obj`` (or a geometry inside it) isn't a supported type.
        """
        try:
            tree = _to_builtins(obj, self.max_depth)
        except RecursionError:
            raise EncodeError("Maximum recursion depth exceeded") from None
        out = self._encoder.encode(tree)
        logger.debug("Encoded %s as %d bytes", type(obj).__name__, len(out))
        return out


def decode(
    buf,
    *,
    type: Any = GeoJSON,
    require_properties: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Optional[Any]:
    """Deserialize a GeoJSON document.

    Parameters
    ----------
    buf : str, bytes-like, or file-like
        The document to decode.
    type : type, optional
        The kind of object to decode, see `Decoder`. Defaults to `GeoJSON`.
    require_properties : bool, optional
        Whether features must have a ``properties`` member. Default is False.
    max_depth : int, optional
        The maximum nesting depth accepted. Default is 256.

    Returns
    -------
    obj : GeoJSON or None
        The decoded object.

    See Also
    --------
    Decoder.decode
    """
    return Decoder(
        type, require_properties=require_properties, max_depth=max_depth
    ).decode(buf)


def encode(obj, *, max_depth: int = DEFAULT_MAX_DEPTH) -> bytes:
    """Serialize a GeoJSON object as JSON.

    Parameters
    ----------
    obj : GeoJSON or None
        The object to serialize.
    max_depth : int, optional
        The maximum nesting depth written. Default is 256.

    Returns
    -------
    data : bytes
        The serialized object.

    See Also
    --------
    Encoder.encode
    """
    return Encoder(max_depth=max_depth).encode(obj)
