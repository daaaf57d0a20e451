from ._errors import DepthLimitError, EncodeError

DEFAULT_MAX_DEPTH = 256

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

# Names used in error messages for each JSON kind msgspec decodes into
_KINDS = {
    type(None): "null",
    bool: "bool",
    int: "int",
    float: "float",
    str: "str",
    list: "array",
    tuple: "array",
    dict: "object",
}


def json_kind(obj):
    """The JSON kind name of a builtin object, for use in error messages"""
    return _KINDS.get(type(obj), type(obj).__name__)


def is_number(obj):
    return isinstance(obj, (int, float)) and not isinstance(obj, bool)


# Paths are linked lists of ``(parent, key)`` pairs, with ``None`` as the
# root. They're only rendered to a string when an error is raised.


def render_path(path):
    parts = []
    while path is not None:
        path, key = path
        parts.append(f"[{key}]" if isinstance(key, int) else f".{key}")
    return "$" + "".join(reversed(parts))


def enter(depth, max_depth, path):
    """Descend into a container, raising if that goes past ``max_depth``"""
    depth += 1
    if depth > max_depth:
        raise DepthLimitError(
            f"Maximum nesting depth of {max_depth} exceeded", render_path(path)
        )
    return depth


def enter_encode(depth, max_depth):
    depth += 1
    if depth > max_depth:
        raise EncodeError(f"Maximum nesting depth of {max_depth} exceeded")
    return depth


def check_max_depth(max_depth):
    if not isinstance(max_depth, int) or isinstance(max_depth, bool):
        raise TypeError("max_depth must be an int")
    if max_depth < 1:
        raise ValueError("max_depth must be >= 1")
    return max_depth
