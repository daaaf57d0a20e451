import inspect
import sys
from contextlib import contextmanager


@contextmanager
def max_call_depth(n):
    cur_depth = len(inspect.stack(0))
    orig = sys.getrecursionlimit()
    try:
        # Our measure of the current stack depth can be off by a bit. Trying to
        # set a recursionlimit < the current depth will raise a RecursionError.
        # We just try again with a slightly higher limit, bailing after an
        # unreasonable amount of adjustments.
        for i in range(64):
            try:
                sys.setrecursionlimit(cur_depth + i + n)
                break
            except RecursionError:
                pass
        else:
            raise ValueError("Failed to set low recursion limit, something is wrong here")
        yield
    finally:
        sys.setrecursionlimit(orig)


def nested(n, is_array=True):
    """A builtin object nested ``n`` containers deep"""
    obj = []
    for _ in range(n):
        obj = [obj] if is_array else {"a": obj}
    return obj
