# helper_arcade/games/core/coerce_utils.py
from typing import Any
import re

from .errors import InvalidAnswerFormat

_INT_RE = re.compile(r"^[+-]?\d+$")


def coerce_answer(val: Any) -> int:
    """
    Coerce a submitted answer to int.
    Accepts ints, whole-number floats (JSON 12.0) and strings like " 12 ".
    """
    if isinstance(val, bool) or val is None:
        raise InvalidAnswerFormat()
    if isinstance(val, int):
        return val
    if isinstance(val, float):
        if val.is_integer():
            return int(val)
        raise InvalidAnswerFormat()
    if isinstance(val, str) and _INT_RE.match(val.strip()):
        try:
            return int(val.strip())
        except ValueError:
            # past the interpreter's int/str digit limit
            raise InvalidAnswerFormat() from None
    raise InvalidAnswerFormat()
