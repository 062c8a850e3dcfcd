"""Check that a ``a+b=c`` equation of non-negative integers holds."""

_DIGITS = frozenset("0123456789")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_BAD_CHARS = "ERR: valid chars are 0-9, +, = Only."


class _EquationError(ValueError):
    """The equation text is malformed."""


def _is_all_digit(part: str) -> bool:
    return bool(part) and all(ch in _DIGITS for ch in part)


def _split(text: str) -> tuple[str, str, str]:
    left, _, rest = text.partition("+")
    right, _, total = rest.partition("=")
    for part in (left, right, total):
        if not _is_all_digit(part):
            raise _EquationError(_BAD_CHARS)
    return left, right, total


def _to_int(part: str) -> int:
    value = int(part)
    if not _INT_MIN <= value <= _INT_MAX:
        raise _EquationError(f"out of range: {part}")
    return value


def validate_sum_equation(text: str) -> bool:
    """Return True if ``text`` is a well-formed ``a+b=c`` whose sum holds.

    Prints ``PASS`` or ``FAIL`` and, for malformed input, the reason.
    """
    try:
        left, right, total = (_to_int(part) for part in _split(text))
    except _EquationError as exc:
        print(f"FAIL (EXCEPTION: {exc})")
        return False
    if left + right == total:
        print("PASS")
        return True
    print("FAIL")
    return False