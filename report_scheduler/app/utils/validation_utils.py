"""
Validation utilities for scheduler options.

Pure predicates used by the entity validators. Recording errors is the
caller's job (see ErrorCollector in report_scheduler.app.validators).

Two membership predicates with deliberately different strength:
- value_in_set: EVERY candidate must be one of the allowed codes
- pattern_value_in_set: AT LEAST ONE candidate must match AT LEAST ONE pattern
"""
import json
import re
from typing import Any, Iterable, List


def as_code(value: Any) -> str:
    """
    Normalize a value to the string form used for code comparison.

    Examples:
        >>> as_code(True)
        'true'
        >>> as_code(None)
        ''
        >>> as_code(15)
        '15'
        >>> as_code(15.0)
        '15'
        >>> as_code("Mon")
        'Mon'
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, sort_keys=True)


def as_candidates(value: Any) -> List[Any]:
    """Wrap a scalar in a singleton list; lists and tuples are returned as lists."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def format_set(values: Iterable[Any]) -> str:
    """Render a set of codes or patterns comma-joined for error messages."""
    return ", ".join(as_code(v) for v in values)


def split_codes(value: Any, separator: str = ",") -> List[str]:
    """
    Split a separated code list ("Mon,Wed,Fri") into its codes.

    No trimming is applied: "Mon, Wed" yields "Mon" and " Wed".
    """
    return as_code(value).split(separator)


def value_in_set(value: Any, allowed: Iterable[Any]) -> bool:
    """
    Check that every candidate of value is one of the allowed codes.

    Args:
        value: Scalar or list of candidates
        allowed: Allowed codes (compared via as_code)

    Returns:
        True if no candidate falls outside the allowed set

    Examples:
        >>> value_in_set("Daily", ["Hourly", "Daily"])
        True
        >>> value_in_set(["Daily", "Never"], ["Hourly", "Daily"])
        False
        >>> value_in_set(15, range(1, 32))
        True
    """
    allowed_codes = {as_code(v) for v in allowed}
    return all(as_code(candidate) in allowed_codes for candidate in as_candidates(value))


def pattern_value_in_set(value: Any, patterns: Iterable[str]) -> bool:
    """
    Check that at least one candidate of value matches at least one pattern.

    Patterns are regular expressions applied with re.search (unanchored):
    "CAL" matches "CAL F" too.

    Examples:
        >>> pattern_value_in_set("2 Quarters", [r"\\d+ Quarters", "YTD"])
        True
        >>> pattern_value_in_set("2 Months", [r"\\d+ Quarters", "YTD"])
        False
    """
    patterns = list(patterns)
    for candidate in as_candidates(value):
        text = as_code(candidate)
        for pattern in patterns:
            if re.search(pattern, text):
                return True
    return False
