"""
Frequency option rules.

For every frequency, the alternative shapes `frequency_option` may take. A
payload must match exactly one shape: same field names, none extra, none
missing. Each field's allowed values are a literal tuple or a code-set
endpoint reference.

| Frequency     | Shapes                                            |
|---------------|---------------------------------------------------|
| Hourly        | {hour_of_day}                                     |
| Daily         | {weekdays_only}                                   |
| Weekly        | {day_of_week} (comma-separated list of codes)     |
| Bi-Monthly    | none: frequency_option must be absent             |
| Monthly       | {day_of_month} or {week_of_month, day_of_week}    |
| Quarterly     | {day_of_month}                                    |
| Semi-Annually | {day_of_month, month_of_year}                     |
| Yearly        | {day_of_month, month_of_year}                     |

Frequencies missing from the table behave like Bi-Monthly.
"""
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Union

from report_scheduler.app.schemas.scheduler_options import ENDPOINT_PREFIX, Frequency, OptionShape

# Code-set endpoints
FREQUENCY_ENDPOINT = "codes/srofrequency"
FREQUENCY_OPTION_ENDPOINT = "codes/srofrequencyopt"
HOUR_OF_DAY_ENDPOINT = "codes/srohourofday"
DAY_OF_WEEK_ENDPOINT = "codes/srodow"
WEEK_OF_MONTH_ENDPOINT = "codes/srowom"
MONTH_OF_YEAR_ENDPOINT = "codes/sromoy"

DAYS_OF_MONTH = tuple(range(1, 32))
BOOLEANS = (True, False)


def endpoint_ref(endpoint: str) -> str:
    """Build an allowed-values spec referencing a code-set endpoint."""
    return ENDPOINT_PREFIX + endpoint


def endpoint_of(spec: Union[str, Tuple[Any, ...], None]) -> Optional[str]:
    """Return the endpoint referenced by an allowed-values spec, or None for literal specs."""
    if isinstance(spec, str) and spec.startswith(ENDPOINT_PREFIX):
        return spec[len(ENDPOINT_PREFIX):]
    return None


_DAY_OF_MONTH_AND_MONTH = OptionShape(options={
    "day_of_month": DAYS_OF_MONTH,
    "month_of_year": endpoint_ref(MONTH_OF_YEAR_ENDPOINT),
    })

FREQUENCY_OPTION_RULES: Mapping[str, Tuple[OptionShape, ...]] = MappingProxyType({
    Frequency.HOURLY: (
        OptionShape(options={"hour_of_day": endpoint_ref(HOUR_OF_DAY_ENDPOINT)}),
        ),
    Frequency.DAILY: (
        OptionShape(options={"weekdays_only": BOOLEANS}),
        ),
    Frequency.WEEKLY: (
        OptionShape(options={"day_of_week": endpoint_ref(DAY_OF_WEEK_ENDPOINT)}),
        ),
    Frequency.BI_MONTHLY: (),
    Frequency.MONTHLY: (
        OptionShape(options={"day_of_month": DAYS_OF_MONTH}),
        OptionShape(options={
            "week_of_month": endpoint_ref(WEEK_OF_MONTH_ENDPOINT),
            "day_of_week": endpoint_ref(DAY_OF_WEEK_ENDPOINT),
            }),
        ),
    Frequency.QUARTERLY: (
        OptionShape(options={"day_of_month": DAYS_OF_MONTH}),
        ),
    Frequency.SEMI_ANNUALLY: (_DAY_OF_MONTH_AND_MONTH,),
    Frequency.YEARLY: (_DAY_OF_MONTH_AND_MONTH,),
    })


def get_option_shapes(frequency: Any) -> Tuple[OptionShape, ...]:
    """Allowed shapes for a frequency (empty when the option must be absent)."""
    if not isinstance(frequency, str):
        return ()
    try:
        return FREQUENCY_OPTION_RULES[Frequency(frequency)]
    except ValueError:
        return ()


def match_shape(frequency: Any, field_names: Iterable[str]) -> Optional[OptionShape]:
    """Return the first shape of the frequency whose field names equal the given ones."""
    field_names = frozenset(field_names)
    for shape in get_option_shapes(frequency):
        if shape.matches(field_names):
            return shape
    return None


def resolve_allowed_values(
    shape: OptionShape,
    option_name: str,
    lookup: Callable[[str], Tuple[str, ...]]
    ) -> Tuple[Any, ...]:
    """
    Resolve the allowed values of one field of a shape.

    Endpoint references are resolved through `lookup` (typically
    CodeSetCache.lookup). Returns an empty tuple when nothing resolves.
    """
    spec = shape.options.get(option_name)
    if spec is None:
        return ()
    endpoint = endpoint_of(spec)
    if endpoint is not None:
        return tuple(lookup(endpoint))
    if isinstance(spec, str):
        return (spec,)
    return tuple(spec)
