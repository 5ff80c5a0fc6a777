# sales_dashboard/core/param_normalizer.py
"""
Turns raw query-string parameters into a typed FilterRequest.

Every raw value is first classified as Absent, Scalar or Multi so that the
filter logic downstream never has to guess whether it got a string, a list
or nothing at all.
"""
import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Union

from loguru import logger

from ..constants import (
    CATEGORICAL_FIELDS,
    END_DATE_PARAM,
    KEYWORD_PARAM,
    RANGE_PARAMS,
    SORT_PARAM,
    START_DATE_PARAM,
    TAGS_FIELD,
)
from ..models.errors import InvalidParameter
from ..models.query import DateRange, FilterRequest, NumericRange
from .helpers.date_utils import parse_calendar_date


@dataclass(frozen=True)
class Absent:
    pass


@dataclass(frozen=True)
class Scalar:
    value: str


@dataclass(frozen=True)
class Multi:
    values: List[str] = field(default_factory=list)


ParamValue = Union[Absent, Scalar, Multi]
ABSENT = Absent()


def classify(raw: Any) -> ParamValue:
    """Classify one raw value (None, a string, or a list of strings)"""
    if raw is None:
        return ABSENT
    if isinstance(raw, (list, tuple)):
        values = [str(v) for v in raw if v is not None]
        if not values:
            return ABSENT
        return Multi(values)
    return Scalar(str(raw))


def read_raw_params(source: Any) -> Dict[str, ParamValue]:
    """
    Collect parameters from a Starlette QueryParams/MultiDict or a plain mapping.

    Repeated keys (``?region=North&region=South``) become Multi values.
    """
    if hasattr(source, "multi_items"):
        grouped: Dict[str, List[str]] = {}
        for key, value in source.multi_items():
            grouped.setdefault(key, []).append(value)
        return {key: Scalar(values[0]) if len(values) == 1 else Multi(values)
                for key, values in grouped.items()}

    return {key: classify(value) for key, value in dict(source or {}).items()}


def text_value(param: ParamValue) -> Optional[str]:
    """Trimmed single value; empty means absent. Last value wins when repeated."""
    if isinstance(param, Scalar):
        raw = param.value
    elif isinstance(param, Multi):
        raw = param.values[-1]
    else:
        return None
    raw = raw.strip()
    return raw or None


def value_set(param: ParamValue) -> FrozenSet[str]:
    """Selection set with empty entries dropped"""
    if isinstance(param, Scalar):
        values = [param.value]
    elif isinstance(param, Multi):
        values = param.values
    else:
        return frozenset()
    return frozenset(v.strip() for v in values if v.strip())


def number_value(param: ParamValue, name: str) -> Optional[float]:
    """Float bound; anything unparsable only drops this bound"""
    raw = text_value(param)
    if raw is None:
        return None
    try:
        number = float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric value for {name}: {raw!r}")
        return None
    if not math.isfinite(number):
        logger.warning(f"Ignoring non-finite value for {name}: {raw!r}")
        return None
    return number


def date_value(param: ParamValue, name: str) -> Optional[date]:
    raw = text_value(param)
    if raw is None:
        return None
    try:
        return parse_calendar_date(raw)
    except ValueError:
        raise InvalidParameter(name, f"'{raw}' is not a valid date")


def normalize_params(source: Union[Mapping[str, Any], Any]) -> FilterRequest:
    """
    Build a FilterRequest from raw request parameters.

    Args:
        source: QueryParams, MultiDict, or a mapping of name -> str | list[str]

    Returns:
        FilterRequest with every absent filter left empty

    Raises:
        InvalidParameter: startDate/endDate is not a date
    """
    raw = read_raw_params(source)

    def get(name: str) -> ParamValue:
        return raw.get(name, ABSENT)

    categories = {}
    for field_name in CATEGORICAL_FIELDS:
        selected = value_set(get(field_name))
        if selected:
            categories[field_name] = selected

    ranges = {}
    for field_name, (min_param, max_param) in RANGE_PARAMS.items():
        bounds = NumericRange(
            min=number_value(get(min_param), min_param),
            max=number_value(get(max_param), max_param),
        )
        if not bounds.is_empty:
            ranges[field_name] = bounds

    filter_request = FilterRequest(
        keyword=text_value(get(KEYWORD_PARAM)),
        categories=categories,
        tags=value_set(get(TAGS_FIELD)),
        ranges=ranges,
        date_range=DateRange(
            start_date=date_value(get(START_DATE_PARAM), START_DATE_PARAM),
            end_date=date_value(get(END_DATE_PARAM), END_DATE_PARAM),
        ),
        sort_by=text_value(get(SORT_PARAM)),
    )
    logger.debug(f"Normalized filters: {filter_request}")
    return filter_request
