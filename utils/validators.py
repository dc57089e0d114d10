import numbers
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from services.exceptions import InvalidArgument


VALID_COMPONENTS = ("route", "locality", "administrative_area", "postal_code", "country")
COMPONENT_COLUMNS = ("component", "value")


def coordinates_valid(lat: float, lng: float) -> bool:
    return -90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0


def has_required_columns(columns: Iterable[str], required: Iterable[str]) -> bool:
    cols = set(str(c).lower() for c in columns)
    return all(r.lower() in cols for r in required)


def check_logical(value: Any, parameter: str = "simplify") -> bool:
    if not isinstance(value, bool):
        raise InvalidArgument(parameter, "expected a single logical value (True or False)")
    return value


def check_address(address: Any) -> str:
    if not isinstance(address, str):
        raise InvalidArgument("address", "expected a single string")
    normalized = address.strip()
    if not normalized:
        raise InvalidArgument("address", "expected a non-empty string")
    return normalized.lower()


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def format_coordinate(value: float) -> str:
    # shortest round-trip form, without a trailing ".0" on integral values
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _is_pair(value: Any) -> bool:
    if isinstance(value, (str, bytes, Mapping)):
        return False
    return hasattr(value, "__len__") and hasattr(value, "__getitem__") and len(value) == 2


def _validate_point(point: Any, label: str) -> Tuple[float, float]:
    if not _is_pair(point):
        raise InvalidArgument("bounds", f"{label} must be a [lat, lng] pair")
    lat, lng = point[0], point[1]
    if not (_is_number(lat) and _is_number(lng)):
        raise InvalidArgument("bounds", f"{label} coordinates must be numeric")
    if not coordinates_valid(lat, lng):
        raise InvalidArgument(
            "bounds",
            f"{label} is out of range; latitude must be in [-90, 90] and longitude in [-180, 180]",
        )
    return float(lat), float(lng)


def validate_bounds(bounds: Any) -> Optional[str]:
    """
    Validate a ``[[sw_lat, sw_lng], [ne_lat, ne_lng]]`` pair and serialize it
    as ``"lat1,lng1|lat2,lng2"``.
    """
    if bounds is None:
        return None
    if not _is_pair(bounds):
        raise InvalidArgument("bounds", "expected a list of two [lat, lng] points (south-west, north-east)")
    south_west = _validate_point(bounds[0], "south-west point")
    north_east = _validate_point(bounds[1], "north-east point")
    return "|".join(
        ",".join(format_coordinate(c) for c in point) for point in (south_west, north_east)
    )


def validate_language(language: Any) -> Optional[str]:
    if language is None:
        return None
    if not isinstance(language, str):
        raise InvalidArgument("language", "expected a single string language code, e.g. 'en'")
    return language


def validate_region(region: Any) -> Optional[str]:
    if region is None:
        return None
    if not isinstance(region, str):
        raise InvalidArgument("region", "expected a single string ccTLD region code, e.g. 'au'")
    return region


def _component_pairs(components: Any) -> List[Tuple[Any, Any]]:
    if isinstance(components, pd.DataFrame):
        columns = [str(c) for c in components.columns]
        if len(columns) != 2 or not has_required_columns(columns, COMPONENT_COLUMNS):
            raise InvalidArgument("components", "expected exactly two columns: component and value")
        df = components.rename(columns={c: str(c).lower() for c in components.columns})
        return list(zip(df["component"].tolist(), df["value"].tolist()))

    if isinstance(components, (str, bytes)) or not isinstance(components, Sequence):
        raise InvalidArgument("components", "expected a DataFrame or a list of (component, value) pairs")

    pairs: List[Tuple[Any, Any]] = []
    for item in components:
        if isinstance(item, Mapping):
            if set(item.keys()) != set(COMPONENT_COLUMNS):
                raise InvalidArgument("components", "each entry must have exactly the keys component and value")
            pairs.append((item["component"], item["value"]))
        elif isinstance(item, Sequence) and not isinstance(item, (str, bytes)) and len(item) == 2:
            pairs.append((item[0], item[1]))
        else:
            raise InvalidArgument("components", "each entry must be a (component, value) pair")
    return pairs


def validate_components(components: Any) -> Optional[str]:
    if components is None:
        return None
    pairs = _component_pairs(components)
    if not pairs:
        return None
    parts: List[str] = []
    for component, value in pairs:
        if component not in VALID_COMPONENTS:
            raise InvalidArgument(
                "components",
                f"unrecognised component {component!r}; valid components are {', '.join(VALID_COMPONENTS)}",
            )
        if _is_number(value):
            if pd.isna(value):
                raise InvalidArgument("components", f"value for {component!r} is missing")
            value = format_coordinate(value) if isinstance(value, float) else str(value)
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgument("components", f"value for {component!r} must be a non-empty string")
        parts.append(f"{component}:{value}")
    return "|".join(parts)
