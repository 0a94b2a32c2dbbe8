"""
Shape checks for untrusted user data documents.

Each predicate is total and side-effect free; it only answers whether the
parsed JSON may be written to the dataset's storage keys.
"""

from typing import Any, Callable, Dict, Iterable, List

from ..errors import FormatError
from .models import FOUND_KEYS, DataSet


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a coordinate
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_plot_export(obj: Any) -> bool:
    """Check for a list of ``{"site": str, "plotPlans": list}`` records."""
    return isinstance(obj, list) and all(
        isinstance(item, dict)
        and isinstance(item.get("site"), str)
        and isinstance(item.get("plotPlans"), list)
        for item in obj
    )


def is_valid_pins_export(obj: Any) -> bool:
    """Check for a list of pins with a string icon and numeric ``pos.x``/``pos.y``."""
    if not isinstance(obj, list):
        return False

    for pin in obj:
        if not isinstance(pin, dict) or not isinstance(pin.get("icon"), str):
            return False
        pos = pin.get("pos")
        if not isinstance(pos, dict):
            return False
        if not (_is_number(pos.get("x")) and _is_number(pos.get("y"))):
            return False
    return True


def is_valid_found_export(obj: Any) -> bool:
    """Check for a map of found categories.

    At least one known found key must be present and every known key that
    is present must hold a list. Unknown keys are tolerated; they are never
    written.
    """
    if not isinstance(obj, dict):
        return False

    present = [key for key in FOUND_KEYS if key in obj]
    if not present:
        return False
    return all(isinstance(obj[key], list) for key in present)


VALIDATORS: Dict[DataSet, Callable[[Any], bool]] = {
    DataSet.PLOTS: is_valid_plot_export,
    DataSet.PINS: is_valid_pins_export,
    DataSet.FOUND: is_valid_found_export,
}


def validate_dataset(dataset: DataSet, obj: Any) -> None:
    """Raise FormatError naming ``dataset`` if ``obj`` fails its shape check."""
    if not VALIDATORS[dataset](obj):
        raise FormatError([dataset])


def matching_datasets(obj: Any, candidates: Iterable[DataSet]) -> List[DataSet]:
    """Return the candidates, in order, whose shape check accepts ``obj``."""
    return [dataset for dataset in candidates if VALIDATORS[dataset](obj)]
