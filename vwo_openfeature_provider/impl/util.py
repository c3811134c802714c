import logging
from types import SimpleNamespace
from typing import Any, Mapping

log = logging.getLogger('vwo_openfeature_provider')

__BASE_TYPES__ = (str, float, int, bool)


def is_structured(value: Any) -> bool:
    """
    Returns True if the value is a structured object that must be converted to a plain dict before
    it can be handed back to OpenFeature.
    """
    if value is None or isinstance(value, __BASE_TYPES__):
        return False
    if isinstance(value, (Mapping, SimpleNamespace)):
        return True
    return callable(getattr(value, 'to_dict', None))


def to_mapping(value: Any) -> Any:
    """
    Converts structured objects returned by the VWO SDK into plain, insertion-ordered dicts.

    Mappings, ``SimpleNamespace`` instances and objects exposing ``to_dict()`` are converted, and
    nested mappings and lists are walked so that no vendor object survives inside the result.
    Anything else is returned unchanged.
    """
    if isinstance(value, list):
        return [to_mapping(item) for item in value]
    if not is_structured(value):
        return value

    if isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, SimpleNamespace):
        items = vars(value).items()
    else:
        items = value.to_dict().items()
    return {key: to_mapping(item) for key, item in items}
