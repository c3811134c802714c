"""
This submodule converts OpenFeature evaluation contexts into the context dicts used by the VWO SDK.
"""

from typing import Any, Optional

from openfeature.evaluation_context import EvaluationContext

USER_AGENT = 'userAgent'
IP_ADDRESS = 'ipAddress'
CUSTOM_VARIABLES = 'customVariables'
VARIATION_TARGETING_VARIABLES = 'variationTargetingVariables'

#: Attribute that selects a single variable of a flag.
VARIABLE_KEY = 'key'


def to_vwo_context(evaluation_context: Optional[EvaluationContext]) -> dict:
    """Converts an OpenFeature evaluation context into a VWO context.

    A context without a targeting key produces an empty dict; none of the other fields are set in
    that case. Otherwise ``id`` is the targeting key, ``userAgent`` and ``ipAddress`` default to
    empty strings, and ``customVariables`` and ``variationTargetingVariables`` are only copied
    when present.

    :param evaluation_context: the OpenFeature context, if any
    :return: a new dict for the VWO SDK
    """
    vwo_context = {}  # type: dict
    if evaluation_context is None or evaluation_context.targeting_key is None:
        return vwo_context

    attributes = evaluation_context.attributes or {}

    vwo_context['id'] = evaluation_context.targeting_key
    vwo_context[USER_AGENT] = _or_default(attributes.get(USER_AGENT), "")
    vwo_context[IP_ADDRESS] = _or_default(attributes.get(IP_ADDRESS), "")

    custom_variables = attributes.get(CUSTOM_VARIABLES)
    if custom_variables is not None:
        vwo_context[CUSTOM_VARIABLES] = custom_variables

    variation_targeting_variables = attributes.get(VARIATION_TARGETING_VARIABLES)
    if variation_targeting_variables is not None:
        vwo_context[VARIATION_TARGETING_VARIABLES] = variation_targeting_variables

    return vwo_context


def variable_key(evaluation_context: Optional[EvaluationContext]) -> Optional[Any]:
    """
    Returns the ``key`` attribute of the context, or None if there is no context or the attribute
    is missing or empty.
    """
    if evaluation_context is None:
        return None
    key = (evaluation_context.attributes or {}).get(VARIABLE_KEY)
    return key if key else None


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value
