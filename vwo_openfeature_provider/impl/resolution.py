from typing import Any, Dict, Optional, Union

from openfeature.exception import ErrorCode
from openfeature.flag_evaluation import FlagResolutionDetails, Reason

from vwo_openfeature_provider.impl.util import to_mapping


def build_resolution_details(value: Any, error: Optional[str] = None, reason: Optional[Union[str, Reason]] = None, error_code: Optional[ErrorCode] = None) -> FlagResolutionDetails:
    """
    Packages a resolved value for OpenFeature.

    Structured values are normalized to plain dicts first. The error message, reason and error code
    are only attached when they are given. The value is not checked against the requested flag type.
    """
    fields = {'value': to_mapping(value)}  # type: Dict[str, Any]
    if error is not None:
        fields['error_message'] = error
    if reason is not None:
        fields['reason'] = reason
    if error_code is not None:
        fields['error_code'] = error_code
    return FlagResolutionDetails(**fields)


def error_details(default_value: Any, e: Exception) -> FlagResolutionDetails:
    message = str(e) or repr(e)
    return build_resolution_details(default_value, message, Reason.ERROR, ErrorCode.GENERAL)
