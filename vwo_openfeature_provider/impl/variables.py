from enum import Enum
from typing import Any, Mapping, Optional

from vwo_openfeature_provider.impl.util import is_structured


class VariableType(Enum):
    """
    The kinds of value a VWO flag variable can hold.
    """

    BOOLEAN = 'boolean'
    STRING = 'string'
    INTEGER = 'integer'
    FLOAT = 'float'
    OBJECT = 'object'

    @classmethod
    def of(cls, value: Any) -> Optional['VariableType']:
        """
        Classifies a variable value, or returns None if it is not a recognized kind.

        ``bool`` is checked before ``int`` because it is a subclass of it, and integers are never
        reported as floats.
        """
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, list) or is_structured(value):
            return cls.OBJECT
        return None


def find_variable(variables: Optional[Mapping[str, Any]], name: Any, variable_type: VariableType) -> Optional[Any]:
    """
    Scans the variables of a flag in order and returns the value of the first one called ``name``
    whose value is of the requested kind, or None if there is no such variable.
    """
    if not variables:
        return None

    for variable_name, value in variables.items():
        if variable_name == name and VariableType.of(value) is variable_type:
            return value
    return None
