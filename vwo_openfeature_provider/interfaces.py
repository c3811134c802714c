"""
This submodule describes the parts of the VWO SDK that the provider relies on.

The provider never imports the VWO SDK itself. Any client object with a matching ``get_flag``
method can be used, so these classes are mainly useful for writing test doubles.
"""

from abc import ABCMeta, abstractmethod
from typing import Any, Mapping


class FlagResult(metaclass=ABCMeta):
    """
    Interface for the result of a flag lookup in the VWO SDK.
    """

    @abstractmethod
    def is_enabled(self) -> bool:
        """
        Returns True if the flag is enabled for the context it was evaluated with.
        """

    @abstractmethod
    def get_variables(self) -> Mapping[str, Any]:
        """
        Returns the variables of the flag, keyed by variable name. Values may be booleans, strings,
        integers, floats or structured objects.
        """


class VWOClient(metaclass=ABCMeta):
    """
    Interface for the VWO SDK client.
    """

    @abstractmethod
    def get_flag(self, flag_key: str, context: dict) -> FlagResult:
        """
        Evaluates a flag for a VWO context.

        :param flag_key: the key of the flag
        :param context: a dict with the optional fields ``id``, ``userAgent``, ``ipAddress``,
          ``customVariables`` and ``variationTargetingVariables``
        :return: the flag result
        """
