"""
This submodule contains the OpenFeature provider that resolves flags with a VWO client.
"""

import logging
import traceback
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Union

from openfeature.evaluation_context import EvaluationContext
from openfeature.flag_evaluation import FlagResolutionDetails
from openfeature.hook import Hook
from openfeature.provider import AbstractProvider, Metadata

from vwo_openfeature_provider.config import Config
from vwo_openfeature_provider.context import to_vwo_context, variable_key
from vwo_openfeature_provider.impl.resolution import build_resolution_details, error_details
from vwo_openfeature_provider.impl.variables import VariableType, find_variable
from vwo_openfeature_provider.interfaces import FlagResult

PROVIDER_NAME = 'VWOProvider'


class VWOProvider(AbstractProvider):
    """An OpenFeature provider backed by a VWO client.

    The provider translates OpenFeature evaluation contexts into VWO contexts, asks the VWO client
    for the flag, and picks a value of the requested type out of the flag result. It never raises:
    if anything goes wrong the default value is returned together with an error message.

    Register it with OpenFeature like any other provider::

        from openfeature import api

        api.set_provider(VWOProvider(vwo_client))

    Provider instances hold no mutable state apart from the logger, so they are as thread-safe as
    the VWO client they wrap.
    """

    def __init__(self, vwo_client: Any, config: Optional[Config] = None):
        """Constructs a new VWOProvider instance.

        :param vwo_client: the VWO client used to evaluate flags
        :param config: optional custom configuration
        """
        super().__init__()
        config = config or Config()
        self.__client = vwo_client
        self.__hooks = config.hooks  # type: List[Hook]
        self.__logger = config.logger
        self.__metadata = Metadata(name=PROVIDER_NAME)

    def get_client(self) -> Any:
        """
        Returns the VWO client used by this provider, for applications that also need to call the
        VWO SDK directly.
        """
        return self.__client

    def set_logger(self, logger: logging.Logger):
        """
        Replaces the logger the provider writes diagnostics to.

        :param logger: the new logger
        """
        self.__logger = logger

    def get_metadata(self) -> Metadata:
        return self.__metadata

    def get_provider_hooks(self) -> List[Hook]:
        return list(self.__hooks)

    def resolve_boolean_details(self, flag_key: str, default_value: bool, evaluation_context: Optional[EvaluationContext] = None) -> FlagResolutionDetails[bool]:
        """Resolves a boolean flag.

        Without a ``key`` attribute in the context this is the enabled state of the flag, not the
        default value. With one, it is the boolean variable of that name, or the default value.
        """

        def extract(flag: FlagResult, key: Optional[Any]) -> Any:
            variables = flag.get_variables()
            if key is None:
                return flag.is_enabled()
            return self.__typed_variable(variables, key, VariableType.BOOLEAN, default_value)

        return self.__resolve(flag_key, default_value, evaluation_context, extract)

    def resolve_string_details(self, flag_key: str, default_value: str, evaluation_context: Optional[EvaluationContext] = None) -> FlagResolutionDetails[str]:
        return self.__resolve_variable(flag_key, default_value, evaluation_context, VariableType.STRING)

    def resolve_integer_details(self, flag_key: str, default_value: int, evaluation_context: Optional[EvaluationContext] = None) -> FlagResolutionDetails[int]:
        return self.__resolve_variable(flag_key, default_value, evaluation_context, VariableType.INTEGER)

    def resolve_float_details(self, flag_key: str, default_value: float, evaluation_context: Optional[EvaluationContext] = None) -> FlagResolutionDetails[float]:
        return self.__resolve_variable(flag_key, default_value, evaluation_context, VariableType.FLOAT)

    def resolve_object_details(self, flag_key: str, default_value: Union[dict, list], evaluation_context: Optional[EvaluationContext] = None) -> FlagResolutionDetails[Union[dict, list]]:
        """Resolves an object flag.

        With a ``key`` attribute in the context, the variable of that name is returned whatever its
        type, or the default value if the flag has no such variable. Without one, all variables of
        the flag are returned. A flag without variables is treated as if its variables were the
        default value.
        """

        def extract(flag: FlagResult, key: Optional[Any]) -> Any:
            variables = flag.get_variables() or default_value
            if key is None:
                return variables
            if isinstance(variables, Mapping) and variables.get(key) is not None:
                return variables[key]
            return default_value

        return self.__resolve(flag_key, default_value, evaluation_context, extract)

    def __resolve_variable(self, flag_key: str, default_value: Any, evaluation_context: Optional[EvaluationContext], variable_type: VariableType) -> FlagResolutionDetails:
        # without a variable key there is nothing to select, so the default always wins
        def extract(flag: FlagResult, key: Optional[Any]) -> Any:
            variables = flag.get_variables()
            if key is None:
                return default_value
            return self.__typed_variable(variables, key, variable_type, default_value)

        return self.__resolve(flag_key, default_value, evaluation_context, extract)

    def __resolve(self, flag_key: str, default_value: Any, evaluation_context: Optional[EvaluationContext], extract: Callable[[FlagResult, Optional[Any]], Any]) -> FlagResolutionDetails:
        try:
            vwo_context = to_vwo_context(evaluation_context)
            flag = self.__client.get_flag(flag_key, vwo_context)
            return build_resolution_details(extract(flag, variable_key(evaluation_context)))
        except Exception as e:
            self.__logger.error("Unexpected error while resolving flag \"%s\": %s" % (flag_key, repr(e)))
            self.__logger.debug(traceback.format_exc())
            return error_details(default_value, e)

    @staticmethod
    def __typed_variable(variables: Optional[Mapping], key: Any, variable_type: VariableType, default_value: Any) -> Any:
        value = find_variable(variables, key, variable_type)
        return default_value if value is None else value
