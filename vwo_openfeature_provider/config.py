"""
This submodule contains the :class:`Config` class for custom configuration of the provider.
"""

import logging
from typing import List, Optional

from openfeature.hook import Hook

from vwo_openfeature_provider.impl.util import log


class Config:
    """Advanced configuration options for :class:`vwo_openfeature_provider.VWOProvider`.

    The defaults are suitable for most applications, so passing a ``Config`` is optional.
    """

    def __init__(self, hooks: Optional[List[Hook]] = None, logger: Optional[logging.Logger] = None):
        """
        :param hooks: Hooks reported to OpenFeature by the provider. Anything that is not an
          instance of :class:`openfeature.hook.Hook` is ignored.
        :param logger: The logger the provider writes diagnostics to. Defaults to the
          ``vwo_openfeature_provider`` logger.
        """
        self.__hooks = [hook for hook in hooks if isinstance(hook, Hook)] if hooks else []
        self.__logger = logger if logger is not None else log

    @property
    def hooks(self) -> List[Hook]:
        """
        Hooks attached to the provider. OpenFeature runs these around every evaluation that is
        resolved by the provider.
        """
        return list(self.__hooks)

    @property
    def logger(self) -> logging.Logger:
        return self.__logger
