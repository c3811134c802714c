import logging

from openfeature.hook import Hook

from vwo_openfeature_provider.config import Config
from vwo_openfeature_provider.impl.util import log


class NamedHook(Hook):
    def __init__(self, name):
        self.name = name


def test_defaults():
    config = Config()
    assert config.hooks == []
    assert config.logger is log


def test_hooks_keep_their_order():
    first = NamedHook('first')
    second = NamedHook('second')
    config = Config(hooks=[first, second])
    assert config.hooks == [first, second]


def test_ignores_invalid_hooks():
    hook = NamedHook('valid')
    config = Config(hooks=[True, hook, 42, None, "Hook, Hook, give us the Hook!"])
    assert config.hooks == [hook]


def test_hooks_cannot_be_changed_after_construction():
    hooks = [NamedHook('first')]
    config = Config(hooks=hooks)
    hooks.append(NamedHook('second'))
    config.hooks.append(NamedHook('third'))
    assert [hook.name for hook in config.hooks] == ['first']


def test_custom_logger():
    logger = logging.getLogger('custom')
    assert Config(logger=logger).logger is logger
