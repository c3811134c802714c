from openfeature.evaluation_context import EvaluationContext

from vwo_openfeature_provider.context import to_vwo_context, variable_key


class TestToVWOContext:
    def test_no_context_is_empty(self):
        assert to_vwo_context(None) == {}

    def test_no_targeting_key_is_empty(self):
        assert to_vwo_context(EvaluationContext(None)) == {}

    def test_no_targeting_key_ignores_all_attributes(self):
        c = EvaluationContext(None, {'userAgent': 'agent', 'ipAddress': '1.2.3.4', 'customVariables': {'plan': 'pro'}, 'variationTargetingVariables': {'tier': 1}})
        assert to_vwo_context(c) == {}

    def test_targeting_key_only(self):
        assert to_vwo_context(EvaluationContext('user-1')) == {'id': 'user-1', 'userAgent': '', 'ipAddress': ''}

    def test_user_agent_and_ip_address(self):
        c = EvaluationContext('user-1', {'userAgent': 'Mozilla/5.0', 'ipAddress': '1.2.3.4'})
        assert to_vwo_context(c) == {'id': 'user-1', 'userAgent': 'Mozilla/5.0', 'ipAddress': '1.2.3.4'}

    def test_null_user_agent_and_ip_address_become_empty_strings(self):
        c = EvaluationContext('user-1', {'userAgent': None, 'ipAddress': None})
        assert to_vwo_context(c) == {'id': 'user-1', 'userAgent': '', 'ipAddress': ''}

    def test_custom_and_variation_targeting_variables(self):
        c = EvaluationContext('user-1', {'customVariables': {'plan': 'pro'}, 'variationTargetingVariables': {'tier': 1}})
        assert to_vwo_context(c) == {
            'id': 'user-1',
            'userAgent': '',
            'ipAddress': '',
            'customVariables': {'plan': 'pro'},
            'variationTargetingVariables': {'tier': 1},
        }

    def test_null_custom_variables_are_omitted(self):
        c = EvaluationContext('user-1', {'customVariables': None, 'variationTargetingVariables': None})
        vwo_context = to_vwo_context(c)
        assert 'customVariables' not in vwo_context
        assert 'variationTargetingVariables' not in vwo_context

    def test_other_attributes_are_not_copied(self):
        c = EvaluationContext('user-1', {'key': 'color', 'email': 'a@b.com'})
        assert to_vwo_context(c) == {'id': 'user-1', 'userAgent': '', 'ipAddress': ''}

    def test_returns_new_dict_each_time(self):
        c = EvaluationContext('user-1')
        first = to_vwo_context(c)
        first['id'] = 'changed'
        assert to_vwo_context(c)['id'] == 'user-1'


def test_variable_key():
    assert variable_key(EvaluationContext('user-1', {'key': 'color'})) == 'color'


def test_variable_key_without_context():
    assert variable_key(None) is None


def test_variable_key_missing_or_empty():
    assert variable_key(EvaluationContext('user-1')) is None
    assert variable_key(EvaluationContext('user-1', {'key': ''})) is None
    assert variable_key(EvaluationContext('user-1', {'key': None})) is None


def test_variable_key_does_not_need_targeting_key():
    assert variable_key(EvaluationContext(None, {'key': 'color'})) == 'color'
