import json
from django.test import TestCase, Client, override_settings


class DeciderViewTestCase(TestCase):
    """Base test case with common DFA definitions and utilities"""

    def setUp(self):
        self.client = Client()

        # Accepts strings with an even number of 'a's
        self.sample_dfa = {
            'states': ['q0', 'q1'],
            'alphabet': ['a', 'b'],
            'transitions': {
                'q0': {'a': 'q1', 'b': 'q0'},
                'q1': {'a': 'q0', 'b': 'q1'}
            },
            'start_state': 'q0',
            'accept_states': ['q0']
        }

        # Missing the transitions for q1
        self.invalid_dfa = {
            'states': ['q0', 'q1'],
            'alphabet': ['a', 'b'],
            'transitions': {
                'q0': {'a': 'q1', 'b': 'q0'}
            },
            'start_state': 'q0',
            'accept_states': ['q1']
        }

    def post_json(self, url, data):
        """Helper method to send JSON POST requests"""
        return self.client.post(
            url,
            data=json.dumps(data),
            content_type='application/json'
        )


class ValidateDFAViewTests(DeciderViewTestCase):

    def test_valid(self):
        response = self.post_json('/api/validate-dfa/', {'dfa': self.sample_dfa})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'valid': True})

    def test_invalid_is_a_result(self):
        response = self.post_json('/api/validate-dfa/', {'dfa': self.invalid_dfa})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertFalse(data['valid'])
        self.assertEqual(data['error'], 'No transitions defined for state q1')

    def test_missing_dfa(self):
        response = self.post_json('/api/validate-dfa/', {})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Missing DFA definition')

    def test_malformed_json(self):
        response = self.client.post('/api/validate-dfa/', data='{not json',
                                    content_type='application/json')
        self.assertEqual(response.status_code, 400)
        self.assertIn('error', response.json())

    def test_get_not_allowed(self):
        response = self.client.get('/api/validate-dfa/')
        self.assertEqual(response.status_code, 405)


class EnumerateDFAsViewTests(DeciderViewTestCase):

    def test_enumerate(self):
        response = self.post_json('/api/enumerate-dfas/', {'alphabet': ['a', 'b'], 'count': 5})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['count'], 5)
        self.assertEqual(data['total'], 64)
        self.assertEqual(data['dfas'][1]['accept_states'], ['q0'])

    def test_default_count(self):
        response = self.post_json('/api/enumerate-dfas/', {'alphabet': ['a']})
        self.assertEqual(response.json()['count'], 16)

    def test_bad_alphabet(self):
        response = self.post_json('/api/enumerate-dfas/', {'alphabet': 'ab', 'count': 5})
        self.assertEqual(response.status_code, 400)

        response = self.post_json('/api/enumerate-dfas/', {'alphabet': ['a', 'a'], 'count': 5})
        self.assertEqual(response.status_code, 400)

    def test_bad_count(self):
        response = self.post_json('/api/enumerate-dfas/', {'alphabet': ['a'], 'count': 'many'})
        self.assertEqual(response.status_code, 400)


class ConvertDFAToTMViewTests(DeciderViewTestCase):

    def test_convert(self):
        response = self.post_json('/api/convert-dfa-to-tm/', {'dfa': self.sample_dfa})
        self.assertEqual(response.status_code, 200)
        tm = response.json()['tm']
        self.assertEqual(tm['accept_state'], 'q_accept')
        self.assertEqual(tm['transitions']['q0']['_'],
                         {'next_state': 'q_accept', 'write_symbol': '_', 'move': 'R'})

    def test_invalid_dfa(self):
        response = self.post_json('/api/convert-dfa-to-tm/', {'dfa': self.invalid_dfa})
        self.assertEqual(response.status_code, 400)
        self.assertIn('q1', response.json()['error'])


class SimulateTMViewTests(DeciderViewTestCase):

    def test_accepted(self):
        response = self.post_json('/api/simulate-tm/', {'dfa': self.sample_dfa, 'input': 'aab'})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data['accepted'])
        self.assertEqual(data['outcome'], 'accept')
        self.assertEqual(len(data['configurations']), 5)
        self.assertEqual(data['configurations'][-1],
                         {'state': 'q_accept', 'tape': ['a', 'a', 'b', '_'], 'head': 4})

    def test_rejected(self):
        response = self.post_json('/api/simulate-tm/', {'dfa': self.sample_dfa, 'input': 'a'})
        data = response.json()
        self.assertFalse(data['accepted'])
        self.assertEqual(data['outcome'], 'reject')

    def test_default_input(self):
        response = self.post_json('/api/simulate-tm/', {'dfa': self.sample_dfa})
        self.assertTrue(response.json()['accepted'])

    @override_settings(DECIDER_MAX_STEPS=2)
    def test_step_limit_setting(self):
        response = self.post_json('/api/simulate-tm/', {'dfa': self.sample_dfa, 'input': 'bbbb'})
        data = response.json()
        self.assertFalse(data['accepted'])
        self.assertEqual(data['outcome'], 'step_limit')
        self.assertEqual(data['steps'], 2)

    def test_input_must_be_string(self):
        response = self.post_json('/api/simulate-tm/', {'dfa': self.sample_dfa, 'input': ['a']})
        self.assertEqual(response.status_code, 400)

    def test_invalid_dfa(self):
        response = self.post_json('/api/simulate-tm/', {'dfa': self.invalid_dfa, 'input': 'a'})
        self.assertEqual(response.status_code, 400)


class CheckEmptyLanguageViewTests(DeciderViewTestCase):

    def test_non_empty(self):
        response = self.post_json('/api/check-empty-language/', {'dfa': self.sample_dfa})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'empty': False, 'reachable_states': ['q0', 'q1']})

    def test_empty(self):
        self.sample_dfa['accept_states'] = []
        response = self.post_json('/api/check-empty-language/', {'dfa': self.sample_dfa})
        self.assertTrue(response.json()['empty'])

    def test_invalid_dfa(self):
        response = self.post_json('/api/check-empty-language/', {'dfa': self.invalid_dfa})
        self.assertEqual(response.status_code, 400)
