import unittest
from decider.automaton import InvalidAutomatonError
from decider.dfa_simulation import run_dfa


class TestDfaSimulation(unittest.TestCase):
    def setUp(self):
        # FSA that accepts strings with an even number of 'a's
        self.dfa = {
            'states': ['q0', 'q1'],
            'alphabet': ['a', 'b'],
            'transitions': {
                'q0': {'a': 'q1', 'b': 'q0'},
                'q1': {'a': 'q0', 'b': 'q1'}
            },
            'start_state': 'q0',
            'accept_states': ['q0']
        }

    def test_execution_path(self):
        result = run_dfa(self.dfa, 'aab')
        self.assertTrue(result['accepted'])
        self.assertEqual(result['path'], [('q0', 'a', 'q1'), ('q1', 'a', 'q0'), ('q0', 'b', 'q0')])
        self.assertEqual(result['final_state'], 'q0')

    def test_rejected(self):
        result = run_dfa(self.dfa, 'ab')
        self.assertFalse(result['accepted'])
        self.assertEqual(result['final_state'], 'q1')
        self.assertNotIn('rejection_reason', result)

    def test_empty_string(self):
        result = run_dfa(self.dfa, '')
        self.assertTrue(result['accepted'])
        self.assertEqual(result['path'], [])

    def test_symbol_not_in_alphabet(self):
        result = run_dfa(self.dfa, 'abc')
        self.assertFalse(result['accepted'])
        self.assertEqual(result['rejection_reason'], "Symbol 'c' not in alphabet")
        self.assertEqual(result['rejection_position'], 2)
        self.assertEqual(len(result['path']), 2)

    def test_invalid_dfa(self):
        del self.dfa['accept_states']
        with self.assertRaises(InvalidAutomatonError):
            run_dfa(self.dfa, 'a')


if __name__ == '__main__':
    unittest.main()
