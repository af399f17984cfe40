import json

from django.core.management.base import BaseCommand

from decider.dfa_emptiness import recognizes_empty_language
from decider.dfa_enumeration import enumerate_dfas
from decider.dfa_validation import validate_dfa
from decider.tm_conversion import convert_dfa_to_tm, tm_to_dict
from decider.tm_simulation import format_configuration, simulate_tm

EVEN_AS_DFA = {
    'states': ['q0', 'q1'],
    'alphabet': ['a', 'b'],
    'transitions': {
        'q0': {'a': 'q1', 'b': 'q0'},
        'q1': {'a': 'q0', 'b': 'q1'}
    },
    'start_state': 'q0',
    'accept_states': ['q0']
}

VALIDATION_EXAMPLES = [
    ('Valid DFA', {
        'states': ['q0', 'q1', 'q2'],
        'alphabet': ['a', 'b'],
        'transitions': {
            'q0': {'a': 'q1', 'b': 'q2'},
            'q1': {'a': 'q0', 'b': 'q2'},
            'q2': {'a': 'q2', 'b': 'q2'}
        },
        'start_state': 'q0',
        'accept_states': ['q1']
    }),
    ('Missing transitions', {
        'states': ['q0', 'q1'],
        'alphabet': ['a', 'b'],
        'transitions': {
            'q0': {'a': 'q1', 'b': 'q0'}
        },
        'start_state': 'q0',
        'accept_states': ['q1']
    }),
    ('Invalid transition target', {
        'states': ['q0', 'q1'],
        'alphabet': ['a', 'b'],
        'transitions': {
            'q0': {'a': 'q1', 'b': 'q0'},
            'q1': {'a': 'q2', 'b': 'q0'}
        },
        'start_state': 'q0',
        'accept_states': ['q1']
    }),
    ('Invalid start state', {
        'states': ['q0', 'q1'],
        'alphabet': ['a', 'b'],
        'transitions': {
            'q0': {'a': 'q1', 'b': 'q0'},
            'q1': {'a': 'q0', 'b': 'q1'}
        },
        'start_state': 'q2',
        'accept_states': ['q1']
    }),
]

EMPTINESS_EXAMPLES = [
    ('DFA with reachable accept state', {
        'states': ['q0', 'q1', 'q2'],
        'alphabet': ['a', 'b'],
        'transitions': {
            'q0': {'a': 'q1', 'b': 'q0'},
            'q1': {'a': 'q1', 'b': 'q1'},
            'q2': {'a': 'q2', 'b': 'q2'}
        },
        'start_state': 'q0',
        'accept_states': ['q1']
    }),
    ('DFA with unreachable accept state', {
        'states': ['q0', 'q1', 'q2'],
        'alphabet': ['a', 'b'],
        'transitions': {
            'q0': {'a': 'q0', 'b': 'q0'},
            'q1': {'a': 'q1', 'b': 'q1'},
            'q2': {'a': 'q2', 'b': 'q2'}
        },
        'start_state': 'q0',
        'accept_states': ['q2']
    }),
    ('DFA with no accept states', {
        'states': ['q0', 'q1'],
        'alphabet': ['a', 'b'],
        'transitions': {
            'q0': {'a': 'q1', 'b': 'q0'},
            'q1': {'a': 'q0', 'b': 'q1'}
        },
        'start_state': 'q0',
        'accept_states': []
    }),
    ('DFA where start state is accept state', {
        'states': ['q0', 'q1'],
        'alphabet': ['a', 'b'],
        'transitions': {
            'q0': {'a': 'q1', 'b': 'q0'},
            'q1': {'a': 'q1', 'b': 'q1'}
        },
        'start_state': 'q0',
        'accept_states': ['q0']
    }),
]


class Command(BaseCommand):
    help = 'Runs the DFA enumeration, validation, TM decider and emptiness demonstrations'

    def add_arguments(self, parser):
        parser.add_argument('--count', type=int, default=20,
                            help='Number of DFAs to enumerate')
        parser.add_argument('--input', action='append', dest='inputs',
                            help='Input string for the TM simulation (repeatable)')

    def handle(self, *args, **options):
        self.run_enumeration(options['count'])
        self.run_validation()
        self.run_simulation(options['inputs'] or ['aab', 'aa'])
        self.run_emptiness()

        self.heading('ALL PROGRAMS COMPLETED')

    def heading(self, title):
        self.stdout.write('=' * 80)
        self.stdout.write(title)
        self.stdout.write('=' * 80)

    def run_enumeration(self, count):
        self.heading('PROGRAM 1: ENUMERATE DFAs')
        self.stdout.write(f'Enumerating the first {count} DFAs over alphabet {{a, b}}:\n')

        for index, dfa in enumerate(enumerate_dfas(['a', 'b'], 2, count), start=1):
            self.stdout.write(f'DFA #{index}:')
            self.stdout.write(json.dumps(dfa, indent=2))
            self.stdout.write('')

    def run_validation(self):
        self.heading('PROGRAM 2: VALIDATE DFA')

        for title, dfa in VALIDATION_EXAMPLES:
            self.stdout.write(f'\n{title}:')
            self.stdout.write(json.dumps(dfa, indent=2))
            self.stdout.write(f'Validation Result: {int(validate_dfa(dfa))}')

    def run_simulation(self, inputs):
        self.heading('PROGRAM 3: CONVERT DFA TO TM DECIDER AND SIMULATE')

        self.stdout.write("\nOriginal DFA (accepts strings with even number of 'a's):")
        self.stdout.write(json.dumps(EVEN_AS_DFA, indent=2))

        tm = convert_dfa_to_tm(EVEN_AS_DFA)
        self.stdout.write('\nConverted Turing Machine:')
        self.stdout.write(json.dumps(tm_to_dict(tm), indent=2))

        for input_string in inputs:
            self.stdout.write(f'\nSimulating TM on input string: "{input_string}"')
            result = simulate_tm(tm, input_string)

            self.stdout.write('\nTape Configurations:')
            for index, config in enumerate(result.configurations):
                self.stdout.write(f'Step {index}: {format_configuration(config)}')

            if result.accepted:
                self.stdout.write(self.style.SUCCESS('\nResult: ACCEPTED'))
            else:
                self.stdout.write(self.style.ERROR('\nResult: REJECTED'))

    def run_emptiness(self):
        self.heading('PROGRAM 4: DETERMINE IF DFA RECOGNIZES EMPTY LANGUAGE')

        for title, dfa in EMPTINESS_EXAMPLES:
            self.stdout.write(f'\n{title}:')
            self.stdout.write(json.dumps(dfa, indent=2))
            empty = recognizes_empty_language(dfa)
            self.stdout.write(f'Recognizes Empty Language: {str(empty).lower()}')
