from typing import Dict

from .automaton import DFA_KEYS


def check_dfa_structure(dfa: Dict) -> Dict:
    """
    Checks that a DFA dictionary is well formed, stopping at the first problem.

    The checks run in this order:
    1. All of states, alphabet, transitions, start_state and accept_states exist
    2. states is a list without duplicates
    3. alphabet is a list without duplicates
    4. transitions maps every state and every symbol to a member of states
    5. start_state is one of the states
    6. accept_states is a list of states (duplicates are allowed)

    Args:
        dfa: A dictionary representing the DFA with the following keys:
            - states: List of all states
            - alphabet: List of input symbols
            - transitions: Dictionary {state: {symbol: next_state}}
            - start_state: The starting state
            - accept_states: List of accepting states

    Returns:
        Dict: {'valid': True} or {'valid': False, 'error': <reason>}
    """
    if not isinstance(dfa, dict):
        return {'valid': False, 'error': 'DFA must be a dictionary'}

    for key in DFA_KEYS:
        if key not in dfa:
            return {'valid': False, 'error': f'Missing required key: {key}'}

    states = dfa['states']
    alphabet = dfa['alphabet']
    transitions = dfa['transitions']

    if not isinstance(states, list):
        return {'valid': False, 'error': 'states must be a list'}
    if not _all_distinct(states):
        return {'valid': False, 'error': 'states must not contain duplicates'}

    if not isinstance(alphabet, list):
        return {'valid': False, 'error': 'alphabet must be a list'}
    if not _all_distinct(alphabet):
        return {'valid': False, 'error': 'alphabet must not contain duplicates'}

    if not isinstance(transitions, dict):
        return {'valid': False, 'error': 'transitions must be a dictionary'}

    for state in states:
        row = transitions.get(state)
        if not isinstance(row, dict):
            return {'valid': False, 'error': f'No transitions defined for state {state}'}

        for symbol in alphabet:
            if symbol not in row:
                return {
                    'valid': False,
                    'error': f"Missing transition for state {state} on symbol '{symbol}'"
                }
            if row[symbol] not in states:
                return {
                    'valid': False,
                    'error': f"Transition from {state} on '{symbol}' targets unknown state {row[symbol]}"
                }

    if dfa['start_state'] not in states:
        return {'valid': False, 'error': 'Start state not in states list'}

    if not isinstance(dfa['accept_states'], list):
        return {'valid': False, 'error': 'accept_states must be a list'}
    for state in dfa['accept_states']:
        if state not in states:
            return {'valid': False, 'error': f'Accept state {state} not in states list'}

    return {'valid': True}


def validate_dfa(dfa: Dict) -> bool:
    """Returns True if the DFA passes every structural check, False otherwise."""
    return check_dfa_structure(dfa)['valid']


def _all_distinct(items: list) -> bool:
    try:
        return len(set(items)) == len(items)
    except TypeError:
        # Unhashable names can never be interned
        return False
