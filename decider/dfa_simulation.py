from typing import Dict

from .automaton import IndexedDFA, InvalidAutomatonError
from .dfa_validation import check_dfa_structure


def run_dfa(dfa: Dict, input_string: str) -> Dict:
    """
    Runs a DFA directly over the input string.

    Args:
        dfa: A DFA dictionary
        input_string: The input string to read

    Returns:
        Dict with:
        {
            'accepted': bool,
            'path': [(current_state, symbol, next_state), ...],
            'final_state': str
        }
        If a symbol is not in the alphabet the run stops there and the result
        also carries 'rejection_reason' and 'rejection_position'.

    Raises:
        InvalidAutomatonError: If the DFA fails validation
    """
    validation = check_dfa_structure(dfa)
    if not validation['valid']:
        raise InvalidAutomatonError(validation['error'])

    indexed = IndexedDFA.from_dict(dfa)
    current = indexed.start
    path = []

    for position, symbol in enumerate(input_string):
        symbol_index = indexed.symbol_index(symbol)
        if symbol_index is None:
            return {
                'accepted': False,
                'path': path,
                'final_state': indexed.name(current),
                'rejection_reason': f"Symbol '{symbol}' not in alphabet",
                'rejection_position': position
            }

        next_state = indexed.step(current, symbol_index)
        path.append((indexed.name(current), symbol, indexed.name(next_state)))
        current = next_state

    return {
        'accepted': indexed.is_accepting(current),
        'path': path,
        'final_state': indexed.name(current)
    }
