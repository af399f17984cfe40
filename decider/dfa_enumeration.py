from typing import Dict, Iterator, List

# Enumeration is fixed at two-state machines
ENUMERATED_STATES = ['q0', 'q1']


def enumeration_size(alphabet: List[str]) -> int:
    """Number of distinct two-state DFAs over ``alphabet``: tables times accept sets."""
    num_states = len(ENUMERATED_STATES)
    return num_states ** (num_states * len(alphabet)) * 2 ** num_states


def enumerate_dfas(alphabet: List[str], max_states: int = 2, count: int = 0) -> List[Dict]:
    """
    Enumerates distinct two-state DFAs over the given alphabet.

    Every DFA has states q0 and q1 and starts in q0. ``max_states`` is accepted
    for interface compatibility but the state count is always two.

    The ordering is fixed: transition tables are taken in numeric order and,
    for each table, accept sets are taken in bitmask order (none, q0, q1, both).

    Args:
        alphabet: List of input symbols
        max_states: Ignored
        count: Maximum number of DFAs to return

    Returns:
        List[Dict]: At most ``count`` DFA dictionaries, each with its own containers
    """
    dfas = []
    if count <= 0:
        return dfas

    for transitions in _transition_tables(ENUMERATED_STATES, alphabet):
        for accept_states in _accept_state_sets(ENUMERATED_STATES):
            dfas.append({
                'states': list(ENUMERATED_STATES),
                'alphabet': list(alphabet),
                'transitions': {state: dict(row) for state, row in transitions.items()},
                'start_state': ENUMERATED_STATES[0],
                'accept_states': accept_states
            })
            if len(dfas) >= count:
                return dfas

    return dfas


def _transition_tables(states: List[str], alphabet: List[str]) -> Iterator[Dict]:
    """
    Yields every total transition function over ``states`` and ``alphabet``.

    Table i is i written in base len(states), least significant digit first,
    with one digit per (state, symbol) pair in state-major order.
    """
    num_states = len(states)
    total = num_states ** (num_states * len(alphabet))

    for i in range(total):
        transitions = {}
        remaining = i
        for state in states:
            transitions[state] = {}
            for symbol in alphabet:
                transitions[state][symbol] = states[remaining % num_states]
                remaining //= num_states
        yield transitions


def _accept_state_sets(states: List[str]) -> Iterator[List[str]]:
    for mask in range(2 ** len(states)):
        yield [state for j, state in enumerate(states) if mask & (1 << j)]
