from collections import deque
from typing import Dict, List

from .automaton import IndexedDFA, InvalidAutomatonError
from .dfa_validation import check_dfa_structure


def recognizes_empty_language(dfa: Dict) -> bool:
    """
    Checks whether a DFA accepts no strings at all.

    The language is empty exactly when no accepting state is reachable from
    the starting state. A breadth-first search from the starting state stops
    at the first accepting state it meets.

    Args:
        dfa: A DFA dictionary

    Returns:
        bool: True if the language is empty, False otherwise

    Raises:
        InvalidAutomatonError: If the DFA fails validation
    """
    indexed = _index(dfa)

    if not indexed.accepting:
        return True

    visited = {indexed.start}
    queue = deque([indexed.start])

    while queue:
        current = queue.popleft()
        if indexed.is_accepting(current):
            return False

        for symbol in range(len(indexed.symbols)):
            next_state = indexed.step(current, symbol)
            if next_state not in visited:
                visited.add(next_state)
                queue.append(next_state)

    return True


def reachable_states(dfa: Dict) -> List[str]:
    """Returns the states reachable from the starting state, in breadth-first order."""
    indexed = _index(dfa)

    order = [indexed.start]
    visited = {indexed.start}
    queue = deque([indexed.start])

    while queue:
        current = queue.popleft()
        for symbol in range(len(indexed.symbols)):
            next_state = indexed.step(current, symbol)
            if next_state not in visited:
                visited.add(next_state)
                order.append(next_state)
                queue.append(next_state)

    return [indexed.name(state) for state in order]


def _index(dfa: Dict) -> IndexedDFA:
    validation = check_dfa_structure(dfa)
    if not validation['valid']:
        raise InvalidAutomatonError(validation['error'])
    return IndexedDFA.from_dict(dfa)
