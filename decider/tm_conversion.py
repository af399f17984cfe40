import logging
from typing import Dict

from .automaton import (
    DEFAULT_ACCEPT_STATE,
    DEFAULT_BLANK_SYMBOL,
    DEFAULT_REJECT_STATE,
    IndexedDFA,
    InvalidAutomatonError,
    Move,
    TMTransition,
    TuringMachine,
    fresh_name,
)
from .dfa_validation import check_dfa_structure

logger = logging.getLogger(__name__)


def convert_dfa_to_tm(dfa: Dict) -> TuringMachine:
    """
    Builds a decider Turing machine that simulates the given DFA.

    The machine reads the input left to right, replaying each DFA move while
    rewriting the symbol unchanged. On reaching the blank after the input it
    moves to the accept state if the DFA state is accepting, otherwise to the
    reject state. Every transition moves right, so the machine halts after at
    most len(input) + 1 steps.

    Args:
        dfa: A DFA dictionary

    Returns:
        TuringMachine: The equivalent decider

    Raises:
        InvalidAutomatonError: If the DFA fails validation
    """
    validation = check_dfa_structure(dfa)
    if not validation['valid']:
        raise InvalidAutomatonError(validation['error'])

    indexed = IndexedDFA.from_dict(dfa)
    states = list(indexed.state_names)
    alphabet = list(indexed.symbols)

    # The designated names must not clash with anything the DFA already uses
    accept_state = fresh_name(DEFAULT_ACCEPT_STATE, states)
    reject_state = fresh_name(DEFAULT_REJECT_STATE, states + [accept_state])
    blank = fresh_name(DEFAULT_BLANK_SYMBOL, alphabet)

    transitions = {}
    for state_index, state in enumerate(indexed.state_names):
        for symbol_index, symbol in enumerate(indexed.symbols):
            next_state = indexed.name(indexed.step(state_index, symbol_index))
            transitions[(state, symbol)] = TMTransition(next_state, symbol, Move.RIGHT)

        # Reading the blank means the input is exhausted
        verdict = accept_state if indexed.is_accepting(state_index) else reject_state
        transitions[(state, blank)] = TMTransition(verdict, blank, Move.RIGHT)

    logger.debug("Converted DFA with %d states to TM with %d transitions",
                 len(states), len(transitions))

    return TuringMachine(
        states=tuple(states + [accept_state, reject_state]),
        alphabet=tuple(alphabet + [blank]),
        transitions=transitions,
        start_state=indexed.name(indexed.start),
        accept_state=accept_state,
        reject_state=reject_state,
        blank_symbol=blank
    )


def tm_to_dict(tm: TuringMachine) -> Dict:
    """
    Converts a Turing machine to plain, JSON-serialisable data.

    Transitions are nested as {state: {symbol: {next_state, write_symbol, move}}}.
    """
    transitions = {}
    for (state, symbol), transition in tm.transitions.items():
        transitions.setdefault(state, {})[symbol] = {
            'next_state': transition.next_state,
            'write_symbol': transition.write_symbol,
            'move': transition.move.value
        }

    return {
        'states': list(tm.states),
        'alphabet': list(tm.alphabet),
        'transitions': transitions,
        'start_state': tm.start_state,
        'accept_state': tm.accept_state,
        'reject_state': tm.reject_state,
        'blank_symbol': tm.blank_symbol
    }
