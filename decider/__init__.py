from .automaton import (
    Configuration,
    IndexedDFA,
    InvalidAutomatonError,
    Move,
    TMTransition,
    TuringMachine,
)
from .dfa_validation import validate_dfa, check_dfa_structure
from .dfa_enumeration import enumerate_dfas, enumeration_size
from .dfa_simulation import run_dfa
from .tm_conversion import convert_dfa_to_tm, tm_to_dict
from .tm_simulation import simulate_tm, SimulationResult, MAX_STEPS
from .dfa_emptiness import recognizes_empty_language, reachable_states
