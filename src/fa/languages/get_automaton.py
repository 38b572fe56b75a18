import re

from fa.dfa.dfa import DFA
from fa.languages.all_strings import all_strings_dfa
from fa.languages.empty_set import empty_set_dfa
from fa.languages.repeat_01 import repeat_01_dfa
from fa.languages.even_pairs import even_pairs_dfa
from fa.languages.parity import parity_dfa
from fa.languages.first import first_dfa
from fa.languages.cycle_n import cycle_n_dfa

LANGUAGE_NAMES = [
    'all-strings',
    'empty-set',
    'repeat-01',
    'even-pairs',
    'parity',
    'first',
    'cycle-N'
]

def get_automaton(name: str) -> DFA:
    match name:
        case 'all-strings':
            return all_strings_dfa()
        case 'empty-set':
            return empty_set_dfa()
        case 'repeat-01':
            return repeat_01_dfa()
        case 'even-pairs':
            return even_pairs_dfa()
        case 'parity':
            return parity_dfa()
        case 'first':
            return first_dfa()
        case _ if (match := re.match(r'^cycle-(\d+)$', name)):
            n = int(match.group(1))
            return cycle_n_dfa(n)
        case _:
            raise ValueError(f'invalid language name: {name}')
