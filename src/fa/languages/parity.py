from fa.dfa.dfa import DFA

def parity_dfa() -> DFA:
    """The language of binary strings with an odd number of 1s."""
    M = DFA()
    for a in '01':
        M.add_sigma(a)
    M.add_state('even')
    M.add_state('odd')
    M.set_start('even')
    M.set_final('odd')
    M.add_transition('even', 'even', '0')
    M.add_transition('even', 'odd', '1')
    M.add_transition('odd', 'odd', '0')
    M.add_transition('odd', 'even', '1')
    return M
