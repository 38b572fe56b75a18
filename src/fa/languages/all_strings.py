from fa.dfa.dfa import DFA

def all_strings_dfa() -> DFA:
    M = DFA()
    M.add_sigma('0')
    M.add_sigma('1')
    M.add_state('q0')
    M.set_start('q0')
    M.add_transition('q0', 'q0', '0')
    M.add_transition('q0', 'q0', '1')
    M.set_final('q0')
    return M
