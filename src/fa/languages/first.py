from fa.dfa.dfa import DFA

def first_dfa() -> DFA:
    M = DFA()
    M.add_sigma('0')
    M.add_sigma('1')
    M.add_state('q0')
    M.add_state('q1')
    M.set_start('q0')
    M.add_transition('q0', 'q1', '1')
    M.add_transition('q1', 'q1', '0')
    M.add_transition('q1', 'q1', '1')
    M.set_final('q1')
    return M
