from fa.dfa.dfa import DFA

def empty_set_dfa() -> DFA:
    M = DFA()
    M.add_sigma('0')
    M.add_sigma('1')
    M.add_state('q0')
    M.set_start('q0')
    return M
