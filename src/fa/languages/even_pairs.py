from fa.dfa.dfa import DFA

def even_pairs_dfa() -> DFA:
    """The language of binary strings with as many occurrences of 01 as of
    10. Equivalently, strings that are empty or begin and end with the same
    symbol."""
    M = DFA()
    M.add_sigma('0')
    M.add_sigma('1')

    # q_a and q_b remember the first symbol; q_ar and q_br mean the last
    # symbol read differs from it.
    for q in ['q_0', 'q_a', 'q_b', 'q_ar', 'q_br']:
        M.add_state(q)
    M.set_start('q_0')

    M.add_transition('q_0', 'q_a', '0')
    M.add_transition('q_0', 'q_b', '1')

    M.add_transition('q_a', 'q_a', '0')
    M.add_transition('q_a', 'q_ar', '1')
    M.add_transition('q_ar', 'q_a', '0')
    M.add_transition('q_ar', 'q_ar', '1')

    M.add_transition('q_b', 'q_b', '1')
    M.add_transition('q_b', 'q_br', '0')
    M.add_transition('q_br', 'q_b', '1')
    M.add_transition('q_br', 'q_br', '0')

    M.set_final('q_0')
    M.set_final('q_a')
    M.set_final('q_b')
    return M
