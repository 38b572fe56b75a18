from fa.dfa.dfa import DFA

def cycle_n_dfa(n: int) -> DFA:
    """The language of binary strings in which the number of 0s is a
    multiple of `n`. Reading 0 advances one step around a cycle of `n`
    states; reading 1 stays in place."""
    if n < 1:
        raise ValueError(f'cycle length must be at least 1: {n}')
    M = DFA()
    M.add_sigma('0')
    M.add_sigma('1')
    for i in range(n):
        M.add_state(str(i))
    for i in range(n):
        M.add_transition(str(i), str((i + 1) % n), '0')
        M.add_transition(str(i), str(i), '1')
    M.set_start('0')
    M.set_final('0')
    return M
