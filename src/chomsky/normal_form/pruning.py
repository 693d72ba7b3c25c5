from ..util import dfs, least_fixpoint

def reachable_nonterminals(grammar):
    productions = grammar.productions
    return dfs(grammar.start, lambda A: (
        X
        for right in productions[A]
        for X in right
        if X.is_nonterminal
    ))

def remove_unreachable_nonterminals(grammar):
    """Remove nonterminals that cannot be reached from the start symbol.

    The rules of the remaining nonterminals are kept as they are.

    Returns
    -------
    set of Nonterminal
        The nonterminals that were removed.
    """
    removed = grammar.nonterminals - reachable_nonterminals(grammar)
    grammar.remove_nonterminals(removed)
    return removed

def productive_nonterminals(grammar):
    """Return the set of nonterminals that derive at least one string of
    terminals."""
    productions = grammar.productions
    return least_fixpoint(
        sorted(grammar.nonterminals),
        lambda A, productive: any(
            _is_productive(right, productive)
            for right in productions[A]
        )
    )

def remove_unproductive_nonterminals(grammar):
    """Remove nonterminals that cannot derive any string of terminals, along
    with every rule that mentions them.

    The start symbol is never removed. If it is unproductive, the grammar
    generates the empty language and the start symbol is left with no rules.

    Returns
    -------
    set of Nonterminal
        The nonterminals that were removed.
    """
    productive = productive_nonterminals(grammar)
    removed = grammar.nonterminals - productive - { grammar.start }
    grammar.remove_nonterminals(removed)
    for A, rights in list(grammar.productions.items()):
        grammar.set_productions(A, (
            right for right in rights
            if _is_productive(right, productive)
        ))
    return removed

def _is_productive(right, productive):
    return all(X.is_terminal or X in productive for X in right)
