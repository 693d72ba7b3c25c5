import more_itertools

from ..util import least_fixpoint

def nullable_nonterminals(grammar):
    """Return the set of nonterminals that derive the empty string."""
    productions = grammar.productions
    return least_fixpoint(
        sorted(grammar.nonterminals),
        lambda A, nullable: any(
            all(X in nullable for X in right)
            for right in productions[A]
        )
    )

def remove_epsilon_rules(grammar):
    """Remove epsilon rules from a grammar in place.

    Every right side is replaced by itself plus each variant that omits a
    non-empty subset of its nullable symbols. Variants that become empty are
    dropped, except that the start symbol keeps a single epsilon rule when
    it is nullable.

    Returns
    -------
    set of Nonterminal
        The nullable nonterminals of the original grammar.
    """
    nullable = nullable_nonterminals(grammar)
    new_productions = {}
    for A, rights in grammar.productions.items():
        new_rights = set()
        for right in rights:
            new_rights.update(_omission_variants(right, nullable))
        new_productions[A] = new_rights
    if grammar.start in nullable:
        new_productions[grammar.start].add(())
    for A, rights in new_productions.items():
        grammar.set_productions(A, rights)
    return nullable

def _omission_variants(right, nullable):
    indexes = [i for i, X in enumerate(right) if X in nullable]
    for omitted in more_itertools.powerset(indexes):
        variant = tuple(X for i, X in enumerate(right) if i not in omitted)
        if variant:
            yield variant
