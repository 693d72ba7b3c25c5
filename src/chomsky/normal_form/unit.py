from ..formal_models.cfg import is_unit
from ..util import dfs

def unit_closure(grammar, A):
    """Return the nonterminals reachable from ``A`` through unit rules.

    ``A`` itself is always included.
    """
    productions = grammar.productions
    return dfs(A, lambda B: (
        right[0] for right in productions[B] if is_unit(right)
    ))

def remove_unary_rules(grammar):
    """Replace every unit rule ``A -> B`` with the non-unit rules of ``B``.

    Chains of unit rules of any length are resolved at once by taking, for
    each nonterminal, the non-unit rules of everything in its unit closure.
    Only the start symbol inherits an epsilon rule.

    Returns
    -------
    dict
        Maps each nonterminal to its unit closure.
    """
    closures = { A : unit_closure(grammar, A) for A in grammar.nonterminals }
    new_productions = {}
    for A, closure in closures.items():
        new_rights = set()
        for B in closure:
            for right in grammar.productions[B]:
                if is_unit(right):
                    continue
                if not right and A != grammar.start:
                    continue
                new_rights.add(right)
        new_productions[A] = new_rights
    for A, rights in new_productions.items():
        grammar.set_productions(A, rights)
    return closures
