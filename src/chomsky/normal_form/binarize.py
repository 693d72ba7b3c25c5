from ..formal_models.cfg import Nonterminal, Terminal

class FreshNonterminals:
    """Mints nonterminal names that are not yet used in a grammar.

    Every name handed out is added to the grammar immediately, so later
    names can never collide with it.
    """

    def __init__(self, grammar, chain_prefix='X', terminal_prefix='T_'):
        super().__init__()
        self.grammar = grammar
        self.chain_prefix = chain_prefix
        self.terminal_prefix = terminal_prefix
        self.counter = 0

    def is_used(self, name):
        return (
            Nonterminal(name) in self.grammar.nonterminals or
            Terminal(name) in self.grammar.terminals
        )

    def terminal(self, a):
        base = f'{self.terminal_prefix}{a}'
        name = base
        suffix = 0
        while self.is_used(name):
            suffix += 1
            name = f'{base}_{suffix}'
        return self._register(name)

    def chain(self):
        while True:
            self.counter += 1
            name = f'{self.chain_prefix}{self.counter}'
            if not self.is_used(name):
                return self._register(name)

    def _register(self, name):
        A = Nonterminal(name)
        self.grammar.add_nonterminal(A)
        return A

def isolate_terminals(grammar, fresh):
    """Move terminals out of right sides with two or more symbols.

    Each such terminal ``a`` gets one new nonterminal ``T_a`` with the single
    rule ``T_a -> a``. Right sides that consist of one terminal are left
    alone.

    Returns
    -------
    dict
        Maps each replaced terminal to its new nonterminal.
    """
    wrappers = {}
    for A, rights in sorted(grammar.productions.items()):
        for right in rights:
            if len(right) >= 2:
                for X in right:
                    if X.is_terminal and X not in wrappers:
                        wrappers[X] = None
    for a in sorted(wrappers):
        T = fresh.terminal(a)
        grammar.set_productions(T, [(a,)])
        wrappers[a] = T
    new_productions = {}
    for A, rights in grammar.productions.items():
        new_productions[A] = {
            tuple(wrappers[X] if X.is_terminal else X for X in right)
            if len(right) >= 2 else right
            for right in rights
        }
    for A, rights in new_productions.items():
        grammar.set_productions(A, rights)
    return wrappers

def shorten_rules(grammar, fresh):
    """Split every right side longer than two symbols into a chain.

    ``A -> X1 X2 ... Xk`` becomes ``A -> X1 N1``, ``N1 -> X2 N2``, ...,
    ``N(k-2) -> X(k-1) Xk``, where the ``N`` are fresh nonterminals with one
    rule each.

    Returns
    -------
    list of Nonterminal
        The chain nonterminals, in the order they were created.
    """
    created = []
    additions = {}
    for A, rights in sorted(grammar.productions.items()):
        kept = set()
        for right in sorted(rights):
            if len(right) <= 2:
                kept.add(right)
                continue
            first, *rest = right
            new_rights = kept
            while len(rest) > 1:
                N = fresh.chain()
                created.append(N)
                new_rights.add((first, N))
                new_rights = additions.setdefault(N, set())
                first, *rest = rest
            new_rights.add((first, rest[0]))
        additions[A] = kept
    for A, rights in additions.items():
        grammar.set_productions(A, rights)
    return created

def binarize(grammar):
    """Put every rule into one of the forms ``A -> B C`` or ``A -> a``.

    The grammar must already be free of unit rules and of epsilon rules
    other than one on the start symbol, which is left in place.

    Returns
    -------
    tuple
        The terminal wrapper map and the list of chain nonterminals.
    """
    fresh = FreshNonterminals(grammar)
    wrappers = isolate_terminals(grammar, fresh)
    chains = shorten_rules(grammar, fresh)
    return wrappers, chains
