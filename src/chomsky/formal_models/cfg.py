EPSILON_MARKER = 'ε'

class GrammarError(ValueError):
    pass

class Symbol:

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return 'Symbol(%r)' % (self.value,)

    def __eq__(self, other):
        return type(self) == type(other) and self.value == other.value

    def __hash__(self):
        return hash((self.value, type(self)))

    def __lt__(self, other):
        if not isinstance(other, Symbol):
            raise TypeError
        return (self.is_terminal, self.value) < (other.is_terminal, other.value)

    @property
    def is_terminal(self):
        raise NotImplementedError

    @property
    def is_nonterminal(self):
        raise NotImplementedError

class Terminal(Symbol):

    def __repr__(self):
        return 'Terminal(%r)' % (self.value,)

    @property
    def is_terminal(self):
        return True

    @property
    def is_nonterminal(self):
        return False

class Nonterminal(Symbol):

    def __repr__(self):
        return 'Nonterminal(%r)' % (self.value,)

    @property
    def is_terminal(self):
        return False

    @property
    def is_nonterminal(self):
        return True

class Rule:

    def __init__(self, left, right):
        if not isinstance(left, Nonterminal):
            raise TypeError('left side must be a nonterminal')
        if not isinstance(right, tuple):
            right = tuple(right)
        for x in right:
            if not isinstance(x, Symbol):
                raise TypeError('right side must be a sequence of symbols')
        self.left = left
        self.right = right

    @property
    def is_epsilon(self):
        return len(self.right) == 0

    @property
    def is_unary(self):
        return is_unit(self.right)

    @property
    def is_lexical(self):
        return len(self.right) == 1 and self.right[0].is_terminal

    @property
    def is_binary(self):
        return len(self.right) == 2 and all(X.is_nonterminal for X in self.right)

    def _key(self):
        return (self.left, self.right)

    def __hash__(self):
        return hash(self._key())

    def __eq__(self, other):
        return type(self) == type(other) and self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, Rule):
            raise TypeError
        return self._key() < other._key()

    def __str__(self):
        return '%s -> %s' % (
            self.left,
            ' '.join(map(str, self.right)) if self.right else EPSILON_MARKER
        )

    def __repr__(self):
        return 'Rule(%r, %r)' % (self.left, self.right)

def is_unit(right):
    return len(right) == 1 and right[0].is_nonterminal

class Grammar:
    """A context-free grammar whose productions can be rewritten in place.

    Productions are stored as a dict mapping every nonterminal to a set of
    right sides, where each right side is a tuple of :class:`Symbol` and the
    empty tuple is an epsilon production.
    """

    def __init__(self, nonterminals, terminals, start, productions):
        nonterminals = set(nonterminals)
        terminals = set(terminals)
        for A in nonterminals:
            if not isinstance(A, Nonterminal):
                raise GrammarError(f'{A!r} is not a nonterminal')
        for a in terminals:
            if not isinstance(a, Terminal):
                raise GrammarError(f'{a!r} is not a terminal')
        overlap = {A.value for A in nonterminals} & {a.value for a in terminals}
        if overlap:
            raise GrammarError(
                'symbols cannot be both terminal and nonterminal: '
                + ', '.join(sorted(map(str, overlap))))
        if start not in nonterminals:
            raise GrammarError(f'start symbol {start} is not a nonterminal of the grammar')
        self.nonterminals = nonterminals
        self.terminals = terminals
        self.start = start
        self.productions = { A : set() for A in nonterminals }
        for A, rights in productions.items():
            if A not in nonterminals:
                raise GrammarError(f'left side {A} is not a nonterminal of the grammar')
            for right in rights:
                right = tuple(right)
                self._check_right_side(A, right)
                self.productions[A].add(right)

    def _check_right_side(self, left, right):
        for X in right:
            if X not in self.nonterminals and X not in self.terminals:
                raise GrammarError(
                    f'rule {Rule(left, right)} uses unknown symbol {X!r}')

    @staticmethod
    def from_strings(nonterminals, terminals, start, productions,
            epsilon=EPSILON_MARKER):
        """Construct a grammar from plain symbol names.

        Parameters
        ----------
        nonterminals : iterable of str
        terminals : iterable of str
        start : str
        productions : dict
            Maps nonterminal names to lists of right side strings. A right
            side containing whitespace is split on whitespace. Otherwise it
            is read as one symbol if it names one, and split into single
            characters if not. The string ``epsilon`` stands for the empty
            right side.
        epsilon : str

        Returns
        -------
        Grammar
        """
        nonterminal_names = set(nonterminals)
        terminal_names = set(terminals)
        if epsilon in nonterminal_names or epsilon in terminal_names:
            raise GrammarError(f'the epsilon marker {epsilon!r} cannot be a grammar symbol')
        vocabulary = nonterminal_names | terminal_names
        def to_symbol(name, rule_str):
            if name in nonterminal_names:
                return Nonterminal(name)
            elif name in terminal_names:
                return Terminal(name)
            elif name == epsilon:
                raise GrammarError(
                    f'{epsilon!r} must stand alone in a right side: {rule_str}')
            else:
                raise GrammarError(f'rule {rule_str} uses unknown symbol {name!r}')
        converted = {}
        for left, rights in productions.items():
            if left not in nonterminal_names:
                raise GrammarError(f'left side {left!r} is not a nonterminal of the grammar')
            converted_rights = converted.setdefault(Nonterminal(left), [])
            for right_str in rights:
                if not right_str.strip():
                    raise GrammarError(
                        f'rule for {left!r} has an empty right side; write '
                        f'{epsilon} for the empty string')
                rule_str = f'{left} -> {right_str}'
                converted_rights.append(tuple(
                    to_symbol(name, rule_str)
                    for name in split_right_side(right_str, epsilon, vocabulary)
                ))
        if start not in nonterminal_names:
            raise GrammarError(f'start symbol {start!r} is not a nonterminal of the grammar')
        return Grammar(
            (Nonterminal(A) for A in nonterminal_names),
            (Terminal(a) for a in terminal_names),
            Nonterminal(start),
            converted
        )

    @staticmethod
    def from_rules(start, rules):
        if not isinstance(start, Nonterminal):
            raise TypeError('start symbol must be a nonterminal')
        rules = list(rules)
        for rule in rules:
            if not isinstance(rule, Rule):
                raise TypeError('rules must be instances of %s' % Rule)
        terminals = set()
        nonterminals = { start }
        productions = {}
        for rule in rules:
            nonterminals.add(rule.left)
            productions.setdefault(rule.left, []).append(rule.right)
            for X in rule.right:
                (terminals if X.is_terminal else nonterminals).add(X)
        return Grammar(nonterminals, terminals, start, productions)

    @property
    def rules(self):
        return sorted(
            Rule(A, right)
            for A, rights in self.productions.items()
            for right in rights
        )

    @property
    def size(self):
        return sum(len(rights) for rights in self.productions.values())

    @property
    def has_epsilon_rules(self):
        return any(() in rights for rights in self.productions.values())

    @property
    def has_unary_rules(self):
        return any(
            is_unit(right)
            for rights in self.productions.values()
            for right in rights
        )

    def set_productions(self, left, rights):
        if left not in self.nonterminals:
            raise GrammarError(f'{left} is not a nonterminal of the grammar')
        rights = { tuple(right) for right in rights }
        for right in rights:
            self._check_right_side(left, right)
        self.productions[left] = rights

    def add_nonterminal(self, A):
        if A in self.nonterminals or Terminal(A.value) in self.terminals:
            raise GrammarError(f'symbol {A} is already used in the grammar')
        self.nonterminals.add(A)
        self.productions[A] = set()

    def remove_nonterminals(self, symbols):
        symbols = set(symbols)
        if self.start in symbols:
            raise GrammarError(f'cannot remove the start symbol {self.start}')
        self.nonterminals -= symbols
        for A in symbols:
            self.productions.pop(A, None)

    def copy(self):
        return Grammar(
            self.nonterminals,
            self.terminals,
            self.start,
            self.productions
        )

    def __eq__(self, other):
        return (
            type(self) == type(other) and
            self.start == other.start and
            self.nonterminals == other.nonterminals and
            self.terminals == other.terminals and
            self.productions == other.productions
        )

    def __str__(self):
        return '\n'.join(map(str, self.rules))

    def __repr__(self):
        return 'Grammar(%r, %r)' % (self.start, self.rules)

def split_right_side(right_str, epsilon=EPSILON_MARKER, symbols=()):
    right_str = right_str.strip()
    if not right_str:
        raise GrammarError(
            f'empty right side; write {epsilon} for the empty string')
    elif right_str == epsilon:
        return []
    elif right_str in symbols:
        return [right_str]
    elif any(c.isspace() for c in right_str):
        return right_str.split()
    else:
        return list(right_str)
