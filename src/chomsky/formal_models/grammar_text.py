"""Reading and writing grammars in a plain text format.

Example::

    # comment
    nonterminals: S A B
    terminals: a b
    start: S
    S -> AB | a | ε
    A → aA | ∅

The ``nonterminals`` declaration defaults to the set of left sides, and
``start`` defaults to the first left side. The ``terminals`` declaration is
required, so that a misspelled nonterminal is reported instead of being
silently read as a terminal.
"""

import re

from ..util import group_by
from ..printing import EMPTY_SET, format_rule_line, symbol_separator
from .cfg import EPSILON_MARKER, Grammar, GrammarError, split_right_side

DECLARATION_RE = re.compile(r'^(nonterminals|terminals|start)\s*:(.*)$')
ARROW_RE = re.compile(r'->|→')

def parse_grammar(text, start=None):
    """Parse a grammar from a string.

    Parameters
    ----------
    text : str
    start : str, optional
        Overrides the start symbol given in the text.

    Returns
    -------
    Grammar
    """
    declarations = {}
    rule_lines = []
    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        m = DECLARATION_RE.match(line)
        if m is not None:
            key, value = m.groups()
            if key in declarations:
                raise GrammarError(f'line {lineno}: duplicate {key} declaration')
            declarations[key] = (lineno, value.split())
            continue
        parts = ARROW_RE.split(line, 1)
        if len(parts) != 2:
            raise GrammarError(f'line {lineno}: expected a rule of the form A -> ...: {line!r}')
        left, right_str = (p.strip() for p in parts)
        if not left or any(c.isspace() for c in left):
            raise GrammarError(f'line {lineno}: invalid left side {left!r}')
        if right_str == EMPTY_SET:
            alternatives = []
        else:
            alternatives = [alt.strip() for alt in right_str.split('|')]
            if not all(alternatives):
                raise GrammarError(
                    f'line {lineno}: empty right side in {line!r}; write '
                    f'{EPSILON_MARKER} for the empty string or {EMPTY_SET} '
                    f'for no rules')
        rule_lines.append((lineno, left, alternatives))
    if 'terminals' not in declarations:
        raise GrammarError('missing terminals declaration')
    terminals = declarations['terminals'][1]
    if 'nonterminals' in declarations:
        nonterminals = declarations['nonterminals'][1]
    else:
        nonterminals = list(dict.fromkeys(left for _, left, _ in rule_lines))
    if start is None:
        if 'start' in declarations:
            lineno, names = declarations['start']
            if len(names) != 1:
                raise GrammarError(f'line {lineno}: expected exactly one start symbol')
            start, = names
        elif rule_lines:
            start = rule_lines[0][1]
        else:
            raise GrammarError('grammar has no rules and no start declaration')
    vocabulary = set(nonterminals) | set(terminals)
    for lineno, left, alternatives in rule_lines:
        if left not in nonterminals:
            raise GrammarError(f'line {lineno}: {left!r} is not a declared nonterminal')
        for alt in alternatives:
            for name in split_right_side(alt, EPSILON_MARKER, vocabulary):
                if name not in vocabulary:
                    raise GrammarError(f'line {lineno}: unknown symbol {name!r} in {alt!r}')
    productions = {
        left : [alt for _, _, alternatives in lines for alt in alternatives]
        for left, lines in group_by(rule_lines, key=lambda x: x[1]).items()
    }
    return Grammar.from_strings(nonterminals, terminals, start, productions)

def read_grammar(fin, start=None):
    return parse_grammar(fin.read(), start)

def write_grammar(grammar, fout):
    separator = symbol_separator(grammar)
    others = sorted((A for A in grammar.nonterminals if A != grammar.start), key=str)
    nonterminals = [grammar.start] + others
    fout.write('nonterminals: {}\n'.format(' '.join(map(str, nonterminals))))
    fout.write('terminals: {}\n'.format(' '.join(sorted(map(str, grammar.terminals)))))
    fout.write(f'start: {grammar.start}\n')
    for A in nonterminals:
        fout.write(format_rule_line(A, grammar.productions[A], separator))
        fout.write('\n')
