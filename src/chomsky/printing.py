import sys

from .formal_models.cfg import EPSILON_MARKER

ARROW = '→'
EMPTY_SET = '∅'

def symbol_separator(grammar):
    """Symbols are written next to each other when every name in the grammar
    is a single character, and with spaces otherwise."""
    names = [A.value for A in grammar.nonterminals]
    names.extend(a.value for a in grammar.terminals)
    if all(len(str(name)) == 1 for name in names):
        return ''
    else:
        return ' '

def format_right_side(right, separator=''):
    if right:
        return separator.join(map(str, right))
    else:
        return EPSILON_MARKER

def format_rule_line(left, rights, separator=''):
    if rights:
        alternatives = ' | '.join(
            format_right_side(right, separator)
            for right in sorted(rights)
        )
    else:
        alternatives = EMPTY_SET
    return f'{left} {ARROW} {alternatives}'

def format_grammar(grammar):
    separator = symbol_separator(grammar)
    return '\n'.join(
        format_rule_line(A, grammar.productions[A], separator)
        for A in sorted(grammar.nonterminals, key=lambda A: str(A))
    )

def print_grammar(title, grammar, fout=None):
    if fout is None:
        fout = sys.stdout
    fout.write('\n')
    fout.write(title)
    fout.write('\n')
    fout.write(format_grammar(grammar))
    fout.write('\n')

class GrammarPrinter:
    """Reporter that prints the grammar after each normalization stage."""

    def __init__(self, fout=None):
        super().__init__()
        self.fout = fout

    def __call__(self, title, grammar):
        print_grammar(title, grammar, self.fout)
