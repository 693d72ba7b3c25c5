from .epsilon import nullable_nonterminals, remove_epsilon_rules
from .unit import unit_closure, remove_unary_rules
from .pruning import (
    reachable_nonterminals, remove_unreachable_nonterminals,
    productive_nonterminals, remove_unproductive_nonterminals)
from .binarize import FreshNonterminals, isolate_terminals, shorten_rules, binarize
from .pipeline import (
    STAGES, TERMINALS_ISOLATED_TITLE, to_chomsky_normal_form, is_chomsky_normal_form,
    check_chomsky_normal_form)
