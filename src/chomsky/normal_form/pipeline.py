import attr

from ..formal_models.cfg import GrammarError
from ..event_logging import NullLogger
from .binarize import FreshNonterminals, isolate_terminals, shorten_rules
from .epsilon import remove_epsilon_rules
from .pruning import (
    remove_unproductive_nonterminals, remove_unreachable_nonterminals)
from .unit import remove_unary_rules

@attr.s(frozen=True)
class NormalizationStage:
    name = attr.ib()
    title = attr.ib()
    function = attr.ib()

@attr.s
class StageReport:
    name = attr.ib()
    title = attr.ib()
    nonterminals = attr.ib()
    rules = attr.ib()
    details = attr.ib()

TERMINALS_ISOLATED_TITLE = '5a. After replacing terminals with nonterminals'

def _epsilon_stage(grammar, checkpoint):
    nullable = remove_epsilon_rules(grammar)
    return { 'nullable' : _names(nullable) }

def _unit_stage(grammar, checkpoint):
    closures = remove_unary_rules(grammar)
    return {
        'unit_pairs' : sorted(
            [str(A), str(B)]
            for A, closure in closures.items()
            for B in closure
            if A != B
        )
    }

def _reachability_stage(grammar, checkpoint):
    removed = remove_unreachable_nonterminals(grammar)
    return { 'removed' : _names(removed) }

def _productivity_stage(grammar, checkpoint):
    removed = remove_unproductive_nonterminals(grammar)
    # Dropping dead rules can strand nonterminals that were only reachable
    # through them.
    stranded = remove_unreachable_nonterminals(grammar)
    return { 'removed' : _names(removed), 'unreachable' : _names(stranded) }

def _binarization_stage(grammar, checkpoint):
    fresh = FreshNonterminals(grammar)
    wrappers = isolate_terminals(grammar, fresh)
    checkpoint(TERMINALS_ISOLATED_TITLE)
    chains = shorten_rules(grammar, fresh)
    return {
        'terminal_wrappers' : { str(a) : str(T) for a, T in sorted(wrappers.items()) },
        'chain_nonterminals' : [str(N) for N in chains]
    }

def _names(symbols):
    return sorted(map(str, symbols))

STAGES = [
    NormalizationStage('epsilon', '1. After eliminating ε-productions', _epsilon_stage),
    NormalizationStage('unit', '2. After eliminating unit productions', _unit_stage),
    NormalizationStage('reachability', '3. After eliminating inaccessible symbols', _reachability_stage),
    NormalizationStage('productivity', '4. After eliminating non-productive symbols', _productivity_stage),
    NormalizationStage('binarization', '5b. After breaking down into CNF', _binarization_stage)
]

def to_chomsky_normal_form(grammar, logger=None, events=None, reporter=None):
    """Convert a grammar to Chomsky Normal Form in place.

    Parameters
    ----------
    grammar : chomsky.formal_models.cfg.Grammar
    logger : logging.Logger, optional
        Receives a one-line summary of each stage.
    events : chomsky.event_logging.Logger, optional
        Receives a structured ``stage`` event for each stage.
    reporter : callable, optional
        Called as ``reporter(title, grammar)`` after each stage. The
        binarization stage also reports the grammar between its two steps,
        under ``TERMINALS_ISOLATED_TITLE``.

    Returns
    -------
    list of StageReport
    """
    if events is None:
        events = NullLogger()
    if reporter is None:
        checkpoint = lambda title: None
    else:
        checkpoint = lambda title: reporter(title, grammar)
    events.log_grammar('start', grammar)
    reports = []
    for stage in STAGES:
        details = stage.function(grammar, checkpoint)
        report = StageReport(
            name=stage.name,
            title=stage.title,
            nonterminals=len(grammar.nonterminals),
            rules=grammar.size,
            details=details
        )
        reports.append(report)
        if logger is not None:
            logger.info(
                f'{stage.name}: {report.nonterminals} nonterminals, '
                f'{report.rules} rules')
        events.log_grammar('stage', grammar, name=stage.name, **details)
        checkpoint(stage.title)
    return reports

def find_non_normal_rule(grammar):
    """Return the first rule that is not in Chomsky Normal Form, or None."""
    for rule in grammar.rules:
        if rule.is_epsilon:
            if rule.left != grammar.start:
                return rule
        elif not (rule.is_lexical or rule.is_binary):
            return rule
    return None

def is_chomsky_normal_form(grammar):
    return find_non_normal_rule(grammar) is None

def check_chomsky_normal_form(grammar):
    rule = find_non_normal_rule(grammar)
    if rule is not None:
        raise GrammarError(f'rule {rule} is not in Chomsky Normal Form')
