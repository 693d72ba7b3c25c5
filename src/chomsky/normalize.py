import argparse
import logging
import sys

from chomsky.formal_models.cfg import Grammar, GrammarError
from chomsky.formal_models.grammar_text import read_grammar, write_grammar
from chomsky.event_logging import FileLogger, NullLogger
from chomsky.normal_form.pipeline import (
    check_chomsky_normal_form, to_chomsky_normal_form)
from chomsky.printing import GrammarPrinter, print_grammar

def example_grammar():
    return Grammar.from_strings(
        nonterminals=['S', 'A', 'B', 'C', 'D'],
        terminals=['a', 'b'],
        start='S',
        productions={
            'S' : ['AC', 'bA', 'B', 'aA'],
            'A' : ['ε', 'aS', 'ABab'],
            'B' : ['a', 'bS'],
            'C' : ['abC'],
            'D' : ['AB']
        }
    )

def load_grammar(parser, args):
    if args.input is None:
        if args.start is not None:
            parser.error('--start requires an input grammar file')
        return example_grammar()
    with open(args.input, encoding='utf-8') as fin:
        return read_grammar(fin, args.start)

def main(argv=None):

    parser = argparse.ArgumentParser(
        description=
        'Convert a context-free grammar to Chomsky Normal Form, printing the '
        'grammar after each step of the conversion.'
    )
    parser.add_argument('input', nargs='?',
        help='A grammar file. If omitted, a built-in example grammar is '
             'used.')
    parser.add_argument('--start',
        help='Use this start symbol instead of the one in the grammar file.')
    parser.add_argument('--output',
        help='Write the final grammar to this file.')
    parser.add_argument('--log-file',
        help='Write a structured log of each conversion step to this file.')
    parser.add_argument('--quiet', action='store_true', default=False,
        help='Do not print the grammar after each step.')
    args = parser.parse_args(argv)

    logger = logging.getLogger('main')
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    logger.setLevel(logging.WARNING if args.quiet else logging.INFO)

    try:
        grammar = load_grammar(parser, args)
    except (OSError, GrammarError) as e:
        logger.error(f'error: {e}')
        return 1
    logger.info(
        f'read grammar with {len(grammar.nonterminals)} nonterminals, '
        f'{len(grammar.terminals)} terminals and {grammar.size} rules')

    reporter = None if args.quiet else GrammarPrinter(sys.stdout)
    if reporter is not None:
        print_grammar('Original Grammar', grammar, sys.stdout)
    if args.log_file is not None:
        try:
            log_file = open(args.log_file, 'w', encoding='utf-8')
        except OSError as e:
            logger.error(f'error: {e}')
            return 1
        events = FileLogger(log_file, flush=True)
    else:
        log_file = None
        events = NullLogger()
    try:
        to_chomsky_normal_form(grammar, logger=logger, events=events,
            reporter=reporter)
    finally:
        if log_file is not None:
            log_file.close()
    check_chomsky_normal_form(grammar)

    if args.output is not None:
        try:
            with open(args.output, 'w', encoding='utf-8') as fout:
                write_grammar(grammar, fout)
        except OSError as e:
            logger.error(f'error: {e}')
            return 1
        logger.info(f'wrote grammar to {args.output}')
    return 0

if __name__ == '__main__':
    sys.exit(main())
