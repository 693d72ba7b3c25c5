import unittest

from chomsky.formal_models.cfg import Grammar, Nonterminal, Terminal
from chomsky.normal_form.binarize import (
    FreshNonterminals, binarize, isolate_terminals, shorten_rules)
from chomsky.normal_form.pipeline import is_chomsky_normal_form

from grammar_util import strings_up_to

S = Nonterminal('S')
A = Nonterminal('A')
B = Nonterminal('B')
C = Nonterminal('C')
D = Nonterminal('D')
a = Terminal('a')
b = Terminal('b')
T_a = Nonterminal('T_a')
T_b = Nonterminal('T_b')
X1 = Nonterminal('X1')
X2 = Nonterminal('X2')
X3 = Nonterminal('X3')

class TestFreshNonterminals(unittest.TestCase):

    def test_chain_names_skip_used_names(self):
        G = Grammar.from_strings(['S', 'X1', 'X3'], ['a'], 'S', {})
        fresh = FreshNonterminals(G)
        self.assertEqual(fresh.chain(), X2)
        self.assertEqual(fresh.chain(), Nonterminal('X4'))
        self.assertIn(X2, G.nonterminals)
        self.assertEqual(G.productions[X2], set())

    def test_chain_names_skip_terminal_names(self):
        G = Grammar.from_strings(['S'], ['X1'], 'S', {})
        self.assertEqual(FreshNonterminals(G).chain(), X2)

    def test_terminal_wrapper_collision(self):
        G = Grammar.from_strings(['S', 'T_a', 'T_a_1'], ['a'], 'S', {})
        fresh = FreshNonterminals(G)
        self.assertEqual(fresh.terminal(a), Nonterminal('T_a_2'))

    def test_independent_generators(self):
        G = Grammar.from_strings(['S'], ['a'], 'S', {})
        H = G.copy()
        FreshNonterminals(G).chain()
        self.assertEqual(FreshNonterminals(H).chain(), X1)

class TestIsolateTerminals(unittest.TestCase):

    def test_only_long_right_sides_are_rewritten(self):
        G = Grammar.from_strings(['S', 'A'], ['a', 'b'], 'S', {
            'S' : ['aA', 'a'],
            'A' : ['b']
        })
        wrappers = isolate_terminals(G, FreshNonterminals(G))
        self.assertEqual(wrappers, { a : T_a })
        self.assertEqual(G.productions[S], { (T_a, A), (a,) })
        self.assertEqual(G.productions[A], { (b,) })
        self.assertEqual(G.productions[T_a], { (a,) })
        self.assertNotIn(T_b, G.nonterminals)

    def test_one_wrapper_per_terminal(self):
        G = Grammar.from_strings(['S'], ['a', 'b'], 'S', {
            'S' : ['aba', 'ab']
        })
        isolate_terminals(G, FreshNonterminals(G))
        self.assertEqual(G.nonterminals, { S, T_a, T_b })
        self.assertEqual(G.productions[S], { (T_a, T_b, T_a), (T_a, T_b) })

class TestShortenRules(unittest.TestCase):

    def test_chain(self):
        G = Grammar.from_strings(['S', 'A', 'B', 'C', 'D'], ['a'], 'S', {
            'S' : ['ABCD', 'AB'],
            'A' : ['a'], 'B' : ['a'], 'C' : ['a'], 'D' : ['a']
        })
        created = shorten_rules(G, FreshNonterminals(G))
        self.assertEqual(created, [X1, X2])
        self.assertEqual(G.productions[S], { (A, X1), (A, B) })
        self.assertEqual(G.productions[X1], { (B, X2) })
        self.assertEqual(G.productions[X2], { (C, D) })

    def test_each_long_rule_gets_its_own_chain(self):
        G = Grammar.from_strings(['S', 'A'], ['a'], 'S', {
            'S' : ['AAA', 'SSS'],
            'A' : ['a']
        })
        shorten_rules(G, FreshNonterminals(G))
        self.assertEqual(G.productions[S], { (A, X1), (S, X2) })
        self.assertEqual(G.productions[X1], { (A, A) })
        self.assertEqual(G.productions[X2], { (S, S) })

class TestBinarize(unittest.TestCase):

    def construct_grammar(self):
        return Grammar.from_strings(['S', 'A', 'B'], ['a', 'b'], 'S', {
            'S' : ['bA', 'b', 'aA', 'a', 'bS'],
            'A' : ['aS', 'ABab', 'Bab'],
            'B' : ['a', 'bS']
        })

    def test_result(self):
        G = self.construct_grammar()
        wrappers, chains = binarize(G)
        self.assertEqual(wrappers, { a : T_a, b : T_b })
        self.assertEqual(chains, [X1, X2, X3])
        self.assertEqual(G.nonterminals, { S, A, B, T_a, T_b, X1, X2, X3 })
        self.assertEqual(G.productions[S], {
            (T_b, A), (b,), (T_a, A), (a,), (T_b, S)
        })
        self.assertEqual(G.productions[A], { (T_a, S), (A, X1), (B, X3) })
        self.assertEqual(G.productions[X1], { (B, X2) })
        self.assertEqual(G.productions[X2], { (T_a, T_b) })
        self.assertEqual(G.productions[X3], { (T_a, T_b) })
        self.assertEqual(G.productions[B], { (a,), (T_b, S) })
        self.assertTrue(is_chomsky_normal_form(G))

    def test_preserves_language(self):
        G = self.construct_grammar()
        expected = strings_up_to(G, 7)
        binarize(G)
        self.assertEqual(strings_up_to(G, 7), expected)

    def test_start_epsilon_rule_is_untouched(self):
        G = Grammar.from_strings(['S'], ['a'], 'S', { 'S' : ['ε', 'aaa'] })
        binarize(G)
        self.assertIn((), G.productions[S])
        self.assertTrue(is_chomsky_normal_form(G))

if __name__ == '__main__':
    unittest.main()
