import unittest

from chomsky.formal_models.cfg import Grammar, Nonterminal, Terminal
from chomsky.normal_form.epsilon import nullable_nonterminals, remove_epsilon_rules

from grammar_util import example_grammar, strings_up_to

S = Nonterminal('S')
A = Nonterminal('A')
B = Nonterminal('B')
C = Nonterminal('C')
D = Nonterminal('D')
a = Terminal('a')
b = Terminal('b')

class TestNullable(unittest.TestCase):

    def test_example(self):
        self.assertEqual(nullable_nonterminals(example_grammar()), { A })

    def test_nullable_through_chain(self):
        G = Grammar.from_strings(['S', 'A', 'B'], ['a'], 'S', {
            'S' : ['AB', 'a'],
            'A' : ['B'],
            'B' : ['ε', 'aB']
        })
        self.assertEqual(nullable_nonterminals(G), { S, A, B })

    def test_no_nullable(self):
        G = Grammar.from_strings(['S'], ['a'], 'S', { 'S' : ['a', 'aS'] })
        self.assertEqual(nullable_nonterminals(G), set())

class TestRemoveEpsilonRules(unittest.TestCase):

    def test_example(self):
        G = example_grammar()
        nullable = remove_epsilon_rules(G)
        self.assertEqual(nullable, { A })
        self.assertEqual(G.productions[S], {
            (A, C), (C,), (b, A), (b,), (B,), (a, A), (a,)
        })
        self.assertEqual(G.productions[A], { (a, S), (A, B, a, b), (B, a, b) })
        self.assertEqual(G.productions[B], { (a,), (b, S) })
        self.assertEqual(G.productions[C], { (a, b, C) })
        self.assertEqual(G.productions[D], { (A, B), (B,) })
        self.assertFalse(G.has_epsilon_rules)

    def test_power_set_of_nullable_positions(self):
        G = Grammar.from_strings(['S', 'A'], ['a', 'b'], 'S', {
            'S' : ['AbA'],
            'A' : ['a', 'ε']
        })
        remove_epsilon_rules(G)
        self.assertEqual(G.productions[S], { (A, b, A), (b, A), (A, b), (b,) })
        self.assertEqual(G.productions[A], { (a,) })

    def test_nullable_start_keeps_one_epsilon_rule(self):
        G = Grammar.from_strings(['S', 'A'], ['a'], 'S', {
            'S' : ['AA', 'ε'],
            'A' : ['a', 'ε']
        })
        remove_epsilon_rules(G)
        self.assertEqual(G.productions[S], { (A, A), (A,), () })
        self.assertEqual(G.productions[A], { (a,) })

    def test_only_epsilon(self):
        G = Grammar.from_strings(['S'], ['a'], 'S', { 'S' : ['ε'] })
        remove_epsilon_rules(G)
        self.assertEqual(G.productions, { S : { () } })

    def test_right_side_without_nullable_symbols_is_unchanged(self):
        G = Grammar.from_strings(['S'], ['a', 'b'], 'S', { 'S' : ['ab', 'aSb'] })
        before = G.copy()
        remove_epsilon_rules(G)
        self.assertEqual(G, before)

    def test_preserves_language(self):
        grammars = [
            example_grammar(),
            Grammar.from_strings(['S', 'A', 'B'], ['a', 'b'], 'S', {
                'S' : ['AB', 'aSb'],
                'A' : ['aA', 'ε'],
                'B' : ['bB', 'ε']
            }),
            Grammar.from_strings(['S'], ['a', 'b'], 'S', {
                'S' : ['aSbS', 'ε']
            })
        ]
        for G in grammars:
            expected = strings_up_to(G, 6)
            remove_epsilon_rules(G)
            self.assertEqual(strings_up_to(G, 6), expected)
            self.assertEqual(
                [r for r in G.rules if r.is_epsilon and r.left != G.start],
                [])

if __name__ == '__main__':
    unittest.main()
