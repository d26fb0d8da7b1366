"""
Test ExpressionTree construction, evaluation and serialization across modes.
"""
import unittest

from expression_calculator import (
    ExpressionTree, BuildMode, construct, evaluate, to_infix, to_postfix
)
from expression_calculator.expression_tree.core.node import OperandNode, BinaryOpNode
from expression_calculator.errors import (
    DivisionByZeroError, NonNumericLiteralError, NumericOverflowError
)


class TestConstruct(unittest.TestCase):

    def test_mode_accepts_enum_and_name(self):
        self.assertEqual(construct("1 2 +", BuildMode.POSTFIX).evaluate(), 3.0)
        self.assertEqual(construct("1 2 +", "postfix").evaluate(), 3.0)
        self.assertEqual(construct("1 + 2", "INFIX").evaluate(), 3.0)

    def test_unknown_mode(self):
        with self.assertRaises(ValueError):
            construct("1 + 2", "prefix")

    def test_accepts_token_sequence(self):
        tree = ExpressionTree.construct(['(', '3', '+', '4', ')', '*', '2'], BuildMode.INFIX)
        self.assertEqual(tree.evaluate(), 14.0)

    def test_single_operand(self):
        tree = ExpressionTree.from_infix("5")
        self.assertIsInstance(tree.root, OperandNode)
        self.assertEqual(tree.size(), 1)
        self.assertEqual(tree.evaluate(), 5.0)
        self.assertEqual(tree.to_infix(), "5 ")
        self.assertEqual(tree.to_postfix(), "5 ")


class TestCrossMode(unittest.TestCase):

    def test_infix_and_postfix_build_the_same_tree(self):
        from_infix = ExpressionTree.from_infix("( 3 + 4 ) * 2")
        from_postfix = ExpressionTree.from_postfix("3 4 + 2 *")
        self.assertEqual(from_infix.evaluate(), 14.0)
        self.assertEqual(from_postfix.evaluate(), 14.0)
        self.assertEqual(from_infix.to_postfix(), from_postfix.to_postfix())
        self.assertEqual(from_infix, from_postfix)
        self.assertEqual(hash(from_infix), hash(from_postfix))

    def test_different_shapes_are_not_equal(self):
        self.assertNotEqual(ExpressionTree.from_infix("1 + 2 + 3"),
                            ExpressionTree.from_postfix("1 2 3 + +"))
        self.assertNotEqual(ExpressionTree.from_infix("1 + 2"), "1 + 2")

    def test_foreign_comparison_defers_to_other_operand(self):
        tree = ExpressionTree.from_infix("1 + 2")
        self.assertIs(tree.__eq__("1 + 2"), NotImplemented)
        self.assertIs(tree.root.__eq__(3), NotImplemented)
        self.assertNotEqual(ExpressionTree(), tree)

    def test_module_level_functions(self):
        tree = construct("3 4 + 2 *", BuildMode.POSTFIX)
        self.assertEqual(evaluate(tree), 14.0)
        self.assertEqual(to_infix(tree), "( ( 3 + 4 ) * 2 ) ")
        self.assertEqual(to_postfix(tree), "3 4 + 2 * ")


class TestIdempotence(unittest.TestCase):
    EXPRESSIONS = [
        "2 + 3 * 4",
        "( 2 + 3 ) * 4",
        "2 ^ 3 ^ 2",
        "8 - 3 - 2",
        "! 5 + 2",
        "100 / ( 4 - ! 1 ) ^ 2",
    ]

    def test_rebuild_from_infix_output(self):
        for expression in self.EXPRESSIONS:
            tree = ExpressionTree.from_infix(expression)
            rebuilt = ExpressionTree.from_infix(tree.to_infix())
            self.assertEqual(rebuilt, tree, expression)
            self.assertEqual(rebuilt.evaluate(), tree.evaluate(), expression)
            self.assertEqual(rebuilt.to_infix(), tree.to_infix(), expression)

    def test_rebuild_from_postfix_output(self):
        for expression in self.EXPRESSIONS:
            tree = ExpressionTree.from_infix(expression)
            rebuilt = ExpressionTree.from_postfix(tree.to_postfix())
            self.assertEqual(rebuilt, tree, expression)
            self.assertEqual(rebuilt.evaluate(), tree.evaluate(), expression)


class TestSerialization(unittest.TestCase):

    def test_infix_is_fully_parenthesized(self):
        tree = ExpressionTree.from_infix("1 + 2 * 3")
        self.assertEqual(tree.to_infix(), "( 1 + ( 2 * 3 ) ) ")

    def test_unary_infix_has_no_left_side(self):
        tree = ExpressionTree.from_postfix("5 ! 3 *")
        self.assertEqual(tree.to_infix(), "( ( ! 5 ) * 3 ) ")

    def test_zero_literal_is_not_parenthesized(self):
        tree = ExpressionTree.from_postfix("0 1 +")
        self.assertEqual(tree.to_infix(), "( 0 + 1 ) ")

    def test_serialization_is_repeatable(self):
        tree = ExpressionTree.from_infix("( 3 + 4 ) * 2")
        self.assertEqual(tree.to_infix(), tree.to_infix())
        self.assertEqual(tree.to_postfix(), tree.to_postfix())

    def test_to_string_drops_trailing_space(self):
        tree = ExpressionTree.from_infix("3 + 4")
        self.assertEqual(tree.to_string(), "( 3 + 4 )")
        self.assertEqual(repr(tree), "ExpressionTree('( 3 + 4 )')")

    def test_empty_tree(self):
        tree = ExpressionTree()
        self.assertTrue(tree.is_empty())
        self.assertEqual(tree.evaluate(), 0.0)
        self.assertEqual(tree.to_infix(), "")
        self.assertEqual(tree.to_postfix(), "")
        self.assertEqual(tree.size(), 0)


class TestEvaluation(unittest.TestCase):

    def test_true_division(self):
        self.assertEqual(ExpressionTree.from_infix("7 / 2").evaluate(), 3.5)

    def test_negative_results(self):
        self.assertEqual(ExpressionTree.from_infix("3 - 10").evaluate(), -7.0)
        self.assertEqual(ExpressionTree.from_postfix("5 !").evaluate(), -5.0)

    def test_negation_ignores_left_link(self):
        tree = ExpressionTree.from_postfix("2 5 ! +")
        self.assertEqual(tree.evaluate(), -3.0)

    def test_division_by_zero(self):
        with self.assertRaises(DivisionByZeroError):
            ExpressionTree.from_infix("1 / ( 2 - 2 )").evaluate()

    def test_overflow(self):
        with self.assertRaises(NumericOverflowError):
            ExpressionTree.from_infix("10 ^ 10 ^ 3").evaluate()

    def test_non_numeric_literal_fails_at_evaluation(self):
        tree = ExpressionTree.from_infix("3a + 1")
        self.assertEqual(tree.to_postfix(), "3a 1 + ")
        with self.assertRaises(NonNumericLiteralError) as ctx:
            tree.evaluate()
        self.assertEqual(ctx.exception.literal, "3a")

    def test_decimal_point_is_not_a_numeral(self):
        with self.assertRaises(NonNumericLiteralError):
            ExpressionTree.from_postfix("2.5").evaluate()

    def test_well_formed(self):
        tree = ExpressionTree.from_infix("! ( 1 + 2 ) * 3")
        self.assertTrue(tree.is_well_formed())
        self.assertIsInstance(tree.root, BinaryOpNode)


if __name__ == '__main__':
    unittest.main()
