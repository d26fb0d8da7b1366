"""
Test the single-stack postfix builder and its underflow policy.
"""
import unittest

from expression_calculator.expression_tree import ExpressionTree, PostfixBuilder
from expression_calculator.expression_tree.core.node import OperandNode, BinaryOpNode, UnaryOpNode
from expression_calculator.errors import MalformedExpressionError, UnknownTokenError


class TestPostfixBuilder(unittest.TestCase):

    def test_single_operand(self):
        root = PostfixBuilder.build(['5'])
        self.assertIsInstance(root, OperandNode)
        self.assertEqual(root.token, '5')
        self.assertIsNone(root.left)
        self.assertIsNone(root.right)

    def test_first_pop_is_right_operand(self):
        root = PostfixBuilder.build(['8', '3', '-'])
        self.assertIsInstance(root, BinaryOpNode)
        self.assertEqual(root.left.token, '8')
        self.assertEqual(root.right.token, '3')
        self.assertEqual(root.evaluate(), 5.0)

    def test_unary_negation_uses_right_link(self):
        root = PostfixBuilder.build(['5', '!'])
        self.assertIsInstance(root, UnaryOpNode)
        self.assertIsNone(root.left)
        self.assertEqual(root.right.token, '5')
        self.assertEqual(root.evaluate(), -5.0)

    def test_nested_expression(self):
        tree = ExpressionTree.from_postfix("3 4 + 2 *")
        self.assertEqual(tree.evaluate(), 14.0)
        self.assertEqual(tree.to_infix(), "( ( 3 + 4 ) * 2 ) ")

    def test_round_trip_reproduces_tokens(self):
        for expression in ("5", "3 4 +", "3 4 + 2 *", "1 2 3 * + 4 -",
                           "2 3 2 ^ ^", "5 ! 3 +", "10 2 / 3 ! ^", "7 ! !"):
            tree = ExpressionTree.from_postfix(expression)
            self.assertEqual(tree.to_postfix().split(), expression.split(), expression)
            self.assertEqual(tree.to_postfix(), expression + " ")

    def test_whitespace_is_arbitrary(self):
        tree = ExpressionTree.from_postfix("  3\t4   +\n")
        self.assertEqual(tree.to_postfix(), "3 4 + ")


class TestPostfixUnderflowPolicy(unittest.TestCase):
    """Operators seen with an empty stack are skipped; partial underflow fails"""

    def test_leading_operator_is_skipped(self):
        tree = ExpressionTree.from_postfix("+ 3 4 +")
        self.assertEqual(tree.to_postfix(), "3 4 + ")
        self.assertEqual(tree.evaluate(), 7.0)

    def test_leading_negation_is_skipped(self):
        tree = ExpressionTree.from_postfix("! 5")
        self.assertEqual(tree.to_postfix(), "5 ")

    def test_only_operators_builds_nothing(self):
        with self.assertRaises(MalformedExpressionError):
            ExpressionTree.from_postfix("+ - *")

    def test_binary_operator_with_one_operand_fails(self):
        with self.assertRaises(MalformedExpressionError):
            ExpressionTree.from_postfix("3 +")

    def test_leftover_operands_fail(self):
        with self.assertRaises(MalformedExpressionError):
            ExpressionTree.from_postfix("3 4")

    def test_empty_input_fails(self):
        with self.assertRaises(MalformedExpressionError):
            ExpressionTree.from_postfix("")
        with self.assertRaises(MalformedExpressionError):
            ExpressionTree.from_postfix("   ")

    def test_unknown_token(self):
        with self.assertRaises(UnknownTokenError) as ctx:
            ExpressionTree.from_postfix("3 x +")
        self.assertEqual(ctx.exception.token, 'x')

    def test_parentheses_are_unknown_in_postfix(self):
        with self.assertRaises(UnknownTokenError):
            ExpressionTree.from_postfix("( 3 4 + )")


if __name__ == '__main__':
    unittest.main()
