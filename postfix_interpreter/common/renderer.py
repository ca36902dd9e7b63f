"""Render abstract syntax trees as fully parenthesized infix text."""
from postfix_interpreter.common.nodes import LeafNode, Node


class InfixRenderer:
    """
    Render a tree in human-readable infix notation.

    Every interior node is wrapped in parentheses, so precedence never has to
    be inferred from the output:
        - Postfix: 5 3 + 2 *
        - Infix:   ((5 + 3) * 2)
    """

    @staticmethod
    def render(node: Node) -> str:
        """
        Produce the infix form of ``node``.

        :param Node node: Root of the tree

        :return: Parenthesized infix expression
        :rtype: str
        """
        if isinstance(node, LeafNode):
            return node.token
        return f"({InfixRenderer.render(node.left)} {node.token} {InfixRenderer.render(node.right)})"
