"""Recursive-descent parser turning a command line into a syntax tree.

Grammar::

    Pipe      : Command | Command '|' Pipe
    Command   : Arguments | Redirect | Arguments Redirect
              | Redirect Arguments | Redirect Arguments Redirect
    Arguments : ARG | ARG Arguments
    Redirect  : RedirectOperator ARG | RedirectOperator ARG Redirect
"""

from __future__ import annotations

from typing import Mapping

from msh.expansion import expand_argument
from msh.lexer import Lexer, Token, TokenType, is_redirect
from msh.syntax_tree import Node, NodeType

_REDIRECT_NODES = {
    TokenType.GRT: NodeType.GRT,
    TokenType.LSR: NodeType.LSR,
    TokenType.D_GRT: NodeType.APPEND,
    TokenType.D_LSR: NodeType.HEREDOC,
}


class ParseError(ValueError):
    """Raised when a command line does not follow the grammar."""


class Parser:
    """Parses one command line, expanding arguments as it goes."""

    def __init__(
        self, line: str, status: int = 0, env: Mapping[str, str] | None = None
    ) -> None:
        self.status = status
        self.env: Mapping[str, str] = env if env is not None else {}
        self._lexer = Lexer(line)
        self.next_token: Token = self._lexer.next_token()

    def eat(self, token_type: TokenType) -> Token:
        """Consume the next token, which must be of *token_type*."""
        current = self.next_token
        if current.type is TokenType.NONE:
            raise ParseError("unexpected end of input")
        if current.type is not token_type:
            raise ParseError(
                f"syntax error near unexpected token `{current.text}'"
            )
        self.next_token = self._lexer.next_token()
        return current

    def parse(self) -> Node:
        """Parse the whole line as a pipeline."""
        commands = [self.parse_command()]
        pipes: list[Token] = []
        while self.next_token.type is TokenType.PIPE:
            pipes.append(self.eat(TokenType.PIPE))
            commands.append(self.parse_command())
        tree = commands.pop()
        while pipes:
            tree = Node(NodeType.PIPE, pipes.pop().text, commands.pop(), tree)
        return tree

    def parse_command(self) -> Node:
        """Parse one command: its arguments and redirections."""
        redirect = None
        if is_redirect(self.next_token.type):
            redirect = self._parse_redirect()
            if self.next_token.type is not TokenType.ARG:
                return redirect
        command = self._parse_arguments()
        command.right = redirect
        while is_redirect(self.next_token.type):
            self._parse_redirect_and_arguments(command)
        return command

    def _parse_arguments(self) -> Node:
        token = self.eat(TokenType.ARG)
        head = tail = Node(NodeType.ARG, self._expand(token.text))
        while self.next_token.type is TokenType.ARG:
            token = self.eat(TokenType.ARG)
            tail.left = Node(NodeType.ARG, self._expand(token.text))
            tail = tail.left
        return head

    def _expand(self, text: str | None) -> str:
        return expand_argument(text or "", self.status, self.env)

    def _parse_redirect(self) -> Node:
        head: Node | None = None
        tail: Node | None = None
        while True:
            operator = self.eat(self.next_token.type)
            target = self.eat(TokenType.ARG)
            node = Node(
                _REDIRECT_NODES[operator.type],
                operator.text,
                Node(NodeType.ARG, target.text),
            )
            if tail is None:
                head = node
            else:
                tail.right = node
            tail = node
            if not is_redirect(self.next_token.type):
                return head

    def _parse_redirect_and_arguments(self, command: Node) -> None:
        last = command
        while last.right is not None:
            last = last.right
        last.right = self._parse_redirect()
        if self.next_token.type is TokenType.ARG:
            last = command
            while last.left is not None:
                last = last.left
            last.left = self._parse_arguments()


def parse(
    line: str, status: int = 0, env: Mapping[str, str] | None = None
) -> Node:
    """Parse *line*, expanding ``$?`` to *status* and variables from *env*."""
    return Parser(line, status, env).parse()