"""
Turns one line of text into typed symbols.

Tokens are separated by single spaces, but comments and function headers
reach past the next space: a comment runs to its matching ``)`` and a
function header to the first ``;`` that is not inside parentheses. Only
parentheses nest; square and curly brackets mean nothing to the lexer.
"""
from dataclasses import dataclass

from lineforth.errors import MissingFunctionName, MissingTerminator, UnbalancedParenthesis

COMMENT_OPEN = '('
COMMENT_CLOSE = ')'
FUNCTION_OPEN = ':'
FUNCTION_CLOSE = ';'


@dataclass(frozen=True)
class Symbol:
    """
    A half-open ``[location_start, location_end)`` span of the line being
    lexed. The lexer only ever yields the subclasses below; a bare Symbol
    is what errors carry when there's no real token to point at (e.g. an
    unclosed comment).
    """
    location_start: int
    location_end: int

    kind = None


@dataclass(frozen=True)
class NumberSymbol(Symbol):
    numeric: int

    kind = 'NUMBER'


@dataclass(frozen=True)
class WordSymbol(Symbol):
    name: str

    kind = 'WORD'


@dataclass(frozen=True)
class CommentSymbol(Symbol):
    content: str

    kind = 'COMMENT'


@dataclass(frozen=True)
class FunctionSymbol(Symbol):
    """ Only the ``: name`` prefix is covered by the span, not the whole definition. """
    name: str
    body: str

    kind = 'FUNCTION'


def _parse_int(token):
    try:
        return int(token)
    except ValueError:
        return None


class Lexer(object):
    """
    Stateless: :meth:`scan` may be called any number of times, on any number
    of lines, and every call starts from the beginning of its line.

    Example:
        >>> list(Lexer().scan('2 DUP'))
        [NumberSymbol(location_start=0, location_end=1, numeric=2),
         WordSymbol(location_start=2, location_end=5, name='DUP')]
    """
    def scan(self, line):
        """
        Generator yielding the symbols of `line` in order. Lexical errors are
        raised as :exc:`lineforth.errors.LexError` when the scan reaches
        them, so any symbols before the bad one have already been yielded.
        """
        pos = 0
        while pos < len(line):
            # Searching from pos + 1 keeps a leading space inside the token.
            next_space = line.find(' ', pos + 1)
            if next_space == -1:
                next_space = len(line)
            token = line[pos:next_space]

            if token.isspace():
                pass  # runs of separators yield nothing
            elif token.startswith(COMMENT_OPEN):
                stop = self._scan_comment(line, pos)
                yield CommentSymbol(pos, stop, line[pos + 2:stop - 1])
                next_space = stop
            elif _parse_int(token) is not None:
                yield NumberSymbol(pos, pos + len(token), _parse_int(token))
            elif token.startswith(FUNCTION_OPEN):
                stop = self._scan_function(line, pos, next_space)
                name, body = self._split_function(line, pos, stop)
                yield FunctionSymbol(pos, pos + len(token), name, body)
                next_space = stop
            else:
                yield WordSymbol(pos, pos + len(token), token)

            pos = next_space + 1

    def _scan_comment(self, line, start):
        """ Returns the offset just past the ``)`` matching the one at `start`. """
        depth = 0
        for pos in range(start, len(line)):
            char = line[pos]
            if char == COMMENT_OPEN:
                depth += 1
            elif char == COMMENT_CLOSE:
                depth -= 1
                if depth == 0:
                    return pos + 1
        raise UnbalancedParenthesis(Symbol(start, len(line)))

    def _scan_function(self, line, start, after_header):
        """
        Returns the offset just past the terminating ``;``. The terminator
        only counts outside of parentheses, so ``: X ( a; b ) 1 ;`` is fine.
        """
        depth = 0
        for pos in range(after_header, len(line)):
            char = line[pos]
            if char == COMMENT_OPEN:
                depth += 1
            elif char == COMMENT_CLOSE:
                depth -= 1
            elif char == FUNCTION_CLOSE and depth == 0:
                return pos + 1
        if depth != 0:
            raise UnbalancedParenthesis(Symbol(start, len(line)))
        raise MissingTerminator(Symbol(start, len(line)))

    def _split_function(self, line, start, stop):
        text = line[start + 2:stop - 1]
        name, space, body = text.partition(' ')
        if not space or not name:
            raise MissingFunctionName(Symbol(start, stop))
        return name, body
