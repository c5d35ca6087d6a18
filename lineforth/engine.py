"""
The execution engine: a stack of integers, a table of words, and a loop that
pulls symbols out of the lexer and does what they say.
"""
import inspect
import logging
import sys

from lineforth.errors import (DivisionByZero, EmptyStack, LexError, RecursionLimitExceeded,
                              UnknownWord)
from lineforth.lexer import Lexer

log = logging.getLogger(__name__)

# Nested user-word invocations allowed before giving up. Each level costs a
# handful of Python frames, so this stays well under sys.getrecursionlimit().
MAX_DEPTH = 100

OK = ' OK'


def _word(name):
    """
    Creates a decorator that adds a .word member to its given func, which may
    then be inspected for by the :class:`Engine`'s __init__ method. Note that
    if you already have an instance of :class:`Engine`, it's too late to
    decorate and you should call its :meth:`Engine.add_stackmethod` (or just
    put something in its words table) instead.
    """
    def decorator(func):
        func.word = name
        return func
    return decorator


def _truncated_div(dividend, divisor):
    """ Integer division rounding toward zero, as Forth's ``/`` usually does. """
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


class Engine(object):
    """
    A Forth engine. It has a stack and some words and not much else.

    Everything a word does is called with the *site* symbol: the symbol, in
    the line given to the outermost :meth:`execute`, that (directly or through
    user-defined words) caused it to run. Errors always point there.

    Usage:
        >>> engine = Engine()
        >>> engine.execute(': DOUBLE DUP + ; 5 DOUBLE .')
        10 OK
    """
    def __init__(self, out=None, max_depth=MAX_DEPTH):
        self.stack = []
        self.words = {}
        self.lexer = Lexer()
        self.out = out if out is not None else sys.stdout
        self.max_depth = max_depth
        self.depth = 0

        self.symbol_methods = {
            'COMMENT': self._skip_comment,
            'NUMBER': self._push_number,
            'FUNCTION': self._define_function,
            'WORD': self._call_word,
        }

        # Add decorated member words
        for name, method in inspect.getmembers(self, inspect.ismethod):
            if hasattr(method, 'word'):
                self.words[method.word] = method

        # Arguments arrive in pop order: a is the top of the stack, b below it.
        self.add_stackmethod('+', lambda a, b: b + a)
        self.add_stackmethod('-', lambda a, b: b - a)
        self.add_stackmethod('*', lambda a, b: b * a)
        self.add_stackmethod('DUP', lambda a: (a, a))

    def emit(self, text):
        self.out.write(text)

    def _push(self, val):
        self.stack.append(val)

    def _push_all(self, values):
        self.stack.extend(values)

    def _pop(self, site):
        if self.stack:
            return self.stack.pop()
        raise EmptyStack(site)

    @_word('.')
    def _stack_pop(self, site):
        self.emit(str(self._pop(site)))

    @_word('CR')
    def _newline(self, site):
        self.emit('\n')

    @_word('/')
    def _divide(self, site):
        a = self._pop(site)
        b = self._pop(site)
        if a == 0:
            raise DivisionByZero(site)
        self._push(_truncated_div(b, a))

    def add_stackmethod(self, word, func):
        """
        Turns a given function `func` into a stack-consumer.

        The function will get its arguments from the stack automatically, in
        the order they pop off (so from the stack [1, 2] the call to a
        two-argument function will be func(2, 1)). The function's return value
        (or values) are assumed to go back on the stack.

        There is no provision for a stack-consumer to write any output, nor
        for it to touch any other parts of the :class:`Engine` it's a part of.
        """
        num_args = len(inspect.signature(func).parameters)

        def stack_helper(site):
            args = [self._pop(site) for _ in range(num_args)]
            ret = func(*args)
            if ret is None:
                return
            try:
                self._push_all(ret)
            except TypeError:
                self._push(ret)
        self.words[word] = stack_helper

    def execute(self, text, invoking_symbol=None):
        """
        Runs one statement. `invoking_symbol` is None for a statement typed
        by the user; user-defined words pass their call site so that nested
        failures point into the user's line rather than into the body text.

        Raises :exc:`lineforth.errors.ForthError` on the first failure,
        leaving the stack as it was at that point. On success a top-level
        call writes the " OK" acknowledgment.
        """
        if invoking_symbol is None:
            self._run(text, None)
            self.emit(OK + '\n')
            return

        if self.depth >= self.max_depth:
            raise RecursionLimitExceeded(self.max_depth, invoking_symbol)
        self.depth += 1
        log.debug('running %r for %s, depth %d', text, invoking_symbol, self.depth)
        try:
            self._run(text, invoking_symbol)
        except LexError as ex:
            # Spans inside a body are relative to the body, not the user's line.
            ex.symbol = invoking_symbol
            raise
        finally:
            self.depth -= 1

    def _run(self, text, invoking_symbol):
        for symbol in self.lexer.scan(text):
            site = invoking_symbol if invoking_symbol is not None else symbol
            self.symbol_methods[symbol.kind](symbol, site)

    def _skip_comment(self, symbol, site):
        pass

    def _push_number(self, symbol, site):
        self._push(symbol.numeric)

    def _define_function(self, symbol, site):
        body = symbol.body
        log.debug('defining %s as %r', symbol.name, body)
        self.words[symbol.name] = lambda call_site: self.execute(body, call_site)

    def _call_word(self, symbol, site):
        try:
            action = self.words[symbol.name]
        except KeyError:
            raise UnknownWord(symbol.name, site) from None
        action(site)
