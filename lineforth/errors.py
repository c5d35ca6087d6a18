"""
Errors raised while lexing or executing a statement.

Every error carries the :class:`lineforth.lexer.Symbol` that triggered it (or
a synthetic one built only to hold a span), so that whoever catches it can
point at the offending part of the input line.
"""


class ForthError(Exception):
    """
    Base class for anything the user can get wrong. The message is rendered
    from the description and the start of the symbol's span, so that
    re-anchoring an error (see :meth:`Engine.execute`) also fixes the reported
    position.
    """
    def __init__(self, description, symbol):
        super().__init__(description)
        self.description = description
        self.symbol = symbol

    def __str__(self):
        return '%s at position %d' % (self.description, self.symbol.location_start)


class LexError(ForthError): pass


class UnbalancedParenthesis(LexError):
    def __init__(self, symbol):
        super().__init__('Unbalanced parenthesis', symbol)


class MissingTerminator(LexError):
    def __init__(self, symbol):
        super().__init__('Missing ; terminating function', symbol)


class MissingFunctionName(LexError):
    def __init__(self, symbol):
        super().__init__('Missing function name', symbol)


class UnknownWord(ForthError):
    def __init__(self, name, symbol):
        super().__init__('Unknown word %s' % name, symbol)
        self.name = name


class EmptyStack(ForthError):
    def __init__(self, symbol):
        super().__init__('Stack is empty executing %s' % symbol_text(symbol), symbol)


class DivisionByZero(ForthError):
    def __init__(self, symbol):
        super().__init__('Division by zero executing %s' % symbol_text(symbol), symbol)


class RecursionLimitExceeded(ForthError):
    def __init__(self, limit, symbol):
        super().__init__('Recursion deeper than %d executing %s' % (limit, symbol_text(symbol)),
                         symbol)
        self.limit = limit


def symbol_text(symbol):
    """ Best human-readable name for a symbol, whatever its variant. """
    return getattr(symbol, 'name', None) or '[%d, %d)' % (symbol.location_start, symbol.location_end)
