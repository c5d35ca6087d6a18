"""
Implements a small Forth-like evaluator, i.e., an object capable of keeping a
stack of integers and a table of words, and of running one line of input at a
time against them.

Usage should be as simple as:
    >>> import lineforth
    >>> lineforth.Engine().execute("5 4 + .")
    9 OK

Failures are raised as :exc:`lineforth.ForthError`, whose ``symbol``
attribute holds the ``[location_start, location_end)`` span of the offending
part of the line, so a caller can show the user exactly where things went
wrong (see ``lineforth_repl.py``).
"""
from lineforth.errors import *
from lineforth.lexer import *
from lineforth.engine import Engine, MAX_DEPTH
