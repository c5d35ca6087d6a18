import pytest
import lineforth
from lineforth import CommentSymbol, FunctionSymbol, NumberSymbol, WordSymbol


def scan(line):
    return list(lineforth.Lexer().scan(line))


class TestTheLexer():
    def test_empty_string(self):
        """ Nothing in, nothing out. """
        assert scan('') == []

    def test_numbers_and_words(self):
        assert scan('1 2 +') == [NumberSymbol(0, 1, 1),
                                 NumberSymbol(2, 3, 2),
                                 WordSymbol(4, 5, '+')]

    def test_negative_number(self):
        assert scan('-12') == [NumberSymbol(0, 3, -12)]

    def test_signs_alone_are_words(self):
        assert scan('- +') == [WordSymbol(0, 1, '-'), WordSymbol(2, 3, '+')]

    def test_words_are_case_sensitive(self):
        assert scan('dup DUP') == [WordSymbol(0, 3, 'dup'), WordSymbol(4, 7, 'DUP')]

    def test_comment(self):
        """ The content drops the opening "( " and the closing ")". """
        assert scan('( comment text )') == [CommentSymbol(0, 16, 'comment text ')]

    def test_nested_comment(self):
        symbols = scan('( a ( b ) c ) 5')

        assert symbols == [CommentSymbol(0, 13, 'a ( b ) c '), NumberSymbol(14, 15, 5)]

    def test_comment_ignores_other_brackets(self):
        symbols = scan('( [ { ) 1')

        assert symbols == [CommentSymbol(0, 7, '[ { '), NumberSymbol(8, 9, 1)]

    def test_unbalanced_comment(self):
        with pytest.raises(lineforth.UnbalancedParenthesis) as excinfo:
            scan('( oops')

        assert excinfo.value.symbol.location_start == 0
        assert excinfo.value.symbol.location_end == 6

    def test_unbalanced_comment_later_in_line(self):
        with pytest.raises(lineforth.UnbalancedParenthesis) as excinfo:
            scan('1 2 ( ( )')

        assert excinfo.value.symbol.location_start == 4
        assert 'position 4' in str(excinfo.value)

    def test_function(self):
        symbols = scan(': DOUBLE DUP + ; 5 DOUBLE .')

        assert symbols == [FunctionSymbol(0, 1, 'DOUBLE', 'DUP + '),
                           NumberSymbol(17, 18, 5),
                           WordSymbol(19, 25, 'DOUBLE'),
                           WordSymbol(26, 27, '.')]

    def test_function_with_semicolon_in_comment(self):
        """ A ; inside parentheses does not end the definition. """
        symbols = scan(': X ( a; b ) 1 ;')

        assert symbols == [FunctionSymbol(0, 1, 'X', '( a; b ) 1 ')]

    def test_function_without_body(self):
        assert scan(': NOTHING ;') == [FunctionSymbol(0, 1, 'NOTHING', '')]

    def test_function_missing_name(self):
        with pytest.raises(lineforth.MissingFunctionName) as excinfo:
            scan(': ;')

        assert excinfo.value.symbol.location_start == 0
        assert excinfo.value.symbol.location_end == 3

    def test_function_missing_terminator(self):
        with pytest.raises(lineforth.MissingTerminator) as excinfo:
            scan('1 : X 1')

        assert excinfo.value.symbol.location_start == 2
        assert excinfo.value.symbol.location_end == 7

    def test_function_unbalanced_parenthesis(self):
        with pytest.raises(lineforth.UnbalancedParenthesis):
            scan(': X ( 1 ;')

        with pytest.raises(lineforth.UnbalancedParenthesis):
            scan(': X ) 1 ;')

    def test_lex_errors_are_forth_errors(self):
        with pytest.raises(lineforth.ForthError):
            scan('( oops')

    def test_lazy(self):
        """ Symbols before a lexical error are yielded before it is raised. """
        symbols = lineforth.Lexer().scan('1 ( oops')

        assert next(symbols) == NumberSymbol(0, 1, 1)
        with pytest.raises(lineforth.UnbalancedParenthesis):
            next(symbols)

    def test_restartable(self):
        lexer = lineforth.Lexer()
        line = '1 ( two ) : THREE 3 ; FOUR'

        assert list(lexer.scan(line)) == list(lexer.scan(line))

    def test_trailing_spaces(self):
        """ Runs of separators don't turn into symbols. """
        assert scan('1   ') == [NumberSymbol(0, 1, 1)]

    def test_spans_advance(self):
        line = '1 ( a ( b ) ) : SQ DUP * ; 3 SQ . CR'
        symbols = scan(line)

        for previous, current in zip(symbols, symbols[1:]):
            assert previous.location_end < current.location_start
        for symbol in symbols:
            assert 0 <= symbol.location_start < symbol.location_end <= len(line)

    def test_symbol_kinds(self):
        kinds = [s.kind for s in scan('( c ) 1 : F 2 ; W')]

        assert kinds == ['COMMENT', 'NUMBER', 'FUNCTION', 'WORD']
