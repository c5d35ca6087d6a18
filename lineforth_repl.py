import argparse
import logging
import readline  # noqa: F401 - line editing for input()

import colorama
from colorama import Fore as fg

import lineforth

PROMPT = '> '


def highlight(line, symbol, color=True):
    """
    Renders `line` with the part covered by `symbol`'s span picked out: in red
    when `color` is set, otherwise underlined with carets on a second line.
    """
    before = line[:symbol.location_start]
    within = line[symbol.location_start:symbol.location_end]
    after = line[symbol.location_end:]
    if color:
        return before + fg.RED + within + fg.RESET + after
    return line + '\n' + ' ' * len(before) + '^' * max(len(within), 1)


def forth_repl(engine, color=True):
    print('Type "BYE" or input an end of file (Ctrl+D) to quit.')

    cmd = input(PROMPT)
    while cmd.upper() != 'BYE':
        try:
            engine.execute(cmd)
        except lineforth.ForthError as e:
            print()
            print(e)
            print(highlight(cmd, e.symbol, color))
        cmd = input(PROMPT)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Interactive lineforth evaluator.')
    parser.add_argument('--no-color', dest='color', action='store_false',
                        help='mark errors with carets instead of color')
    parser.add_argument('--debug', action='store_true',
                        help='log word definitions and calls')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    if args.color:
        colorama.init()

    try:
        forth_repl(lineforth.Engine(), args.color)
    except EOFError:
        pass  # perfectly acceptable


if __name__ == '__main__':
    main()
