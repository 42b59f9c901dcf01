#! /usr/bin/env python3

"""
Terminal front end. Prints a new puzzle, or with --play, runs a small game
loop on stdin:

    ROW COL DIGIT   put DIGIT (0 clears) in the cell at ROW, COL
    c               check the answers
    r               start a new game
    q               quit
"""

import argparse
import logging
import random
import sys

from .config import DEFAULT_ERASE_COUNT, MAX_ERASE_COUNT
from .data import Annotation
from .errors import HammerExhausted, InvalidDigitError
from .game import Game
from .util import format_grid

HELP = 'Enter "ROW COL DIGIT", "c" to check, "r" for a new game, "q" to quit.'

# Random draws allowed per erased cell before giving up
MAX_ATTEMPTS = 2000

def build_parser():
    parser = argparse.ArgumentParser(prog='smalldoku', description=__doc__.split('\n\n')[0].strip())
    parser.add_argument('--erase', type=int, default=DEFAULT_ERASE_COUNT,
                        help='number of cells to erase (default: %(default)s)')
    parser.add_argument('--seed', type=int, default=None,
                        help='seed for the random number generator')
    parser.add_argument('--solution', action='store_true',
                        help='print the solution after the puzzle')
    parser.add_argument('--play', action='store_true',
                        help='play the puzzle in the terminal')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='log more (repeat for debug output)')
    return parser

def parse_args(argv=None, parser=None):
    if parser is None:
        parser = build_parser()
    args = parser.parse_args(argv)
    if not 0 <= args.erase <= MAX_ERASE_COUNT:
        parser.error('--erase must be between 0 and {}'.format(MAX_ERASE_COUNT))
    return args

def format_marks(game):
    """List the cells check marked wrong, one 'row col' pair per line."""
    return '\n'.join(
        'wrong: {} {}'.format(*key)
            for key, cell in game.grid.items() if cell.annotation is Annotation.INCORRECT
    )

def play(game, stdin=sys.stdin, stdout=sys.stdout):
    """Run the game loop until 'q' or end of input."""
    print(format_grid(game.grid), file=stdout)
    print(HELP, file=stdout)
    for line in stdin:
        words = line.split()
        if not words:
            continue
        if words == ['q']:
            break
        if words == ['r']:
            try:
                game.begin()
            except HammerExhausted as e:
                print(e, file=stdout)
                break
        elif words == ['c']:
            if game.check():
                print('All correct!', file=stdout)
            else:
                print(format_marks(game), file=stdout)
            continue
        elif len(words) == 3 and all(w.isdigit() for w in words):
            row, col, digit = map(int, words)
            if not game.select(row, col):
                print('Cell {} {} can\'t be changed.'.format(row, col), file=stdout)
                continue
            try:
                game.enter(digit)
            except InvalidDigitError as e:
                print(e, file=stdout)
                continue
        else:
            print(HELP, file=stdout)
            continue
        print(format_grid(game.grid), file=stdout)

def main(argv=None):
    parser = build_parser()
    args = parse_args(argv, parser)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    rng = random.Random(args.seed).randint
    game = Game(rng=rng, erase_count=args.erase, max_attempts=MAX_ATTEMPTS)
    try:
        game.begin()
    except HammerExhausted as e:
        parser.error('could not erase {} cells: {}'.format(args.erase, e))

    if args.play:
        play(game)
        return 0

    print(format_grid(game.grid))
    if args.solution:
        solution = game.grid.copy()
        for key in solution.user_keys():
            solution[key].user_value = solution[key].value
        print()
        print(format_grid(solution))
    return 0

if __name__ == '__main__':
    sys.exit(main())
