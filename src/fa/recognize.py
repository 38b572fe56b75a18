import argparse
import contextlib
import json
import logging
import pathlib
import sys

from fa.languages.get_automaton import LANGUAGE_NAMES, get_automaton

def write_result(s: str, accepted: bool, fout) -> None:
    json.dump({ 'input' : s, 'accepted' : accepted }, fout, separators=(',', ':'))
    print(file=fout)

def read_input_strings(fin):
    for line in fin:
        yield line.rstrip('\r\n')

def main(argv=None):

    # Configure logging to stderr. Results go to stdout.
    console_logger = logging.getLogger('main')
    if not console_logger.handlers:
        console_logger.addHandler(logging.StreamHandler(sys.stderr))
    console_logger.setLevel(logging.INFO)

    parser = argparse.ArgumentParser(
        description=
        'Decide membership of input strings in the language of a DFA. '
        'Reads one string per line and writes one JSON line per string. '
        'The string e denotes the empty string.'
    )
    parser.add_argument('--language', required=True,
        help='Name of the language whose DFA is used. One of: ' +
             ', '.join(LANGUAGE_NAMES) + '.')
    parser.add_argument('--swap', nargs=2, metavar=('A', 'B'),
        help='Exchange the symbols A and B in every transition before '
             'processing input.')
    parser.add_argument('--print-automaton', action='store_true', default=False,
        help='Log the automaton before processing input.')
    parser.add_argument('--input', type=pathlib.Path,
        help='File of input strings. Defaults to stdin.')
    parser.add_argument('--output', type=pathlib.Path,
        help='File where results are written. Defaults to stdout.')
    args = parser.parse_args(argv)
    console_logger.info(f'parsed arguments: {args}')

    try:
        automaton = get_automaton(args.language)
    except ValueError as e:
        parser.error(str(e))
    if args.swap is not None:
        a, b = args.swap
        sigma = automaton.get_sigma()
        if a not in sigma or b not in sigma:
            parser.error(f'cannot swap {a!r} and {b!r}: alphabet is {sigma!r}')
        automaton = automaton.swap(a, b)
    if args.print_automaton:
        console_logger.info(f'automaton:\n{automaton}')

    num_accepted = 0
    num_rejected = 0
    with contextlib.ExitStack() as stack:
        if args.input is not None:
            fin = stack.enter_context(args.input.open())
        else:
            fin = sys.stdin
        if args.output is not None:
            fout = stack.enter_context(args.output.open('w'))
        else:
            fout = sys.stdout
        for s in read_input_strings(fin):
            accepted = automaton.accepts(s)
            if accepted:
                num_accepted += 1
            else:
                num_rejected += 1
            write_result(s, accepted, fout)
    console_logger.info(f'accepted: {num_accepted}')
    console_logger.info(f'rejected: {num_rejected}')

if __name__ == '__main__':
    main()
