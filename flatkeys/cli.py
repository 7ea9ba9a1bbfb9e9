#! python3
"""
flatkeys CLI interface
"""

import argparse
import json
import sys

from pydash import assign

from flatkeys.errors import ConfigurationError, FlatkeysError, SourceError
from flatkeys.flatten import flatten, is_container
from flatkeys.logger import get_logger
from flatkeys.options import KeyFormat, PRESETS
from flatkeys.source_helpers import load
from flatkeys.unflatten import unflatten


def get_args(argv=None):
    """ Get parsed arguments """
    parser = argparse.ArgumentParser(
        description='flatten nested json into single level json and back.\n'
                    'Usage example: flatkeys --preset braces flatten config.json',
        formatter_class=argparse.RawTextHelpFormatter)

    parser.add_argument('--options',
                        default="{}",
                        help='key format options as json string, e.g. {"suffix-end": true}')
    parser.add_argument('--preset',
                        default='default',
                        choices=list(PRESETS),
                        help='named key format, overridden by --options')
    parser.add_argument('--start',
                        default='',
                        help='string every flat key begins with')
    parser.add_argument('--strict',
                        action="store_true",
                        default=False,
                        help='fail when flat keys conflict (unflatten)')
    parser.add_argument('--no-restore-lists',
                        dest='restore_lists',
                        action="store_false",
                        default=True,
                        help='keep numbered containers as objects (unflatten)')
    parser.add_argument('--infer-lists',
                        action="store_true",
                        default=False,
                        help='treat objects keyed 0..n-1 or "0".."n-1" as lists (flatten)')
    parser.add_argument('--indent',
                        type=int,
                        default=2,
                        help='output json indent')
    parser.add_argument('--verbose',
                        action="store_true",
                        default=False,
                        help='debug logging, same as --log-level debug')
    parser.add_argument('--log-level',
                        default='warning',
                        choices=['debug', 'info', 'warning', 'error'],
                        help='stderr log level')
    parser.add_argument('command',
                        choices=['flatten', 'unflatten'],
                        help='transform to run')
    parser.add_argument('input', nargs='?',
                        default='-',
                        help='json file (utf-8) or "-" for stdin')

    return parser.parse_args(argv)


def get_options(args) -> KeyFormat:
    """ Merge preset and --options into KeyFormat """
    try:
        overrides = json.loads(args.options)
    except json.decoder.JSONDecodeError as error:
        raise ConfigurationError(f'invalid --options: {error}') from error
    ConfigurationError.invariant(isinstance(overrides, dict), '--options must be json object')
    options = assign(KeyFormat.preset(args.preset).to_dict(), overrides)
    return KeyFormat.from_dict(options)


def run(args):
    """ Run transform for parsed arguments """
    options = get_options(args)
    document = load(args.input)
    if args.command == 'flatten':
        SourceError.invariant(is_container(document),
                              'flatten input must be json object or array')
        return flatten(document, options, start=args.start, infer_lists=args.infer_lists)
    SourceError.invariant(isinstance(document, dict), 'unflatten input must be json object')
    return unflatten(document, options, start=args.start,
                     strict=args.strict, restore_lists=args.restore_lists)


def main(argv=None):
    """ CLI application """
    args = get_args(argv)
    get_logger(level='debug' if args.verbose else args.log_level)
    try:
        result = run(args)
    except FlatkeysError as error:
        print(f'flatkeys: {error}', file=sys.stderr)
        sys.exit(1)
    print(json.dumps(result, indent=args.indent))
    sys.exit(0)


if __name__ == '__main__':  # pragma: no cover
    main()
