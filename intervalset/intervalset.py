#!/usr/bin/env python3
"""Command line interface of intervalset."""
import sys
import argparse
import logging
import atexit

from ruamel.yaml import YAML

from . import __version__
from .interval import CapabilityError
from .intervals import RealSet, IntegerSet
from .parser import parse_set, IntervalSyntaxError
from .formatting import STYLES, format_value, format_interval, format_set, visualize

logger = logging.getLogger(__name__)

SET_CLASSES = {'real': RealSet, 'integer': IntegerSet}

CONFIG_DEFAULTS = {
    'type': 'real',
    'style': 'mathematical',
    'width': 80,
    'analyze': False,
}


def load_config(stream):
    """
    Return configuration read from YAML *stream*, completed by defaults.

    Keys not found in CONFIG_DEFAULTS raise a ValueError.
    """
    config = dict(CONFIG_DEFAULTS)
    data = YAML(typ='safe').load(stream)
    if data is None:
        return config
    if not isinstance(data, dict):
        raise ValueError('Configuration must be a mapping, got {!r}.'.format(data))
    unknown = set(data) - set(CONFIG_DEFAULTS)
    if unknown:
        raise ValueError('Unknown configuration keys: {}. Valid keys are {}.'.format(
            ', '.join(sorted(unknown)), ', '.join(sorted(CONFIG_DEFAULTS))))
    config.update(data)
    if config['type'] not in SET_CLASSES:
        raise ValueError('Invalid type in configuration ({}), valid options are {}'.format(
            config['type'], ', '.join(SET_CLASSES)))
    if config['style'] not in STYLES:
        raise ValueError('Invalid style in configuration ({}), valid options are {}'.format(
            config['style'], ', '.join(STYLES)))
    return config


class VersionAction(argparse.Action):
    """Reimplementation of the version action, because argparse's version outputs to stderr."""
    def __init__(self, option_strings, version, dest=argparse.SUPPRESS,
                 default=argparse.SUPPRESS,
                 help="show program's version number and exit"):
        super(VersionAction, self).__init__(
            option_strings=option_strings,
            dest=dest,
            default=default,
            nargs=0,
            help=help)
        self.version = version

    def __call__(self, parser, namespace, values, option_string=None):
        print(parser.prog, self.version)
        parser.exit()


def create_parser():
    """Return argparse parser."""
    parser = argparse.ArgumentParser(
        description='Evaluate and analyze expressions on sets of disjoint intervals.',
        epilog='Example: intervalset "[0,10] \\ (2,3)" --analyze')
    parser.add_argument('--version', action=VersionAction, version='{}'.format(__version__))
    parser.add_argument('expression', nargs='+',
                        help='Interval set expression, e.g. "[0,5) U (10,20]". Each given '
                             'expression is evaluated on its own.')
    parser.add_argument('--config', metavar='FILE', type=argparse.FileType('r'),
                        help='YAML file with defaults for type, style, width and analyze.')
    parser.add_argument('--type', '-t', choices=sorted(SET_CLASSES), default=None,
                        help='Value domain of interval bounds (default: real).')
    parser.add_argument('--style', '-s', choices=STYLES, default=None,
                        help='Output notation (default: mathematical).')
    parser.add_argument('--analyze', '-a', action='store_true', default=None,
                        help='Print span, gaps, measure, gap measure and density.')
    parser.add_argument('--contains', '-c', metavar='VALUE', action='append', default=[],
                        help='Check if VALUE is contained in the set. Can be given multiple '
                             'times.')
    parser.add_argument('--visualize', '-V', nargs=2, metavar=('MIN', 'MAX'), default=None,
                        help='Draw ASCII visualization of the set from MIN to MAX.')
    parser.add_argument('--width', '-w', type=int, default=None,
                        help='Width of visualization in characters (default: 80).')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Increases verbosity level.')
    return parser


def check_arguments(args, parser):
    """
    Check arguments passed by user that are not checked by argparse itself.

    Fills in unset options from configuration file and converts values to the selected domain.
    """
    if args.config:
        atexit.register(args.config.close)
        try:
            config = load_config(args.config)
        except ValueError as e:
            parser.error(str(e))
    else:
        config = dict(CONFIG_DEFAULTS)
    for key in CONFIG_DEFAULTS:
        if getattr(args, key) is None:
            setattr(args, key, config[key])

    levels = [logging.WARNING, logging.INFO, logging.DEBUG]
    logging.basicConfig(level=levels[min(args.verbose, 2)])

    args.set_class = SET_CLASSES[args.type]
    interval_class = args.set_class.interval_class
    try:
        args.contains = [interval_class.parse_value(v) for v in args.contains]
        if args.visualize is not None:
            args.visualize = [float(interval_class.parse_value(v)) for v in args.visualize]
    except ValueError as e:
        parser.error('values must be of type {}: {}'.format(args.type, e))

    if args.visualize is not None and args.visualize[0] >= args.visualize[1]:
        parser.error('--visualize MIN has to be smaller than MAX')


def report(interval_set, args, output_file=sys.stdout):
    """Print analysis of *interval_set* as requested by *args*."""
    if args.analyze:
        print('{:<16}{}'.format('components:', interval_set.size()), file=output_file)
        print('{:<16}{}'.format('span:', format_interval(interval_set.span(), args.style)),
              file=output_file)
        print('{:<16}{}'.format('gaps:', format_set(interval_set.gaps(), args.style)),
              file=output_file)
        print('{:<16}{}'.format('measure:', format_value(interval_set.measure())), file=output_file)
        print('{:<16}{}'.format('gap measure:', format_value(interval_set.gap_measure())),
              file=output_file)
        print('{:<16}{:.4f}'.format('density:', interval_set.density()), file=output_file)

    for value in args.contains:
        print('{:<16}{}'.format('contains {}:'.format(format_value(value)), value in interval_set),
              file=output_file)

    if args.visualize is not None:
        print(visualize(interval_set, args.visualize[0], args.visualize[1], args.width),
              file=output_file)


def run(parser, args, output_file=sys.stdout):
    """Evaluate all expressions, print results and return list of resulting sets."""
    results = []
    for expression in args.expression:
        logger.info("evaluating %r as %s set", expression, args.type)
        try:
            interval_set = parse_set(expression, set_class=args.set_class)
        except (IntervalSyntaxError, CapabilityError) as e:
            parser.error(str(e))

        if args.verbose > 0 or len(args.expression) > 1:
            print('{:-^80}'.format(' ' + expression + ' '), file=output_file)
        print(format_set(interval_set, args.style), file=output_file)
        report(interval_set, args, output_file=output_file)
        results.append(interval_set)
    return results


def main():
    """Initialize and run command line interface."""
    # Create and populate parser
    parser = create_parser()

    # Parse given arguments
    args = parser.parse_args()

    # Checking arguments
    check_arguments(args, parser)

    run(parser, args)


if __name__ == '__main__':
    main()
