"""Command line entry point: compare a theCrag export to the manual logbook."""

import argparse
import logging

from cragsync.diff import generate_diff_report
from cragsync.errors import CragSyncError
from cragsync.freeform import parse_freeform_source
from cragsync.logbook import aggregate, format_logbook
from cragsync.normalize import normalize_logbook
from cragsync.tabular import parse_tabular_source
from cragsync.utils import read_text_file, setup_logging

logger = logging.getLogger(__name__)

MODES = ['print', 'diff']


def build_parser():
    parser = argparse.ArgumentParser(
        prog='cragsync',
        description='Compare theCrag CSV export to manually maintained logbook'
    )
    parser.add_argument('--csv', dest='csv_file', required=True,
                        help='Path to theCrag CSV export')
    parser.add_argument('--logbook', dest='logbook_file', required=True,
                        help='Path to the manual logbook')
    parser.add_argument('--mode', choices=MODES, default='diff',
                        help='print: show the export as logbook lines, diff: show discrepancies')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--log-level', default='info',
                        help='Log level when --debug is not given')
    return parser


def run(csv_file, logbook_file, mode='diff'):
    """
    Read both sources and produce the output of the selected mode.

    Both files are read before anything is parsed.

    Returns:
        str: Logbook lines (print) or discrepancy report (diff)

    Raises:
        CragSyncError: On any read or parse failure
    """
    csv_text = read_text_file(csv_file)
    logbook_text = read_text_file(logbook_file)

    external = aggregate(parse_tabular_source(csv_text))
    if mode == 'print':
        return format_logbook(normalize_logbook(external))

    manual = aggregate(parse_freeform_source(logbook_text))
    return generate_diff_report(external, manual)


def main(argv=None):
    """Main execution function."""
    args = build_parser().parse_args(argv)

    setup_logging(debug=args.debug, log_level=args.log_level)
    logger.info(f"Starting {args.mode} of {args.csv_file} against {args.logbook_file}")

    try:
        output = run(args.csv_file, args.logbook_file, args.mode)
    except CragSyncError as e:
        logger.error(f"Error during {args.mode}: {str(e)}")
        print(e)
        return 1

    if output:
        print(output)
    else:
        logger.info("Nothing to report")
    return 0
