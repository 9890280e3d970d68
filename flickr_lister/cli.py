"""
Command line interface for the Flickr lister.
Handles argument parsing and option validation.
"""
import argparse

from . import __version__
from .api.records import FIELDS, DEFAULT_COLUMNS
from .filters import parse_rule

KINDS = ['albums', 'photos', 'tags', 'comments']


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="flickr-lister",
        description="List albums, photos, tags or comments from a Flickr account as a text table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s albums                          # Your albums
  %(prog)s photos --album 72157600000000   # Photos in one album
  %(prog)s photos -u someone -r "title=^IMG"
  %(prog)s tags --popular 20               # Your 20 most used tags
  %(prog)s comments --photo 5300000000     # Comments on a photo
        """
    )

    parser.add_argument('kind', choices=KINDS, help='What to list')
    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument(
        '--user', '-u', type=str,
        help='Username or NSID to list. Defaults to the authenticated user.'
    )
    parser.add_argument('--album', '-a', type=str, help='Album ID whose photos are listed (photos only)')
    parser.add_argument('--photo', '-p', type=str, help='Photo ID whose tags or comments are listed')
    parser.add_argument('--popular', type=int, metavar='N',
                        help="List the user's N most popular tags with counts (tags only)")

    parser.add_argument(
        '--match', '-m', action='append', default=[], metavar='FIELD=VALUE',
        help='Keep records whose FIELD equals VALUE exactly. May be repeated.'
    )
    parser.add_argument(
        '--regex', '-r', action='append', default=[], metavar='FIELD=PATTERN',
        help='Keep records whose FIELD matches the regular expression. May be repeated.'
    )
    parser.add_argument('--fields', '-f', type=str, metavar='A,B,...',
                        help='Comma-separated columns to print, in order')
    parser.add_argument('--limit', '-n', type=int, help='Stop after N matching records')
    parser.add_argument('--width', '-w', type=int, help='Wrap cells longer than N characters')
    parser.add_argument('--no-header', dest='header', action='store_false',
                        help='Do not print the header and rule lines')

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('--verbose', '-v', action='store_true', help='Also show debug messages')
    verbosity.add_argument('--quiet', '-q', action='store_true', help='Only show warnings and errors')

    return parser


def listing_variant(args):
    """Name of the listing being requested, used to pick default columns."""
    if args.kind == 'tags':
        if args.photo is not None:
            return 'photo_tags'
        if args.popular:
            return 'popular_tags'
    return args.kind


def _check_fields(kind, fields, option):
    """Raise ValueError for any field the kind does not know."""
    known = FIELDS[kind]
    for field in fields:
        if field not in known:
            raise ValueError(f"Unknown field '{field}' for {kind} in {option}. "
                             f"Known fields: {', '.join(known)}")


def validate_arguments(args):
    """
    Check option combinations and parse filters and columns.
    Sets args.rules and args.columns. Raises ValueError on invalid input.
    """
    kind = args.kind

    for option in ('user', 'album', 'photo'):
        value = getattr(args, option)
        if value is not None and not value.strip():
            raise ValueError(f"--{option} must not be empty")

    if kind == 'comments' and args.photo is None:
        raise ValueError("comments requires --photo")
    if args.album is not None and kind != 'photos':
        raise ValueError("--album can only be used with photos")
    if args.photo is not None and kind not in ('tags', 'comments'):
        raise ValueError("--photo can only be used with tags or comments")
    if args.popular is not None:
        if kind != 'tags':
            raise ValueError("--popular can only be used with tags")
        if args.popular < 1:
            raise ValueError("--popular must be a positive number")
        if args.photo is not None:
            raise ValueError("--popular cannot be combined with --photo")
    if args.user is not None and (args.photo is not None or args.album is not None):
        raise ValueError("--user cannot be combined with --photo or --album")
    if args.limit is not None and args.limit < 1:
        raise ValueError("--limit must be a positive number")
    if args.width is not None and args.width < 4:
        raise ValueError("--width must be at least 4")

    rules = [parse_rule(text) for text in args.match]
    rules += [parse_rule(text, regex=True) for text in args.regex]
    _check_fields(kind, [rule.field for rule in rules], '--match/--regex')
    args.rules = rules

    if args.fields:
        columns = [c.strip() for c in args.fields.split(',') if c.strip()]
        if not columns:
            raise ValueError("--fields must name at least one field")
        _check_fields(kind, columns, '--fields')
    else:
        columns = list(DEFAULT_COLUMNS[listing_variant(args)])
    args.columns = columns

    return args


def parse_arguments(argv=None):
    """Parse and validate command line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        validate_arguments(args)
    except ValueError as e:
        parser.error(str(e))
    return args
