"""
Main application module for the Flickr lister.
Orchestrates authentication, fetching, filtering and table output.
"""
import sys
from itertools import islice

import flickrapi
from requests.exceptions import RequestException

from .config import config
from .utils.ui import print_and_log, set_console_level, setup_logging
from .utils.table import print_table
from .api.client import FlickrAPIClient
from .filters import filter_records
from .cli import parse_arguments


class FlickrListerApp:
    """Main application class that orchestrates a listing."""

    def __init__(self, api_client=None):
        self.api_client = api_client or FlickrAPIClient()
        self.user_id = None

    def run(self, argv=None):
        """Run the application. Returns the process exit status."""
        args = parse_arguments(argv)

        if args.verbose:
            set_console_level("DEBUG")
        elif args.quiet:
            set_console_level("WARNING")

        try:
            setup_logging()
        except OSError as e:
            print(f"❌ ERROR: cannot open log file: {e}", file=sys.stderr)
            return 1

        try:
            config.validate()
        except ValueError as e:
            print_and_log(f"❌ ERROR: {e}", "ERROR")
            return 1

        try:
            self.user_id = self.api_client.authenticate()
            if args.user is not None:
                self.user_id = self.api_client.resolve_user(args.user)
                print_and_log(f"👤 Listing {args.kind} of {args.user} ({self.user_id})", "DEBUG")

            print_and_log(f"🔍 Fetching {args.kind}...")
            records = self._fetch_records(args)
            records = filter_records(records, args.rules)
            if args.limit:
                records = islice(records, args.limit)
            rows = list(records)

        except flickrapi.exceptions.FlickrError as e:
            print_and_log(f"❌ ERROR: Flickr API error: {e}", "ERROR")
            return 1
        except RequestException as e:
            print_and_log(f"❌ ERROR: Network error: {e}", "ERROR")
            return 1
        except EOFError:
            print_and_log("❌ ERROR: No verification code entered", "ERROR")
            return 1
        except RuntimeError as e:
            print_and_log(f"❌ ERROR: {e}", "ERROR")
            return 1
        except KeyboardInterrupt:
            print_and_log("⏹️ Interrupted", "WARNING")
            return 130

        print_table(rows, args.columns, header=args.header, max_width=args.width)
        print_and_log(f"📊 Listed {len(rows)} {args.kind}")
        return 0

    def _fetch_records(self, args):
        """Select the record stream for the requested listing."""
        client = self.api_client
        if args.kind == 'albums':
            return client.iter_albums(self.user_id)
        if args.kind == 'photos':
            if args.album is not None:
                return client.iter_album_photos(args.album)
            return client.iter_photos(self.user_id)
        if args.kind == 'tags':
            if args.photo is not None:
                return client.iter_photo_tags(args.photo)
            if args.popular:
                return client.iter_popular_tags(self.user_id, args.popular)
            return client.iter_user_tags(self.user_id)
        return client.iter_comments(args.photo)


def main(argv=None):
    """Main entry point for the application."""
    app = FlickrListerApp()
    sys.exit(app.run(argv))


if __name__ == "__main__":
    main()
