"""
Flickr API client with retry logic and rate limiting.
Handles all communication with the Flickr API.
"""
import time
import flickrapi
from requests.exceptions import RequestException, Timeout

from ..config import config
from ..utils.ui import print_and_log
from . import records

# Flickr error codes worth retrying: rate limit and server-side failures
RETRYABLE_CODES = {429, 500, 502, 503}

PHOTO_EXTRAS = "description,date_taken,date_upload,tags,views,media"


def error_code(error):
    """Numeric Flickr error code of an exception, or None."""
    try:
        return int(getattr(error, 'code', None))
    except (TypeError, ValueError):
        return None


class FlickrAPIClient:
    """Wrapper for Flickr API with retry logic and rate limiting."""

    def __init__(self, flickr=None):
        self.flickr = flickr
        self.last_call_time = None

    def authenticate(self, perms='read'):
        """Authenticate with Flickr, returning the NSID of the logged-in user."""
        if self.flickr is None:
            kwargs = {'format': 'parsed-json'}
            if config.TOKEN_CACHE_DIR:
                kwargs['token_cache_location'] = config.TOKEN_CACHE_DIR
            self.flickr = flickrapi.FlickrAPI(config.API_KEY, config.API_SECRET, **kwargs)

        if not self.flickr.token_valid(perms=perms):
            self.flickr.get_request_token(oauth_callback='oob')
            authorize_url = self.flickr.auth_url(perms=perms)
            print_and_log(f"Open this URL to authorize: {authorize_url}", "WARNING")
            verifier = input("Enter the verification code: ")
            self.flickr.get_access_token(verifier)

        user_info = self.call_with_retries(self.flickr.test.login)
        user_id = user_info['user']['id']
        print_and_log(f"🔑 Authenticated as {user_id}", "DEBUG")
        return user_id

    def resolve_user(self, name):
        """Turn a username into an NSID. NSIDs are returned unchanged."""
        if '@' in name:
            return name
        user = self.call_with_retries(self.flickr.people.findByUsername, username=name)['user']
        return user.get('nsid') or user['id']

    def call_with_retries(self, func, *args, **kwargs):
        """Make a Flickr API call with retry logic and rate limiting."""
        backoff = config.INITIAL_BACKOFF

        for attempt in range(1, config.MAX_RETRIES + 1):
            try:
                # Rate limiting delay
                if self.last_call_time:
                    elapsed = time.time() - self.last_call_time
                    if elapsed < config.API_CALL_DELAY:
                        time.sleep(config.API_CALL_DELAY - elapsed)

                if 'timeout' not in kwargs:
                    kwargs['timeout'] = 120

                result = func(*args, **kwargs)
                self.last_call_time = time.time()
                return result

            except flickrapi.exceptions.FlickrError as e:
                self.last_call_time = time.time()
                code = error_code(e)
                if code not in RETRYABLE_CODES:
                    raise
                print_and_log(f"⚠️ API rate limit hit or server busy ({code}), "
                              f"retry {attempt}/{config.MAX_RETRIES} after {backoff}s...", "WARNING")

            except (RequestException, Timeout) as e:
                self.last_call_time = time.time()
                print_and_log(f"⚠️ Network error: {e}, retry {attempt}/{config.MAX_RETRIES} "
                              f"after {backoff}s...", "WARNING")

            if attempt < config.MAX_RETRIES:
                time.sleep(backoff)
                backoff = min(backoff * 2, config.MAX_BACKOFF)

        raise RuntimeError(f"API call failed after {config.MAX_RETRIES} retries.")

    def _paginate(self, func, container, item_key, **params):
        """Yield raw items page by page; later pages are fetched on demand."""
        page = 1
        while True:
            data = self.call_with_retries(func, page=page, per_page=config.PER_PAGE, **params)[container]
            print_and_log(f"    📄 {container} page {page}/{data.get('pages', 1)}", "DEBUG")
            for item in data.get(item_key, []):
                yield item

            if page >= int(data.get('pages', 1) or 1):
                break
            page += 1

    def iter_albums(self, user_id):
        """Yield album records of a user."""
        for raw in self._paginate(self.flickr.photosets.getList, 'photosets', 'photoset',
                                  user_id=user_id):
            yield records.album_record(raw)

    def iter_photos(self, user_id):
        """Yield all photo records of a user."""
        for raw in self._paginate(self.flickr.people.getPhotos, 'photos', 'photo',
                                  user_id=user_id, extras=PHOTO_EXTRAS):
            yield records.photo_record(raw)

    def iter_album_photos(self, album_id):
        """Yield photo records of one album."""
        for raw in self._paginate(self.flickr.photosets.getPhotos, 'photoset', 'photo',
                                  photoset_id=album_id, extras=PHOTO_EXTRAS):
            yield records.photo_record(raw)

    def iter_user_tags(self, user_id):
        """Yield every tag a user has used."""
        data = self.call_with_retries(self.flickr.tags.getListUser, user_id=user_id)
        for raw in data['who'].get('tags', {}).get('tag', []):
            yield records.user_tag_record(raw)

    def iter_popular_tags(self, user_id, count):
        """Yield a user's most used tags with their counts."""
        data = self.call_with_retries(self.flickr.tags.getListUserPopular,
                                      user_id=user_id, count=count)
        for raw in data['who'].get('tags', {}).get('tag', []):
            yield records.user_tag_record(raw)

    def iter_photo_tags(self, photo_id):
        """Yield the tags attached to one photo."""
        data = self.call_with_retries(self.flickr.tags.getListPhoto, photo_id=photo_id)
        for raw in data['photo'].get('tags', {}).get('tag', []):
            yield records.photo_tag_record(raw)

    def iter_comments(self, photo_id):
        """Yield the comments on one photo."""
        data = self.call_with_retries(self.flickr.photos.comments.getList, photo_id=photo_id)
        for raw in data['comments'].get('comment', []):
            yield records.comment_record(raw)
