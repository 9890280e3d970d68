"""
Conversion of Flickr API responses (parsed-json) into flat records.
A record is a plain dict keyed by field name, suitable for filtering and
table rendering.
"""
from datetime import datetime, timezone

FIELDS = {
    'albums': ['id', 'title', 'description', 'photos', 'videos', 'views',
               'created', 'updated', 'owner'],
    'photos': ['id', 'title', 'description', 'taken', 'uploaded', 'views',
               'tags', 'media', 'public'],
    'tags': ['tag', 'raw', 'count', 'author', 'authorname', 'machine', 'id'],
    'comments': ['id', 'author', 'authorname', 'realname', 'date', 'text',
                 'permalink'],
}

DEFAULT_COLUMNS = {
    'albums': ['id', 'title', 'photos', 'videos', 'created'],
    'photos': ['id', 'title', 'taken', 'views', 'tags'],
    'tags': ['tag'],
    'popular_tags': ['tag', 'count'],
    'photo_tags': ['tag', 'raw', 'authorname'],
    'comments': ['authorname', 'date', 'text'],
}


def content(value):
    """Unwrap Flickr's {'_content': ...} text wrapper."""
    if isinstance(value, dict):
        return value.get('_content', '')
    return value if value is not None else ''


def to_int(value):
    """Convert to int, None when not a number."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def format_timestamp(value):
    """Render a Unix timestamp as 'YYYY-MM-DD HH:MM' (UTC)."""
    seconds = to_int(value)
    if seconds is None:
        return ''
    return datetime.fromtimestamp(seconds, tz=timezone.utc).strftime('%Y-%m-%d %H:%M')


def album_record(raw):
    """Flatten a photoset from photosets.getList."""
    photos = raw.get('photos', raw.get('count_photos'))
    videos = raw.get('videos', raw.get('count_videos'))
    return {
        'id': raw['id'],
        'title': content(raw.get('title')),
        'description': content(raw.get('description')),
        'photos': to_int(photos),
        'videos': to_int(videos),
        'views': to_int(raw.get('count_views')),
        'created': format_timestamp(raw.get('date_create')),
        'updated': format_timestamp(raw.get('date_update')),
        'owner': raw.get('owner', ''),
    }


def photo_record(raw):
    """Flatten a photo from people.getPhotos or photosets.getPhotos."""
    # datetaken is already a local 'YYYY-MM-DD HH:MM:SS' string
    taken = raw.get('datetaken') or ''
    return {
        'id': raw['id'],
        'title': content(raw.get('title')),
        'description': content(raw.get('description')),
        'taken': taken[:16],
        'uploaded': format_timestamp(raw.get('dateupload')),
        'views': to_int(raw.get('views')),
        'tags': raw.get('tags', ''),
        'media': raw.get('media', 'photo'),
        'public': bool(to_int(raw.get('ispublic'))),
    }


def user_tag_record(raw):
    """Flatten a tag from tags.getListUser or tags.getListUserPopular."""
    record = {'tag': content(raw)}
    if isinstance(raw, dict) and 'count' in raw:
        record['count'] = to_int(raw['count'])
    return record


def photo_tag_record(raw):
    """Flatten a tag from tags.getListPhoto."""
    return {
        'id': raw.get('id', ''),
        'tag': content(raw),
        'raw': raw.get('raw', ''),
        'author': raw.get('author', ''),
        'authorname': raw.get('authorname', ''),
        'machine': bool(to_int(raw.get('machine_tag'))),
    }


def comment_record(raw):
    """Flatten a comment from photos.comments.getList."""
    return {
        'id': raw['id'],
        'author': raw.get('author', ''),
        'authorname': raw.get('authorname', ''),
        'realname': raw.get('realname', ''),
        'date': format_timestamp(raw.get('datecreate')),
        'text': content(raw),
        'permalink': raw.get('permalink', ''),
    }
