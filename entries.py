import logging
import os
from dataclasses import dataclass

from werkzeug.security import safe_join

from errors import (
    EntryIOError,
    EntryNotFoundError,
    MetadataError,
    MissingTitleError,
    PathTraversalError,
)


@dataclass(frozen=True)
class Entry:
    title: str
    description: str
    path: str
    created_at: float

    def to_context(self):
        # created_at is only a sort key, templates never see it
        return {'title': self.title, 'description': self.description, 'path': self.path}


def extract_title(content):
    """Title is the first line with every '#' removed and whitespace trimmed."""
    if not content:
        raise MissingTitleError('Entry is empty, no first line to use as title')
    first_line = content.split('\n', 1)[0]
    return first_line.replace('#', '').strip()


def timestamp_from_stat(stat_result, mtime_fallback=False):
    birthtime = getattr(stat_result, 'st_birthtime', None)
    if birthtime is not None:
        return birthtime
    if mtime_fallback:
        return stat_result.st_mtime
    raise MetadataError('Creation time is not supported on this platform')


def birthtime_supported():
    """True when this interpreter can report file creation times at all."""
    return hasattr(os.stat_result, 'st_birthtime') or hasattr(os, 'statx')


def statx_birthtime(path):
    # os.statx exposes the Linux birth time; None when absent or not recorded
    if not hasattr(os, 'statx'):
        return None
    result = os.statx(path, os.STATX_BTIME)
    if not getattr(result, 'stx_mask', 0) & os.STATX_BTIME:
        return None
    return getattr(result, 'stx_btime', None)


def created_at(path, mtime_fallback=False):
    try:
        stat_result = os.stat(path)
        if getattr(stat_result, 'st_birthtime', None) is None:
            birthtime = statx_birthtime(path)
            if birthtime is not None:
                return birthtime
    except OSError as e:
        raise EntryIOError(f"Could not stat {path}: {e}") from e
    return timestamp_from_stat(stat_result, mtime_fallback)


def read_entry_file(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise EntryIOError(f"Could not read {path}: {e}") from e


def scan_entries(directory, mtime_fallback=False, url_prefix='entries'):
    """Build one Entry per regular file directly inside directory.

    Symlinks and subdirectories are skipped. Any unreadable file, empty file
    or missing timestamp fails the whole scan.
    """
    directory = os.fspath(directory)
    try:
        with os.scandir(directory) as it:
            files = [dir_entry for dir_entry in it if dir_entry.is_file(follow_symlinks=False)]
    except OSError as e:
        raise EntryIOError(f"Could not list {directory}: {e}") from e

    entries = []
    for dir_entry in files:
        file_path = os.path.join(directory, dir_entry.name)
        content = read_entry_file(file_path)
        entries.append(Entry(
            title=extract_title(content),
            description=file_path,
            path=f"{url_prefix}/{dir_entry.name}",
            created_at=created_at(file_path, mtime_fallback),
        ))

    logging.info(f"Found {len(entries)} entries in {directory}")
    return entries


def sort_entries(entries):
    # sorted() is stable, equal timestamps keep scan order
    return sorted(entries, key=lambda entry: entry.created_at, reverse=True)


def build_listing_context(entries):
    return {'entries': [entry.to_context() for entry in sort_entries(entries)]}


def resolve_entry_path(directory, name):
    """Return the file path for an entry name, refusing anything outside directory."""
    if (not name or name in ('.', '..') or '/' in name or '\\' in name
            or '\x00' in name or os.path.isabs(name)):
        raise PathTraversalError(f"Rejected entry name {name!r}")
    path = safe_join(os.fspath(directory), name)
    if path is None:
        raise PathTraversalError(f"Rejected entry name {name!r}")
    return path


def load_entry(directory, name):
    path = resolve_entry_path(directory, name)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
        raise EntryNotFoundError(f"No entry named {name!r}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise EntryIOError(f"Could not read {path}: {e}") from e
