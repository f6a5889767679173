class BlogError(Exception):
    """Base class for failures that end a request with an HTTP error."""
    status_code = 500
    message = 'Internal server error'

    def __init__(self, detail=None):
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class EntryNotFoundError(BlogError):
    status_code = 404
    message = 'Entry not found'


class PathTraversalError(BlogError):
    status_code = 400
    message = 'Invalid entry name'


class EntryIOError(BlogError):
    message = 'Could not read entries'


class MissingTitleError(BlogError):
    message = 'Entry has no title'


class MetadataError(BlogError):
    message = 'Entry creation time unavailable'
