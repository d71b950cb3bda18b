"""Error taxonomy for the gallery API.

Handlers raise these; ``artgallery.main`` renders them into the
``{success, message}`` envelope in one place.
"""


class GalleryAPIError(Exception):
    status_code = 400
    message = "Bad request"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(GalleryAPIError):
    """A referenced id does not resolve in a store."""

    message = "Not found"


class ForbiddenError(GalleryAPIError):
    """Caller is not the owner of the resource."""

    status_code = 403
    message = "Forbidden"
