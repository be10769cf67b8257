class PostNotFound(Exception):
    """Raised for missing posts, unpublished posts on public reads, and posts the requester does not own."""

    def __init__(self, slug: str):
        super().__init__(f"Post not found: {slug}")
        self.slug = slug


class StoreError(Exception):
    """The post store could not be reached or rejected the request."""
