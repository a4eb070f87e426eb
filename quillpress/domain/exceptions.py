"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist or is not visible to the caller.

    Ownership failures raise this too, so that other users' content is
    indistinguishable from content that was never there.
    """

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class PermissionDeniedError(Exception):
    """Raised when an authenticated user may not perform an action."""

    def __init__(self, message: str = "Forbidden"):
        self.message = message
        super().__init__(message)


class ArticleLockedError(PermissionDeniedError):
    """Raised when an author tries to edit an article that has been published."""

    def __init__(self, article_id: int):
        self.article_id = article_id
        super().__init__(f"Article with id '{article_id}' has been published and can no longer be edited")


class IdentityProviderError(Exception):
    """Raised when the external identity service fails or answers unexpectedly."""

    def __init__(self, status_code: int | None, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"[identity] {status_code}: {message}")
