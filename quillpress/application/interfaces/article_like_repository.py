"""Port for the like ledger."""

from abc import ABC, abstractmethod


class ArticleLikeRepository(ABC):
    """Presence set of (article, user) likes backing the article like counter."""

    @abstractmethod
    async def toggle(self, article_id: int, user_id: str) -> bool:
        """Flip the like for the pair and adjust the counter in the same transaction.

        Returns True when the article is now liked, False when it was unliked.
        """
        ...
