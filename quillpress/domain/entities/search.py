"""Search criteria and ranking rules for published articles.

Two distinct notions of "trending" live here and must stay separate:

* ``SortMode.TRENDING`` orders a search by raw engagement
  (likes + comments), newest first on ties, with no time window.
* ``trending_score`` weights likes, comments and views and is only applied
  to articles published inside ``TRENDING_WINDOW`` by the trending feed.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum

SEARCH_RESULT_LIMIT = 50

TRENDING_WINDOW = timedelta(days=7)
TRENDING_LIMIT = 10
TRENDING_LIKE_WEIGHT = 2
TRENDING_COMMENT_WEIGHT = 1
TRENDING_VIEW_WEIGHT = 0.1

TAG_MAX_LENGTH = 100


class SortMode(str, Enum):
    """Orderings accepted by the article search."""

    LATEST = "latest"
    OLDEST = "oldest"
    POPULAR = "popular"
    TRENDING = "trending"


@dataclass
class ArticleSearch:
    """Filters for listing published articles."""

    query: str | None = None
    tags: list[str] = field(default_factory=list)
    author: str | None = None
    sort_by: SortMode = SortMode.LATEST
    limit: int = SEARCH_RESULT_LIMIT

    def __post_init__(self) -> None:
        # Blank queries mean "no filter"; others are matched verbatim.
        if self.query is not None and not self.query.strip():
            self.query = None
        self.tags = normalize_tags(self.tags)


def trending_score(likes_count: int, comments_count: int, views_count: int) -> float:
    """Score used by the trending feed."""
    return (
        likes_count * TRENDING_LIKE_WEIGHT
        + comments_count * TRENDING_COMMENT_WEIGHT
        + views_count * TRENDING_VIEW_WEIGHT
    )


def normalize_tags(tags: list[str] | None) -> list[str]:
    """Trim and lowercase tags, dropping blanks and duplicates."""
    seen: list[str] = []
    for tag in tags or []:
        cleaned = tag.strip().lower()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen
