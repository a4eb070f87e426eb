"""Unit tests for the ArticleService."""

from datetime import timedelta

import pytest

from quillpress.application.schemas import ArticleCreate, ArticleUpdate
from quillpress.application.services import ArticleService
from quillpress.domain.entities import ArticleSearch, ArticleStatus, Identity
from quillpress.domain.exceptions import ArticleLockedError, EntityNotFoundError

from tests.unit.fakes import FakeBackend

AUTHOR = "user-author"
READER = "user-reader"


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def service(backend: FakeBackend) -> ArticleService:
    return backend.article_service()


async def _publish(backend: FakeBackend, article_id: int) -> None:
    stored = backend.articles.articles[article_id]
    stored.set_status(ArticleStatus.PUBLISHED, now=backend.clock())


@pytest.mark.asyncio
async def test_create_article_lands_in_pending(service: ArticleService):
    article = await service.create_article(
        AUTHOR, ArticleCreate(title="Hello World", content="# Hi", tags=["x", "y"])
    )
    assert article.id is not None
    assert article.status == ArticleStatus.PENDING
    assert article.slug.startswith("hello-world-")
    assert article.published_at is None


@pytest.mark.asyncio
async def test_identical_titles_at_the_same_instant_get_distinct_slugs(service: ArticleService):
    first = await service.create_article(AUTHOR, ArticleCreate(title="Same", content="a"))
    second = await service.create_article(AUTHOR, ArticleCreate(title="Same", content="b"))
    assert first.slug != second.slug
    assert first.slug.startswith("same-")
    assert second.slug.startswith("same-")


@pytest.mark.asyncio
async def test_create_normalizes_tags(service: ArticleService, backend: FakeBackend):
    article = await service.create_article(
        AUTHOR, ArticleCreate(title="T", content="c", tags=["Python", " python ", "", "Web"])
    )
    assert backend.tags.tags[article.id] == ["python", "web"]


@pytest.mark.asyncio
async def test_empty_cover_url_is_stored_as_absent(service: ArticleService):
    article = await service.create_article(
        AUTHOR, ArticleCreate(title="T", content="c", cover_image_url="")
    )
    assert article.cover_image_url is None


@pytest.mark.asyncio
async def test_update_by_owner_changes_fields_and_replaces_tags(service: ArticleService, backend: FakeBackend):
    created = await service.create_article(
        AUTHOR, ArticleCreate(title="Old", content="Old content", excerpt="short", tags=["a"])
    )
    updated = await service.update_article(
        AUTHOR, created.id, ArticleUpdate(title="New", tags=["B", "c"])
    )
    assert updated.title == "New"
    assert updated.content == "Old content"
    assert updated.excerpt == "short"
    assert updated.slug == created.slug
    assert backend.tags.tags[created.id] == ["b", "c"]


@pytest.mark.asyncio
async def test_update_without_tags_keeps_existing_tags(service: ArticleService, backend: FakeBackend):
    created = await service.create_article(AUTHOR, ArticleCreate(title="T", content="c", tags=["keep"]))
    await service.update_article(AUTHOR, created.id, ArticleUpdate(content="changed"))
    assert backend.tags.tags[created.id] == ["keep"]


@pytest.mark.asyncio
async def test_update_with_empty_excerpt_clears_it(service: ArticleService):
    created = await service.create_article(AUTHOR, ArticleCreate(title="T", content="c", excerpt="x"))
    updated = await service.update_article(AUTHOR, created.id, ArticleUpdate(excerpt=""))
    assert updated.excerpt is None


@pytest.mark.asyncio
async def test_update_by_non_owner_is_reported_as_not_found(service: ArticleService):
    created = await service.create_article(AUTHOR, ArticleCreate(title="Mine", content="c"))
    with pytest.raises(EntityNotFoundError):
        await service.update_article(READER, created.id, ArticleUpdate(title="Stolen"))


@pytest.mark.asyncio
async def test_update_of_missing_article_is_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(AUTHOR, 999, ArticleUpdate(title="Ghost"))


@pytest.mark.asyncio
async def test_published_article_is_locked_for_its_author(service: ArticleService, backend: FakeBackend):
    created = await service.create_article(AUTHOR, ArticleCreate(title="T", content="c"))
    await _publish(backend, created.id)
    with pytest.raises(ArticleLockedError):
        await service.update_article(AUTHOR, created.id, ArticleUpdate(title="Too late"))


@pytest.mark.asyncio
async def test_edit_fetch_returns_tags_for_owner_only(service: ArticleService, backend: FakeBackend):
    await backend.profile_service().get_or_create(Identity(id=AUTHOR, email="a@example.com"))
    created = await service.create_article(AUTHOR, ArticleCreate(title="T", content="c", tags=["x", "y"]))

    view = await service.get_article_for_edit(AUTHOR, created.id)
    assert sorted(view.tags) == ["x", "y"]
    assert view.article.status == ArticleStatus.PENDING

    with pytest.raises(EntityNotFoundError):
        await service.get_article_for_edit(READER, created.id)


@pytest.mark.asyncio
async def test_pending_article_is_not_visible_by_slug(service: ArticleService):
    created = await service.create_article(AUTHOR, ArticleCreate(title="T", content="c"))
    with pytest.raises(EntityNotFoundError):
        await service.get_published_article(created.slug)


@pytest.mark.asyncio
async def test_each_fetch_by_slug_counts_one_view(service: ArticleService, backend: FakeBackend):
    created = await service.create_article(AUTHOR, ArticleCreate(title="T", content="c"))
    await _publish(backend, created.id)

    first = await service.get_published_article(created.slug)
    second = await service.get_published_article(created.slug)

    assert first.article.views_count == 1
    assert second.article.views_count == 2
    assert backend.articles.articles[created.id].views_count == 2


@pytest.mark.asyncio
async def test_view_includes_author_profile(service: ArticleService, backend: FakeBackend):
    await backend.profile_service().get_or_create(
        Identity(id=AUTHOR, email="ada@example.com", display_name="Ada", avatar_url="https://img/ada.png")
    )
    created = await service.create_article(AUTHOR, ArticleCreate(title="T", content="c"))
    await _publish(backend, created.id)

    view = await service.get_published_article(created.slug)
    assert view.author.username == "Ada"
    assert view.author.avatar_url == "https://img/ada.png"
    assert view.author.identity_id == AUTHOR


@pytest.mark.asyncio
async def test_toggle_like_twice_restores_count(service: ArticleService, backend: FakeBackend):
    created = await service.create_article(AUTHOR, ArticleCreate(title="T", content="c"))
    await _publish(backend, created.id)

    assert await service.toggle_like(READER, created.id) is True
    assert backend.articles.articles[created.id].likes_count == 1
    assert await service.toggle_like(READER, created.id) is False
    assert backend.articles.articles[created.id].likes_count == 0
    assert (created.id, READER) not in backend.likes.likes


@pytest.mark.asyncio
async def test_liking_an_unpublished_article_is_not_found(service: ArticleService):
    created = await service.create_article(AUTHOR, ArticleCreate(title="T", content="c"))
    with pytest.raises(EntityNotFoundError):
        await service.toggle_like(READER, created.id)


@pytest.mark.asyncio
async def test_trending_uses_seven_day_window(service: ArticleService, backend: FakeBackend):
    old = await service.create_article(AUTHOR, ArticleCreate(title="Old", content="c"))
    fresh = await service.create_article(AUTHOR, ArticleCreate(title="Fresh", content="c"))
    now = backend.clock()
    backend.articles.articles[old.id].set_status(ArticleStatus.PUBLISHED, now=now - timedelta(days=8))
    backend.articles.articles[fresh.id].set_status(ArticleStatus.PUBLISHED, now=now - timedelta(days=6))

    views = await service.trending_articles()
    assert [v.article.id for v in views] == [fresh.id]
    assert views[0].trending_score == 0.0


@pytest.mark.asyncio
async def test_list_articles_composes_views(service: ArticleService, backend: FakeBackend):
    created = await service.create_article(AUTHOR, ArticleCreate(title="T", content="c", tags=["a"]))
    await _publish(backend, created.id)
    views = await service.list_articles(ArticleSearch())
    assert [v.tags for v in views] == [["a"]]
