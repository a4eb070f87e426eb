"""Unit tests for the ModerationService — admin checks and status transitions."""

from datetime import timedelta

import pytest
import pytest_asyncio

from quillpress.application.schemas import ArticleCreate
from quillpress.domain.entities import ArticleStatus, Identity
from quillpress.domain.exceptions import EntityNotFoundError, PermissionDeniedError

from tests.unit.fakes import FakeBackend

ADMIN = Identity(id="admin", email="admin@example.com")
AUTHOR = Identity(id="author", email="author@example.com")


@pytest_asyncio.fixture
async def backend() -> FakeBackend:
    backend = FakeBackend()
    profiles = backend.profile_service()
    await profiles.get_or_create(ADMIN)
    await profiles.get_or_create(AUTHOR)
    return backend


async def _submit(backend: FakeBackend, title: str = "Draft") -> int:
    article = await backend.article_service().create_article(
        AUTHOR.id, ArticleCreate(title=title, content="body")
    )
    return article.id


@pytest.mark.asyncio
async def test_approve_sets_published_at(backend: FakeBackend):
    article_id = await _submit(backend)
    article = await backend.moderation_service().set_status(ADMIN.id, article_id, ArticleStatus.PUBLISHED)
    assert article.status == ArticleStatus.PUBLISHED
    assert article.published_at == backend.clock()


@pytest.mark.asyncio
async def test_hide_and_restore_keeps_original_published_at(backend: FakeBackend):
    service = backend.moderation_service()
    article_id = await _submit(backend)
    first = await service.set_status(ADMIN.id, article_id, ArticleStatus.PUBLISHED)

    backend.clock.now += timedelta(days=3)
    hidden = await service.set_status(ADMIN.id, article_id, ArticleStatus.HIDDEN)
    restored = await service.set_status(ADMIN.id, article_id, ArticleStatus.PUBLISHED)

    assert hidden.status == ArticleStatus.HIDDEN
    assert hidden.published_at == first.published_at
    assert restored.published_at == first.published_at
    assert restored.updated_at == backend.clock()


@pytest.mark.asyncio
async def test_reject_stores_admin_notes(backend: FakeBackend):
    article_id = await _submit(backend)
    article = await backend.moderation_service().set_status(
        ADMIN.id, article_id, ArticleStatus.REJECTED, "Needs sources"
    )
    assert article.status == ArticleStatus.REJECTED
    assert article.admin_notes == "Needs sources"
    assert article.published_at is None


@pytest.mark.asyncio
async def test_any_status_may_follow_any_other(backend: FakeBackend):
    service = backend.moderation_service()
    article_id = await _submit(backend)
    for status in (ArticleStatus.HIDDEN, ArticleStatus.DRAFT, ArticleStatus.REJECTED, ArticleStatus.PENDING):
        article = await service.set_status(ADMIN.id, article_id, status)
        assert article.status == status
    assert article.published_at is None


@pytest.mark.asyncio
async def test_non_admin_cannot_set_status(backend: FakeBackend):
    article_id = await _submit(backend)
    with pytest.raises(PermissionDeniedError):
        await backend.moderation_service().set_status(AUTHOR.id, article_id, ArticleStatus.PUBLISHED)


@pytest.mark.asyncio
async def test_caller_without_profile_is_forbidden_not_missing(backend: FakeBackend):
    with pytest.raises(PermissionDeniedError):
        await backend.moderation_service().list_queue("stranger")


@pytest.mark.asyncio
async def test_status_of_missing_article_is_not_found(backend: FakeBackend):
    with pytest.raises(EntityNotFoundError):
        await backend.moderation_service().set_status(ADMIN.id, 404, ArticleStatus.PUBLISHED)


@pytest.mark.asyncio
async def test_queue_lists_pending_published_and_hidden(backend: FakeBackend):
    service = backend.moderation_service()
    pending = await _submit(backend, "Pending")
    published = await _submit(backend, "Published")
    rejected = await _submit(backend, "Rejected")
    await service.set_status(ADMIN.id, published, ArticleStatus.PUBLISHED)
    await service.set_status(ADMIN.id, rejected, ArticleStatus.REJECTED)

    queue = await service.list_queue(ADMIN.id)
    assert {v.article.id for v in queue} == {pending, published}

    only_pending = await service.list_queue(ADMIN.id, status=ArticleStatus.PENDING)
    assert [v.article.id for v in only_pending] == [pending]
