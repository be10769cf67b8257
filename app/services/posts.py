"""
Post lifecycle: creation with slug generation, public and author reads,
ownership-checked updates and deletes.

Ownership is enforced by scoping every author query by ``author_id``. A post
that exists but belongs to someone else is reported as ``PostNotFound``, the
same as a missing one, so other users' drafts are never revealed.
"""
import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.config import FEED_PAGE_SIZE
from app.repositories.posts import PostRepository
from app.schemas.post import (
    ANONYMOUS_AUTHOR,
    Dashboard,
    Post,
    PostCreate,
    PostDetail,
    PostSummary,
    PostUpdate,
)
from app.services.errors import PostNotFound
from app.utils.content_renderer import render_content
from app.utils.slugs import generate_slug

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "content", "excerpt", "published")
CHARS_PER_MINUTE = 1000


def author_name(row: Dict[str, Any]) -> str:
    # PostgREST embeds a to-one relation as an object, but as a list when the
    # relationship is not detected as unique
    profile = row.get("profiles")
    if isinstance(profile, list):
        profile = profile[0] if profile else None
    if not profile:
        return ANONYMOUS_AUTHOR
    return profile.get("full_name") or ANONYMOUS_AUTHOR


def reading_time_minutes(content: str) -> int:
    return math.ceil(len(content) / CHARS_PER_MINUTE)


def create_post(repo: PostRepository, data: PostCreate, author_id: str) -> Post:
    row = {
        "title": data.title,
        "content": data.content,
        "excerpt": data.excerpt,
        "slug": generate_slug(data.title),
        "published": data.published,
        "author_id": author_id,
    }
    created = repo.insert(row)
    logger.info(f"Created post {created['slug']} for author {author_id} (published={data.published})")
    return Post(**created)


def get_published_post(repo: PostRepository, slug: str) -> PostDetail:
    row = repo.find_published(slug)
    if not row:
        raise PostNotFound(slug)

    name = author_name(row)
    fields = {k: v for k, v in row.items() if k != "profiles"}
    return PostDetail(
        **fields,
        author_name=name,
        author_initial=name.strip()[:1].upper() or ANONYMOUS_AUTHOR[0],
        reading_time_minutes=reading_time_minutes(row["content"]),
        blocks=render_content(row["content"]),
    )


def get_post_for_author(repo: PostRepository, slug: str, author_id: str) -> Post:
    row = repo.find_owned(slug, author_id)
    if not row:
        raise PostNotFound(slug)
    return Post(**row)


def list_author_posts(repo: PostRepository, author_id: str) -> List[Post]:
    return [Post(**row) for row in repo.list_by_author(author_id)]


def get_dashboard(repo: PostRepository, author_id: str) -> Dashboard:
    posts = list_author_posts(repo, author_id)
    published = sum(1 for post in posts if post.published)
    return Dashboard(
        posts=posts,
        total=len(posts),
        published=published,
        drafts=len(posts) - published,
    )


def list_published_posts(repo: PostRepository, limit: Optional[int] = FEED_PAGE_SIZE) -> List[PostSummary]:
    rows = repo.list_published(limit)
    return [
        PostSummary(
            id=row["id"],
            slug=row["slug"],
            title=row["title"],
            excerpt=row.get("excerpt"),
            created_at=row.get("created_at"),
            author_name=author_name(row),
        )
        for row in rows
    ]


def update_post(repo: PostRepository, slug: str, data: PostUpdate, requesting_user_id: str) -> Post:
    # Verify post belongs to the user before writing anything
    if not repo.find_owned(slug, requesting_user_id):
        logger.warning(f"Update of {slug} refused for user {requesting_user_id}")
        raise PostNotFound(slug)

    changes = data.model_dump(exclude_unset=True, include=set(UPDATABLE_FIELDS))
    if changes.get("published", False) is None:
        del changes["published"]
    changes["updated_at"] = datetime.now(timezone.utc).isoformat()

    updated = repo.update_owned(slug, requesting_user_id, changes)
    if not updated:
        # Deleted between the ownership check and the write
        raise PostNotFound(slug)

    logger.info(f"Updated post {slug} fields={sorted(changes)}")
    return Post(**updated)


def delete_post(repo: PostRepository, slug: str, requesting_user_id: str) -> None:
    if not repo.find_owned(slug, requesting_user_id):
        logger.warning(f"Delete of {slug} refused for user {requesting_user_id}")
        raise PostNotFound(slug)

    repo.delete_owned(slug, requesting_user_id)
    logger.info(f"Deleted post {slug}")
