from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List

from app.config import FEED_MAX_PAGE_SIZE, FEED_PAGE_SIZE
from app.dependencies.posts import author_post_context, public_post_repository
from app.schemas.post import Post, PostCreate, PostDetail, PostSummary, PostUpdate
from app.services import posts as post_service
from app.services.errors import PostNotFound

router = APIRouter()


def _not_found():
    return HTTPException(status_code=404, detail="Post not found")


# -------- Public feed --------
@router.get("", response_model=List[PostSummary])
def get_published_posts(
    limit: int = Query(FEED_PAGE_SIZE, ge=1, le=FEED_MAX_PAGE_SIZE),
    repo=Depends(public_post_repository),
):
    return post_service.list_published_posts(repo, limit=limit)


# -------- Public permalink --------
@router.get("/{slug}", response_model=PostDetail)
def get_published_post(slug: str, repo=Depends(public_post_repository)):
    try:
        return post_service.get_published_post(repo, slug)
    except PostNotFound:
        raise _not_found()


# -------- Create post --------
@router.post("", response_model=Post, status_code=201)
def create_post(post: PostCreate, context=Depends(author_post_context)):
    return post_service.create_post(context["posts"], post, context["user_id"])


# -------- Load own post for the edit form --------
@router.get("/{slug}/edit", response_model=Post)
def get_post_for_edit(slug: str, context=Depends(author_post_context)):
    try:
        return post_service.get_post_for_author(context["posts"], slug, context["user_id"])
    except PostNotFound:
        raise _not_found()


# -------- Edit post --------
@router.put("/{slug}", response_model=Post)
def update_post(slug: str, post: PostUpdate, context=Depends(author_post_context)):
    try:
        return post_service.update_post(context["posts"], slug, post, context["user_id"])
    except PostNotFound:
        raise _not_found()


# -------- Delete post --------
@router.delete("/{slug}")
def delete_post(slug: str, context=Depends(author_post_context)):
    try:
        post_service.delete_post(context["posts"], slug, context["user_id"])
    except PostNotFound:
        raise _not_found()
    return {"message": "Post deleted successfully"}
