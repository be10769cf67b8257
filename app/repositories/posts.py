from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from supabase import Client

from app.repositories.store import store_call

POST_WITH_AUTHOR = "*, profiles(full_name)"
FEED_COLUMNS = "id, title, excerpt, slug, created_at, profiles(full_name)"


class PostRepository(ABC):
    """Storage operations the post lifecycle needs. Rows are plain dicts."""

    @abstractmethod
    def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        ...

    @abstractmethod
    def find_published(self, slug: str) -> Optional[Dict[str, Any]]:
        """Published post by slug, with its author's profile embedded under "profiles"."""

    @abstractmethod
    def find_owned(self, slug: str, author_id: str) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def list_by_author(self, author_id: str) -> List[Dict[str, Any]]:
        """All of an author's posts, newest first."""

    @abstractmethod
    def list_published(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Published posts across authors, newest first, with "profiles" embedded."""

    @abstractmethod
    def update_owned(self, slug: str, author_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def delete_owned(self, slug: str, author_id: str) -> None:
        ...


class SupabasePostRepository(PostRepository):
    def __init__(self, supabase: Client):
        self.supabase = supabase

    @store_call
    def insert(self, row):
        response = self.supabase.table("posts").insert(row).execute()
        return response.data[0]

    @store_call
    def find_published(self, slug):
        response = self.supabase \
            .table("posts") \
            .select(POST_WITH_AUTHOR) \
            .eq("slug", slug) \
            .eq("published", True) \
            .limit(1) \
            .execute()
        return response.data[0] if response.data else None

    @store_call
    def find_owned(self, slug, author_id):
        response = self.supabase \
            .table("posts") \
            .select("*") \
            .eq("slug", slug) \
            .eq("author_id", author_id) \
            .limit(1) \
            .execute()
        return response.data[0] if response.data else None

    @store_call
    def list_by_author(self, author_id):
        response = self.supabase \
            .table("posts") \
            .select("*") \
            .eq("author_id", author_id) \
            .order("created_at", desc=True) \
            .execute()
        return response.data

    @store_call
    def list_published(self, limit=None):
        query = self.supabase \
            .table("posts") \
            .select(FEED_COLUMNS) \
            .eq("published", True) \
            .order("created_at", desc=True)
        if limit is not None:
            query = query.limit(limit)
        return query.execute().data

    @store_call
    def update_owned(self, slug, author_id, fields):
        response = self.supabase \
            .table("posts") \
            .update(fields) \
            .eq("slug", slug) \
            .eq("author_id", author_id) \
            .execute()
        return response.data[0] if response.data else None

    @store_call
    def delete_owned(self, slug, author_id):
        self.supabase \
            .table("posts") \
            .delete() \
            .eq("slug", slug) \
            .eq("author_id", author_id) \
            .execute()
