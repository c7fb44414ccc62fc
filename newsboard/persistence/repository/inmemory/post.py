"""In-memory post repository for testing."""

from typing import Optional

from newsboard.domain.model import Post, PostView
from newsboard.domain.repository import PostRepository
from newsboard.domain.value import PageRequest, PostId, UserId

from .store import InMemoryStore, paginate


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _filtered(
        self, author_id: Optional[UserId], site: Optional[str]
    ) -> list[Post]:
        posts = list(self._store.posts.values())
        if author_id is not None:
            posts = [p for p in posts if p.author_id == author_id]
        if site is not None:
            posts = [p for p in posts if p.url == site]
        return posts

    async def create(
        self,
        author_id: UserId,
        title: str,
        url: Optional[str],
        content: Optional[str],
    ) -> Post:
        post = Post(
            id=PostId(self._store.next_id("posts")),
            author_id=author_id,
            title=title,
            url=url,
            content=content,
            created_at=self._store.now(),
        )
        self._store.posts[post.id] = post
        return post

    async def exists(self, post_id: PostId) -> bool:
        return post_id in self._store.posts

    async def find_view(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> Optional[PostView]:
        post = self._store.posts.get(post_id)
        return self._store.post_view(post, viewer_id) if post else None

    async def find_views(
        self,
        page: PageRequest,
        viewer_id: Optional[UserId] = None,
        author_id: Optional[UserId] = None,
        site: Optional[str] = None,
    ) -> list[PostView]:
        posts = paginate(self._filtered(author_id, site), page)
        return [self._store.post_view(post, viewer_id) for post in posts]

    async def count(
        self,
        author_id: Optional[UserId] = None,
        site: Optional[str] = None,
    ) -> int:
        return len(self._filtered(author_id, site))

    async def add_points(self, post_id: PostId, delta: int) -> Optional[int]:
        post = self._store.posts.get(post_id)
        if post is None:
            return None
        post = post.model_copy(update={"points": post.points + delta})
        self._store.posts[post_id] = post
        return post.points

    async def increment_comment_count(self, post_id: PostId) -> Optional[int]:
        post = self._store.posts.get(post_id)
        if post is None:
            return None
        post = post.model_copy(update={"comment_count": post.comment_count + 1})
        self._store.posts[post_id] = post
        return post.comment_count
