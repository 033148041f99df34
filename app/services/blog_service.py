# app/services/blog_service.py
from app.core.config import Settings
from app.repositories.storage import Storage
from app.schemas.blog import BlogCreate, BlogInsert, BlogRead


class BlogService:
    """Blog posts: wire mapping and the default author."""

    def __init__(self, storage: Storage, settings: Settings):
        self.storage = storage
        self.settings = settings

    def list_blogs(self) -> list[BlogRead]:
        return [BlogRead.from_row(b) for b in self.storage.list_blogs()]

    def create_blog(self, payload: BlogCreate) -> BlogRead:
        blog = self.storage.create_blog(
            BlogInsert(
                title=payload.title,
                content=payload.content,
                image_url=payload.image,
                author=payload.author or self.settings.DEFAULT_BLOG_AUTHOR,
            )
        )
        return BlogRead.from_row(blog)

    def delete_blog(self, blog_id: int) -> None:
        self.storage.delete_blog(blog_id)
