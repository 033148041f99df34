# app/routers/blogs.py
from fastapi import APIRouter, Depends, Response, status

from app.core.deps import get_blog_service
from app.schemas.blog import BlogCreate, BlogRead
from app.services.blog_service import BlogService

router = APIRouter(prefix="/blogs", tags=["Blogs"])


@router.get("", response_model=list[BlogRead])
def list_blogs(service: BlogService = Depends(get_blog_service)):
    return service.list_blogs()


@router.post("", response_model=BlogRead)
def create_blog(
    payload: BlogCreate,
    service: BlogService = Depends(get_blog_service),
):
    """
    Publish a blog post. `author` falls back to the company name.
    """
    return service.create_blog(payload)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_blog(
    blog_id: int,
    service: BlogService = Depends(get_blog_service),
):
    service.delete_blog(blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
