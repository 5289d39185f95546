import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from donorhub.database import get_db
from donorhub.models.blog import Blog
from donorhub.schemas.blog import BlogCreate, BlogResponse, BlogStatusEnum, BlogUpdate
from donorhub.utils.errors import NotFoundError
from donorhub.utils.identifiers import parse_id
from donorhub.utils.response import create_response, handle_exception

router = APIRouter(prefix="/content-management", tags=["Content Management"])
logger = logging.getLogger(__name__)


def _blog_payload(blog: Blog) -> dict:
    return BlogResponse.model_validate(blog).model_dump(mode="json", by_alias=True)


def _get_blog(db: Session, blog_id: str) -> Blog:
    blog = db.query(Blog).filter(Blog.id == blog_id).first()
    if not blog:
        raise NotFoundError("Blog not found")
    return blog


def _transition(db: Session, blog_id: str, source: BlogStatusEnum, target: BlogStatusEnum) -> bool:
    """Flip a blog from ``source`` to ``target``; False when nothing matched."""
    matched = (
        db.query(Blog)
        .filter(Blog.id == blog_id, Blog.status == source.value)
        .update({Blog.status: target.value}, synchronize_session=False)
    )
    db.commit()
    if matched:
        logger.info("Blog %s moved %s -> %s", blog_id, source.value, target.value)
        return True

    current = db.query(Blog.status).filter(Blog.id == blog_id).scalar()
    if current is None:
        logger.info("Blog %s not found while moving to %s", blog_id, target.value)
    else:
        logger.info("Blog %s already %s, cannot move to %s", blog_id, current, target.value)
    return False


@router.post("/blog", status_code=status.HTTP_201_CREATED)
def create_blog(body: BlogCreate, db: Session = Depends(get_db)):
    try:
        blog = Blog(
            title=body.title,
            thumbnail=body.thumbnail,
            content=body.content,
            created_by=body.created_by,
            status=BlogStatusEnum.draft.value,
        )
        db.add(blog)
        db.commit()
        db.refresh(blog)
        logger.info("Blog %s created by %s", blog.id, blog.created_by)
        return create_response(
            message="Blog created successfully",
            data={"blogId": blog.id},
            status_code=status.HTTP_201_CREATED,
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to create blog")


@router.get("/blogs")
def list_blogs(
    status_filter: BlogStatusEnum | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    try:
        query = db.query(Blog)
        if status_filter:
            query = query.filter(Blog.status == status_filter.value)
        blogs = query.order_by(Blog.created_at.desc()).all()
        return create_response(
            message="Blogs fetched",
            data={"count": len(blogs), "blogs": [_blog_payload(blog) for blog in blogs]},
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to fetch blogs")


@router.get("/blogs/{blog_id}")
def get_blog(blog_id: str, db: Session = Depends(get_db)):
    try:
        blog = _get_blog(db, parse_id(blog_id, "blog id"))
        return create_response(message="Blog fetched", data=_blog_payload(blog))
    except Exception as exc:
        return handle_exception(exc, "Failed to fetch blog")


@router.put("/blogs/{blog_id}")
def update_blog(blog_id: str, body: BlogUpdate, db: Session = Depends(get_db)):
    try:
        blog = _get_blog(db, parse_id(blog_id, "blog id"))
        for field, value in body.model_dump().items():
            setattr(blog, field, value)
        blog.updated_at = datetime.utcnow()
        db.commit()
        db.refresh(blog)
        logger.info("Blog %s updated", blog.id)
        return create_response(message="Blog updated successfully", data=_blog_payload(blog))
    except Exception as exc:
        return handle_exception(exc, "Failed to update blog")


@router.patch("/blogs/{blog_id}/publish")
def publish_blog(blog_id: str, db: Session = Depends(get_db)):
    try:
        blog_id = parse_id(blog_id, "blog id")
        if not _transition(db, blog_id, BlogStatusEnum.draft, BlogStatusEnum.published):
            raise NotFoundError(
                "Blog not found or already published",
                error_code="BLOG_NOT_FOUND_OR_PUBLISHED",
            )
        return create_response(
            message="Blog published successfully",
            data={"id": blog_id, "status": BlogStatusEnum.published.value},
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to publish blog")


@router.patch("/blogs/{blog_id}/unpublish")
def unpublish_blog(blog_id: str, db: Session = Depends(get_db)):
    try:
        blog_id = parse_id(blog_id, "blog id")
        if not _transition(db, blog_id, BlogStatusEnum.published, BlogStatusEnum.draft):
            raise NotFoundError(
                "Blog not found or already unpublished",
                error_code="BLOG_NOT_FOUND_OR_UNPUBLISHED",
            )
        return create_response(
            message="Blog unpublished successfully",
            data={"id": blog_id, "status": BlogStatusEnum.draft.value},
        )
    except Exception as exc:
        return handle_exception(exc, "Failed to unpublish blog")


@router.delete("/blogs/{blog_id}")
def delete_blog(blog_id: str, db: Session = Depends(get_db)):
    try:
        blog_id = parse_id(blog_id, "blog id")
        deleted = db.query(Blog).filter(Blog.id == blog_id).delete(synchronize_session=False)
        db.commit()
        if not deleted:
            raise NotFoundError("Blog not found")
        logger.info("Blog %s deleted", blog_id)
        return create_response(message="Blog deleted successfully", data=None)
    except Exception as exc:
        return handle_exception(exc, "Failed to delete blog")
