"""HTTP endpoints for posts (list, read, create, edit, delete)."""
from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from blog.domain.errors import StorageError, ValidationError
from blog.domain.post import Post
from blog.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


class CreatePostRequest(BaseModel):
    title: str
    slug: str
    body: str


class UpdatePostRequest(BaseModel):
    title: str
    body: str


class PostResponse(BaseModel):
    id: int
    title: str
    slug: str
    body: str

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(**post.to_dict())


def _get_post_service(request: Request) -> PostService:
    svc = getattr(getattr(request.app, "state", None), "post_service", None)
    if not svc:
        raise RuntimeError("PostService not configured")
    return svc


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _not_found() -> JSONResponse:
    return _error(404, "Post not found")


def _failure(exc: Exception) -> JSONResponse:
    if isinstance(exc, ValidationError):
        return _error(400, str(exc))
    return _error(500, str(exc))


@router.get("")
async def list_posts(request: Request):
    svc = _get_post_service(request)
    try:
        posts = await svc.get_all_posts()
    except StorageError as exc:
        return _failure(exc)
    return [PostResponse.from_post(p) for p in posts]


@router.get("/{post_id}")
async def get_post(post_id: int, request: Request):
    svc = _get_post_service(request)
    try:
        post = await svc.get_post_by_id(post_id)
    except (ValidationError, StorageError) as exc:
        return _failure(exc)
    if post is None:
        return _not_found()
    return PostResponse.from_post(post)


@router.post("", status_code=201)
async def create_post(payload: CreatePostRequest, request: Request):
    svc = _get_post_service(request)
    try:
        post = await svc.create_post(payload.title, payload.slug, payload.body)
    except (ValidationError, StorageError) as exc:
        return _failure(exc)
    return PostResponse.from_post(post)


@router.put("/{post_id}")
async def update_post(post_id: int, payload: UpdatePostRequest, request: Request):
    svc = _get_post_service(request)
    try:
        post = await svc.update_post(post_id, payload.title, payload.body)
    except (ValidationError, StorageError) as exc:
        return _failure(exc)
    if post is None:
        return _not_found()
    return PostResponse.from_post(post)


@router.delete("/{post_id}")
async def delete_post(post_id: int, request: Request):
    svc = _get_post_service(request)
    try:
        deleted = await svc.delete_post(post_id)
    except (ValidationError, StorageError) as exc:
        return _failure(exc)
    if not deleted:
        return _not_found()
    return {"message": "Post deleted successfully"}
