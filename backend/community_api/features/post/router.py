from fastapi import APIRouter, Depends, Query, status

from community_api.common.schemas.responses import ApiResponse, MessageResponse
from . import schemas
from .commands import PostCreateCommand, PostUpdateCommand, CommentCreateCommand, CommentModifyCommand
from .deps import get_post_service
from .service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


# 커뮤니티별 게시글 (최신순)
@router.get("", response_model=ApiResponse[list[schemas.PostRead]])
def get_posts_by_community(
    community_id: int = Query(...),
    svc: PostService = Depends(get_post_service),
):
    posts = [schemas.PostRead.model_validate(p) for p in svc.get_posts_by_community(community_id)]
    return ApiResponse.ok("Posts retrieved successfully", posts)


@router.get("/{post_id}", response_model=ApiResponse[schemas.PostDetailRead])
def get_post(post_id: int, svc: PostService = Depends(get_post_service)):
    post = svc.get_post(post_id)
    return ApiResponse.ok("Post retrieved successfully", schemas.PostDetailRead.model_validate(post))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ApiResponse[schemas.PostRead])
def create_post(payload: schemas.PostCreateRequest, svc: PostService = Depends(get_post_service)):
    cmd = PostCreateCommand(
        title=payload.title,
        content=payload.content,
        post_type=payload.post_type,
        community_id=payload.community_id,
        registrant=payload.registrant,
    )
    post = svc.create_post(cmd)
    return ApiResponse.ok("Post created successfully", schemas.PostRead.model_validate(post))


@router.put("/{post_id}", response_model=ApiResponse[schemas.PostRead])
def update_post(
    post_id: int,
    payload: schemas.PostUpdateRequest,
    svc: PostService = Depends(get_post_service),
):
    cmd = PostUpdateCommand(
        id=post_id,
        title=payload.title,
        content=payload.content,
        post_type=payload.post_type,
        modifier=payload.modifier,
    )
    post = svc.update_post(cmd)
    return ApiResponse.ok("Post updated successfully", schemas.PostRead.model_validate(post))


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: int,
    user_id: int = Query(...),
    svc: PostService = Depends(get_post_service),
):
    svc.delete_post(post_id, user_id)
    return MessageResponse(message="Post deleted successfully")


# ---- 댓글 ----
@router.get("/{post_id}/comments", response_model=ApiResponse[list[schemas.CommentRead]])
def get_comments_by_post(post_id: int, svc: PostService = Depends(get_post_service)):
    comments = [schemas.CommentRead.model_validate(c) for c in svc.get_comments_by_post(post_id)]
    return ApiResponse.ok("Comments retrieved successfully", comments)


@router.post("/{post_id}/comments", status_code=status.HTTP_201_CREATED, response_model=ApiResponse[schemas.CommentRead])
def create_comment(
    post_id: int,
    payload: schemas.CommentCreateRequest,
    svc: PostService = Depends(get_post_service),
):
    cmd = CommentCreateCommand(post_id=post_id, content=payload.content, registrant=payload.registrant)
    comment = svc.create_comment(cmd)
    return ApiResponse.ok("Comment created successfully", schemas.CommentRead.model_validate(comment))


@router.put("/comments/{comment_id}", response_model=ApiResponse[schemas.CommentRead])
def modify_comment(
    comment_id: int,
    payload: schemas.CommentModifyRequest,
    svc: PostService = Depends(get_post_service),
):
    cmd = CommentModifyCommand(id=comment_id, content=payload.content, modifier=payload.modifier)
    comment = svc.modify_comment(cmd)
    return ApiResponse.ok("Comment modified successfully", schemas.CommentRead.model_validate(comment))


@router.delete("/comments/{comment_id}", response_model=MessageResponse)
def delete_comment(
    comment_id: int,
    user_id: int = Query(...),
    svc: PostService = Depends(get_post_service),
):
    svc.delete_comment(comment_id, user_id)
    return MessageResponse(message="Comment deleted successfully")
