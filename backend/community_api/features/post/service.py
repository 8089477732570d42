import structlog
from sqlalchemy.orm import Session

from community_api.clients.user_client import UserClient
from community_api.core.database import transaction
from .commands import PostCreateCommand, PostUpdateCommand, CommentCreateCommand, CommentModifyCommand
from .entity import Post, Comment
from .store import PostStore, CommentStore

logger = structlog.get_logger()


class PostService:
    """Post + Comment. 작성/수정/삭제는 유효한 user만 가능."""

    def __init__(
        self,
        db: Session,
        post_store: PostStore,
        comment_store: CommentStore,
        user_client: UserClient,
    ):
        self.db = db
        self.post_store = post_store
        self.comment_store = comment_store
        self.user_client = user_client

    # ---- Post ----
    def create_post(self, cmd: PostCreateCommand) -> Post:
        with transaction(self.db):
            self.user_client.validate_user(cmd.registrant)
            saved = self.post_store.save(Post.create(cmd))

        logger.info("Post created", post_id=saved.id, community_id=saved.community_id)
        return saved

    def update_post(self, cmd: PostUpdateCommand) -> Post:
        with transaction(self.db):
            self.user_client.validate_user(cmd.modifier)
            existing = self.post_store.find_by_id(cmd.id)
            saved = self.post_store.update(existing.update(cmd))

        logger.info("Post updated", post_id=saved.id, modifier=cmd.modifier)
        return saved

    def delete_post(self, post_id: int, user_id: int | None) -> None:
        with transaction(self.db):
            self.user_client.validate_user(user_id)
            self.post_store.delete_by_id(post_id)

        logger.info("Post deleted", post_id=post_id, user_id=user_id)

    # 게시글 + 댓글(오래된 순)
    def get_post(self, post_id: int) -> Post:
        post = self.post_store.find_by_id(post_id)
        return post.with_comments(self.comment_store.find_by_post_id(post_id))

    def get_posts_by_community(self, community_id: int) -> list[Post]:
        return self.post_store.find_by_community_id(community_id)

    # ---- Comment ----
    def create_comment(self, cmd: CommentCreateCommand) -> Comment:
        with transaction(self.db):
            self.user_client.validate_user(cmd.registrant)
            saved = self.comment_store.save(Comment.create(cmd))

        logger.info("Comment created", comment_id=saved.id, post_id=saved.post_id)
        return saved

    def modify_comment(self, cmd: CommentModifyCommand) -> Comment:
        with transaction(self.db):
            self.user_client.validate_user(cmd.modifier)
            existing = self.comment_store.find_by_id(cmd.id)
            saved = self.comment_store.update(existing.update_content(cmd))

        logger.info("Comment modified", comment_id=saved.id, modifier=cmd.modifier)
        return saved

    def delete_comment(self, comment_id: int, user_id: int | None) -> None:
        with transaction(self.db):
            self.user_client.validate_user(user_id)
            self.comment_store.delete_by_id(comment_id)

        logger.info("Comment deleted", comment_id=comment_id, user_id=user_id)

    def get_comments_by_post(self, post_id: int) -> list[Comment]:
        self.post_store.find_by_id(post_id)  # 없으면 NotFound
        return self.comment_store.find_by_post_id(post_id)
