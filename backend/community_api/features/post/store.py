from sqlalchemy import select
from sqlalchemy.orm import Session

from community_api.core.exceptions import CommunityNotFoundError, PostNotFoundError, CommentNotFoundError
from community_api.features.community.store import CommunityStore
from community_api.models import PostRecord, CommentRecord
from .entity import Post, PostType, Comment


def _to_post(r: PostRecord) -> Post:
    return Post(
        id=r.id,
        title=r.title,
        content=r.content,
        post_type=PostType[r.post_type],
        community_id=r.community_id,
        registered_time=r.registered_time,
        registrant=r.registrant,
        modified_time=r.modified_time,
        modifier=r.modifier,
    )


def _to_comment(r: CommentRecord) -> Comment:
    return Comment(
        id=r.id,
        content=r.content,
        post_id=r.post_id,
        registered_time=r.registered_time,
        registrant=r.registrant,
        modified_time=r.modified_time,
        modifier=r.modifier,
    )


class PostStore:

    def __init__(self, db: Session):
        self.db = db

    def _get(self, post_id: int) -> PostRecord:
        r = self.db.get(PostRecord, post_id)
        if r is None:
            raise PostNotFoundError(post_id)
        return r

    def save(self, post: Post) -> Post:
        # community 존재 확인 (FK)
        if not CommunityStore(self.db).exists_by_id(post.community_id):
            raise CommunityNotFoundError(post.community_id)

        r = PostRecord(
            title=post.title,
            content=post.content,
            post_type=post.post_type.name,
            community_id=post.community_id,
            registered_time=post.registered_time,
            registrant=post.registrant,
            modified_time=post.modified_time,
            modifier=post.modifier,
        )
        self.db.add(r)
        self.db.flush()
        return _to_post(r)

    def find_by_id(self, post_id: int) -> Post:
        return _to_post(self._get(post_id))

    def exists_by_id(self, post_id: int) -> bool:
        found = self.db.execute(
            select(PostRecord.id).where(PostRecord.id == post_id)
        ).scalar_one_or_none()
        return found is not None

    # 최신순
    def find_by_community_id(self, community_id: int) -> list[Post]:
        rows = self.db.execute(
            select(PostRecord)
            .where(PostRecord.community_id == community_id)
            .order_by(PostRecord.registered_time.desc(), PostRecord.id.desc())
        ).scalars().all()
        return [_to_post(r) for r in rows]

    def update(self, post: Post) -> Post:
        r = self._get(post.id)
        r.title = post.title
        r.content = post.content
        r.post_type = post.post_type.name
        r.modified_time = post.modified_time
        r.modifier = post.modifier
        self.db.flush()
        return _to_post(r)

    def delete_by_id(self, post_id: int) -> None:
        r = self._get(post_id)
        self.db.delete(r)
        self.db.flush()


class CommentStore:

    def __init__(self, db: Session):
        self.db = db

    def _get(self, comment_id: int) -> CommentRecord:
        r = self.db.get(CommentRecord, comment_id)
        if r is None:
            raise CommentNotFoundError(comment_id)
        return r

    def save(self, comment: Comment) -> Comment:
        # post 존재 확인 (FK)
        if not PostStore(self.db).exists_by_id(comment.post_id):
            raise PostNotFoundError(comment.post_id)

        r = CommentRecord(
            content=comment.content,
            post_id=comment.post_id,
            registered_time=comment.registered_time,
            registrant=comment.registrant,
            modified_time=comment.modified_time,
            modifier=comment.modifier,
        )
        self.db.add(r)
        self.db.flush()
        return _to_comment(r)

    def find_by_id(self, comment_id: int) -> Comment:
        return _to_comment(self._get(comment_id))

    # 오래된 순
    def find_by_post_id(self, post_id: int) -> list[Comment]:
        rows = self.db.execute(
            select(CommentRecord)
            .where(CommentRecord.post_id == post_id)
            .order_by(CommentRecord.registered_time.asc(), CommentRecord.id.asc())
        ).scalars().all()
        return [_to_comment(r) for r in rows]

    def update(self, comment: Comment) -> Comment:
        r = self._get(comment.id)
        r.content = comment.content
        r.modified_time = comment.modified_time
        r.modifier = comment.modifier
        self.db.flush()
        return _to_comment(r)

    def delete_by_id(self, comment_id: int) -> None:
        r = self._get(comment_id)
        self.db.delete(r)
        self.db.flush()
