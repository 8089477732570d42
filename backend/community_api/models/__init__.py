from .community import CommunityRecord, MemberRecord
from .post import PostRecord, CommentRecord

__all__ = ["CommunityRecord", "MemberRecord", "PostRecord", "CommentRecord"]
