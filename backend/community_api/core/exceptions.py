from fastapi import status


class CommunityAppError(Exception):
    """서비스 계층 공통 예외. HTTP 변환은 exception_handlers에서만 처리."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ---- 404 ----
class NotFoundError(CommunityAppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class CommunityNotFoundError(NotFoundError):
    def __init__(self, community_id):
        super().__init__(f"Community not found with id: {community_id}")


class PostNotFoundError(NotFoundError):
    def __init__(self, post_id):
        super().__init__(f"Post not found with id: {post_id}")


class CommentNotFoundError(NotFoundError):
    def __init__(self, comment_id):
        super().__init__(f"Comment not found with id: {comment_id}")


# ---- 400 ----
class ConflictError(CommunityAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request conflicts with current state"


class MembershipConflictError(ConflictError):
    default_message = "User is already a member of this community"


class NotAMemberError(ConflictError):
    default_message = "User is not a member of this community"


class InvalidInputError(CommunityAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class InvalidSecretError(InvalidInputError):
    default_message = "Invalid secret number for community"


# ---- 401 ----
class UnauthorizedError(CommunityAppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"
