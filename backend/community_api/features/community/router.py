from fastapi import APIRouter, Depends, Query, status

from community_api.common.schemas.responses import ApiResponse, MessageResponse
from . import schemas
from .commands import (
    CommunityRegisterCommand,
    CommunityModifyCommand,
    MemberJoinCommand,
    MemberLeaveCommand,
)
from .deps import get_community_service
from .service import CommunityService

router = APIRouter(prefix="/communities", tags=["communities"])


# 커뮤니티 전체 조회
@router.get("", response_model=ApiResponse[list[schemas.CommunityRead]])
def get_all_communities(svc: CommunityService = Depends(get_community_service)):
    communities = [schemas.CommunityRead.model_validate(c) for c in svc.get_all_communities()]
    return ApiResponse.ok("Communities retrieved successfully", communities)


# 단일 조회
@router.get("/{community_id}", response_model=ApiResponse[schemas.CommunityRead])
def get_community(community_id: int, svc: CommunityService = Depends(get_community_service)):
    community = svc.get_community(community_id)
    return ApiResponse.ok("Community retrieved successfully", schemas.CommunityRead.model_validate(community))


# 등록 (admin)
@router.post("", status_code=status.HTTP_201_CREATED, response_model=ApiResponse[schemas.CommunityRead])
def register_community(
    payload: schemas.CommunityRegisterRequest,
    svc: CommunityService = Depends(get_community_service),
):
    cmd = CommunityRegisterCommand(
        type=payload.type,
        thumbnail=payload.thumbnail,
        name=payload.name,
        description=payload.description,
        manager_id=payload.manager_id,
        manager_name=payload.manager_name,
        manager_email=payload.manager_email,
        registrant=payload.registrant,
        allow_self_join=payload.allow_self_join,
        secret_number=payload.secret_number,
    )
    community = svc.register_community(cmd)
    return ApiResponse.ok("Community registered successfully", schemas.CommunityRead.model_validate(community))


# 수정 (admin)
@router.put("/{community_id}", response_model=ApiResponse[schemas.CommunityRead])
def modify_community(
    community_id: int,
    payload: schemas.CommunityModifyRequest,
    svc: CommunityService = Depends(get_community_service),
):
    cmd = CommunityModifyCommand(
        id=community_id,
        type=payload.type,
        thumbnail=payload.thumbnail,
        name=payload.name,
        description=payload.description,
        modifier=payload.modifier,
    )
    community = svc.modify_community(cmd)
    return ApiResponse.ok("Community modified successfully", schemas.CommunityRead.model_validate(community))


# 삭제 (admin)
@router.delete("/{community_id}", response_model=MessageResponse)
def delete_community(
    community_id: int,
    user_id: int = Query(...),
    svc: CommunityService = Depends(get_community_service),
):
    svc.delete_community(community_id, user_id)
    return MessageResponse(message="Community deleted successfully")


# 가입 멤버 목록
@router.get("/{community_id}/members", response_model=ApiResponse[list[schemas.MemberRead]])
def get_members(community_id: int, svc: CommunityService = Depends(get_community_service)):
    members = [schemas.MemberRead.model_validate(m) for m in svc.get_members(community_id)]
    return ApiResponse.ok("Members retrieved successfully", members)


# 가입
@router.post("/{community_id}/members", response_model=MessageResponse)
def join_community(
    community_id: int,
    payload: schemas.MemberJoinRequest,
    svc: CommunityService = Depends(get_community_service),
):
    cmd = MemberJoinCommand(
        community_id=community_id,
        user_id=payload.user_id,
        registrant=payload.registrant,
        secret_number=payload.secret_number,
    )
    svc.join_member(cmd)
    return MessageResponse(message="Successfully joined community")


# 탈퇴
@router.delete("/{community_id}/members/{user_id}", response_model=MessageResponse)
def leave_community(
    community_id: int,
    user_id: int,
    svc: CommunityService = Depends(get_community_service),
):
    svc.leave_member(MemberLeaveCommand(community_id=community_id, user_id=user_id))
    return MessageResponse(message="Successfully left community")


# 가입 여부 체크 // True / False
@router.get("/{community_id}/members/{user_id}/check", response_model=ApiResponse[bool])
def check_membership(
    community_id: int,
    user_id: int,
    svc: CommunityService = Depends(get_community_service),
):
    return ApiResponse.ok("Membership status retrieved", svc.check_membership(community_id, user_id))
