"""Profile page endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from profile_stage.api.v1.dependencies import ProfileRepositoryDep, ViewerIdDep
from profile_stage.schemas.post import ContentItemResponse
from profile_stage.schemas.profile import ProfilePageResponse, ProfilePostsResponse
from profile_stage.services.visibility import (
    AccessResult,
    ProfileNotFoundError,
    resolve_profile_access,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _resolve_or_404(
    repo: ProfileRepositoryDep,
    viewer_id: ViewerIdDep,
    username: str,
) -> AccessResult:
    try:
        return resolve_profile_access(repo, viewer_id, username)
    except ProfileNotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        ) from err


@router.get("/{username}", response_model=ProfilePageResponse)
def get_profile_page(
    username: str,
    repo: ProfileRepositoryDep,
    viewer_id: ViewerIdDep,
) -> ProfilePageResponse:
    """Return a profile header and, when visible, its posts and threads.

    Private profiles only show content to their owner and accepted followers;
    everyone else gets the header with ``can_view_content`` set to false.
    """
    result = _resolve_or_404(repo, viewer_id, username)
    return ProfilePageResponse.from_access(result)


@router.get(
    "/{username}/posts",
    response_model=ProfilePostsResponse,
    responses={status.HTTP_303_SEE_OTHER: {"description": "Content not visible"}},
)
def get_profile_posts(
    username: str,
    request: Request,
    repo: ProfileRepositoryDep,
    viewer_id: ViewerIdDep,
) -> ProfilePostsResponse | RedirectResponse:
    """List every item of a profile, newest first.

    Viewers who may not see the content are sent back to the profile page.
    """
    result = _resolve_or_404(repo, viewer_id, username)
    if not result.can_view_content:
        target = request.app.url_path_for("get_profile_page", username=username)
        logger.debug("Redirecting viewer of %r to %s", username, target)
        return RedirectResponse(url=str(target), status_code=status.HTTP_303_SEE_OTHER)

    return ProfilePostsResponse(
        username=result.profile.username,
        posts=[ContentItemResponse.model_validate(item) for item in result.content],
    )
