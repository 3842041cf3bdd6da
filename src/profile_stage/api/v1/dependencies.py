"""Shared API dependencies for viewer identification and data access."""

import logging
import uuid
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from profile_stage.core.security import decode_access_token
from profile_stage.db.session import get_db
from profile_stage.repositories.profile_repo import ProfileRepository

logger = logging.getLogger(__name__)

# Profile pages are public routes; a missing header means an anonymous viewer.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def _decode_user_id(subject: str) -> uuid.UUID:
    """Decode a profile id from a token subject.

    Raises:
        HTTPException: If the subject is not a UUID
    """
    try:
        return uuid.UUID(subject)
    except ValueError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err


def get_profile_repository(db: SessionDep) -> ProfileRepository:
    """Return a repository bound to the request's session."""
    return ProfileRepository(db)


ProfileRepositoryDep = Annotated[ProfileRepository, Depends(get_profile_repository)]


def get_optional_viewer_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    repo: ProfileRepositoryDep,
) -> uuid.UUID | None:
    """Return the id of the requesting profile, or None for anonymous requests.

    Args:
        credentials: HTTP Bearer token credentials, if any were sent
        repo: Profile repository for the current request

    Returns:
        The viewer's profile id, or None when no token was sent or the token
        subject no longer matches a profile

    Raises:
        HTTPException: If a token was sent but is invalid
    """
    if credentials is None:
        return None
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err

    subject = payload.get("sub")
    if not isinstance(subject, str):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )
    viewer_id = _decode_user_id(subject)

    if repo.find_profile_by_id(viewer_id) is None:
        logger.info("Token subject %s has no profile; treating viewer as anonymous", viewer_id)
        return None
    return viewer_id


# Type alias for optional viewer dependency
ViewerIdDep = Annotated[uuid.UUID | None, Depends(get_optional_viewer_id)]
