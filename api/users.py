"""REST API endpoints for user records.

Thin adapter between HTTP and the user commands/queries: it parses the
request, runs the handler and maps the returned outcome to a status code.
Authentication is enforced by AuthMiddleware before these run.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from application.user.commands.create_user import CreateUserCommand
from application.user.commands.delete_user import DeleteUserCommand
from application.user.commands.update_user import UpdateUserCommand
from application.user.queries.get_user import GetUserQuery
from application.user.queries.list_users import ListUsersQuery
from application.user.results import Outcome, UserResult
from domain.user.core.entities.user import User, UserCandidate
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.http.error_middleware import error_response
from infrastructure.user.repository_factory import get_user_repository


class UserInput(BaseModel):
    """Request body for create and update. A client supplied id is ignored."""

    id: Optional[int] = None
    username: Optional[str] = None
    email: Optional[str] = None

    def to_candidate(self) -> UserCandidate:
        return UserCandidate(username=self.username, email=self.email)


class UserResponse(BaseModel):
    """Response model for a user record."""

    id: int
    username: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, username=user.username, email=user.email)


_STATUS_BY_OUTCOME = {
    Outcome.OK: status.HTTP_200_OK,
    Outcome.CREATED: status.HTTP_201_CREATED,
    Outcome.DELETED: status.HTTP_204_NO_CONTENT,
    Outcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Outcome.INVALID: status.HTTP_400_BAD_REQUEST,
}


def to_response(result: UserResult) -> Response:
    """Map a handler result to an HTTP response."""
    status_code = _STATUS_BY_OUTCOME[result.outcome]

    if not result.is_success:
        return error_response(status_code, result.error or "")

    if result.outcome is Outcome.DELETED:
        return Response(status_code=status_code)

    value = result.value
    if isinstance(value, list):
        content = [UserResponse.from_user(u).model_dump() for u in value]
        return JSONResponse(status_code=status_code, content=content)

    headers = None
    if result.outcome is Outcome.CREATED:
        headers = {"Location": f"/users/{value.id}"}
    return JSONResponse(
        status_code=status_code,
        content=UserResponse.from_user(value).model_dump(),
        headers=headers,
    )


router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users(
    skip: Optional[int] = Query(None, description="Records to skip (default 0)"),
    take: Optional[int] = Query(None, description="Records to return (default all)"),
    repository: IUserRepository = Depends(get_user_repository),
) -> Response:
    result = await ListUsersQuery(repository).execute(skip=skip or 0, take=take)
    return to_response(result)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    repository: IUserRepository = Depends(get_user_repository),
) -> Response:
    result = await GetUserQuery(repository).execute(user_id)
    return to_response(result)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserInput,
    repository: IUserRepository = Depends(get_user_repository),
) -> Response:
    result = await CreateUserCommand(repository).execute(payload.to_candidate())
    return to_response(result)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    payload: UserInput,
    repository: IUserRepository = Depends(get_user_repository),
) -> Response:
    result = await UpdateUserCommand(repository).execute(user_id, payload.to_candidate())
    return to_response(result)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    repository: IUserRepository = Depends(get_user_repository),
) -> Response:
    result = await DeleteUserCommand(repository).execute(user_id)
    return to_response(result)
