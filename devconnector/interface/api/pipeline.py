"""Request pipeline stages.

Handlers declare the context they need as a FastAPI dependency:

- ``request_context`` gives an anonymous ``RequestContext``
- ``auth_gate`` runs after it and gives an ``AuthenticatedContext``
  carrying the ``Principal`` decoded from the ``x-auth-token`` header
"""

from typing import Annotated

from fastapi import Depends, Header, Request
import logfire

from devconnector.domain.error import UnauthorizedError, UnauthorizedReason
from devconnector.domain.service import JWTService
from devconnector.domain.value import Principal
from devconnector.util.jwt import JWTError

AUTH_HEADER = "x-auth-token"


class RequestContext:
    """Context available to every handler."""

    def __init__(self, request: Request) -> None:
        self.request = request


class AuthenticatedContext(RequestContext):
    """Context of a request whose bearer token verified."""

    def __init__(self, request: Request, principal: Principal) -> None:
        super().__init__(request)
        self.principal = principal


async def request_context(request: Request) -> RequestContext:
    return RequestContext(request)


async def auth_gate(
    context: Annotated[RequestContext, Depends(request_context)],
    token: Annotated[str | None, Header(alias=AUTH_HEADER)] = None,
) -> AuthenticatedContext:
    """Verify the bearer token and attach its Principal.

    Only the token codec is consulted; the store is never read here.

    Raises:
        UnauthorizedError: NO_TOKEN if the header is absent, INVALID_TOKEN
            if the token does not verify
    """
    if not token:
        raise UnauthorizedError(UnauthorizedReason.NO_TOKEN)

    jwt_service = await context.request.state.dishka_container.get(JWTService)
    try:
        principal = jwt_service.verify(token)
    except JWTError as e:
        logfire.info("Rejected bearer token", error=str(e))
        raise UnauthorizedError(UnauthorizedReason.INVALID_TOKEN)

    return AuthenticatedContext(context.request, principal)


Authenticated = Annotated[AuthenticatedContext, Depends(auth_gate)]
