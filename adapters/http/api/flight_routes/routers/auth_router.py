from fastapi import APIRouter, Depends, Request

from core.rate_limiter import limiter, RateLimits
from adapters.http.api.flight_routes.schemas import LoginRequest, LoginResponse
from adapters.http.api.flight_routes.utils.dependencies import get_auth_command_bus
from src.auth_bc.user.application.commands import LoginCommand
from src.framework.application import CommandBus


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
@limiter.limit(RateLimits.LOGIN)
def login(
    request: Request,
    body: LoginRequest,
    command_bus: CommandBus = Depends(get_auth_command_bus),
):
    """Authenticate with username/password and receive a JWT bearer token.

    Invalid credentials and inactive users both yield 401 "Invalid credentials".
    """
    result = command_bus.dispatch(LoginCommand(username=body.username, password=body.password))
    return LoginResponse(**result)
