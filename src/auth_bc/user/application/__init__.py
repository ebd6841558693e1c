from .commands import LoginCommand, LoginCommandHandler
from .queries import GetCurrentUserQuery, GetCurrentUserQueryHandler
