from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from fastapi.security import HTTPBearer


bearer_scheme = HTTPBearer(auto_error=False)

MISSING_TOKEN_DETAIL = "GitHub token is required as Authorization Bearer credentials"


def extract_github_token(credentials: HTTPAuthorizationCredentials | None) -> str:
    """Return the GitHub token carried in Bearer credentials.

    Raises:
        HTTPException: 401 if the credentials are missing, use another
            scheme, or hold a blank token.
    """

    token = credentials.credentials.strip() if credentials is not None else ""
    if credentials is None or credentials.scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=401, detail=MISSING_TOKEN_DETAIL)

    return token
