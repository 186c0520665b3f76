"""Security helpers for resolving identities from access tokens."""

from jose import JWTError, jwt

from app.config import get_settings


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def resolve_identity(token: str) -> str:
    """Return the user identity carried in the ``sub`` claim of ``token``."""

    payload = decode_access_token(token)
    subject = payload.get("sub")
    if subject is None or not str(subject).strip():
        raise ValueError("Token does not identify a user")
    return str(subject)
