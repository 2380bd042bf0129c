import os
from dotenv import load_dotenv

load_dotenv()

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))

# Identity authorized for every action and always treated as on duty
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

SEED_DEFAULT_STAFF = os.getenv("SEED_DEFAULT_STAFF", "true").lower() in ("1", "true", "yes")


def validate_auth_config() -> None:
    missing = []
    if not JWT_SECRET_KEY:
        missing.append("JWT_SECRET_KEY")
    if SEED_DEFAULT_STAFF and not ADMIN_PASSWORD:
        missing.append("ADMIN_PASSWORD")

    if missing:
        raise RuntimeError(
            f"Missing required auth environment variables: {', '.join(missing)}. "
            "Please set these in your .env file."
        )
