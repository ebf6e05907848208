import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

GATEWAY_CONFIG = {
    "base_url": os.getenv("HR_API_BASE_URL", ""),
    "project_id": os.getenv("HR_PROJECT_ID", ""),
    "public_key": os.getenv("HR_PUBLIC_KEY", ""),
    "timeout": float(os.getenv("HR_API_TIMEOUT", "30")),
}

APPROVER_NAME = os.getenv("APPROVER_NAME", "HR Admin")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
