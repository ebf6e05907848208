SECRET_KEY = "test-secret"

GATEWAY_CONFIG = {
    "base_url": "https://backend.test",
    "project_id": "test-project",
    "public_key": "test-key",
    "timeout": 5.0,
}

APPROVER_NAME = "HR Admin"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
