import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker_test"),
}

JWT_SECRET_KEY = "test-jwt-secret-key-with-enough-length"
JWT_ISSUER = "attendance-tracker-test"
JWT_AUDIENCE = "attendance-tracker-test-clients"
JWT_EXPIRE_MINUTES = 5

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin123"
