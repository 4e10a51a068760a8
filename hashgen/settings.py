DEFAULT_PASSWORD = "admin123"
DEFAULT_USERNAME = "admin"
DEFAULT_ROLE = "admin"

# Tabla/columna que consume el login de la app
USERS_TABLE = "users"
PASSWORD_COLUMN = "password_hash"

BANNER_START = "=== Password Hash Generator ==="
BANNER_END = "=== End ==="
ERROR_PREFIX = "Error generating hash:"
