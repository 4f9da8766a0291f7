from enum import Enum

SERVICE_NAME = "devdb"

# Schema holding the device, property, device_scaling and digital_control tables
DEFAULT_DB_SCHEMA = "accdb"

# Address the lookup service binds to unless SERVER_HOST/SERVER_PORT say otherwise
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 50051


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
