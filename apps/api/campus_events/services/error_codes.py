from enum import Enum


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    FORBIDDEN = "FORBIDDEN"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    QUERY_NOT_FOUND = "QUERY_NOT_FOUND"
    DUPLICATE_IDENTIFIER = "DUPLICATE_IDENTIFIER"
    SCHEDULING_CONFLICT = "SCHEDULING_CONFLICT"
    DEADLINE_PASSED = "DEADLINE_PASSED"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    EVENT_FULL = "EVENT_FULL"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_OR_EXPIRED_TOKEN = "INVALID_OR_EXPIRED_TOKEN"
    STORE_FAILURE = "STORE_FAILURE"
