# Python Imports
from enum import Enum

# Project Imports


class RequestType(Enum):
    VIEW_ACCOUNT = "view_account"
    VIEW_ACCESS_KEY_LIST = "view_access_key_list"
    VIEW_STATE = "view_state"


class AccountStatus(Enum):
    VALID = "valid"
    NOT_FOUND = "not_found"
    INVALID_NAME = "invalid_name"
    ERROR = "error"
