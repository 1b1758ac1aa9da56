# Python Imports

# Project Imports


class NearUtilsError(Exception):
    pass


class NotFoundError(NearUtilsError):
    """A credential store, keyfile or config file is missing or unreadable."""


class ConfigError(NearUtilsError):
    pass


class MalformedKeyFileError(NearUtilsError):
    pass


class InvalidKeyFormatError(NearUtilsError):
    pass


class RemoteError(NearUtilsError):
    """Transport, HTTP or JSON-RPC failure while talking to a node."""

    def __init__(self, message: str, error: object = None):
        super().__init__(message)
        self.error = error


class AccountNotFoundError(RemoteError):
    def __init__(self, account_id: str, error: object = None):
        super().__init__(f"Account {account_id} does not exist", error)
        self.account_id = account_id
