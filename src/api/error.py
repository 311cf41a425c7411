from typing import NoReturn
from fastapi import status
from libs.result import Error, ErrorCode

ERROR_STATUS = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.AUTHENTICATION_ERROR: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.AUTHORIZATION_ERROR: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EXPORT_NOT_READY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EXPORT_ALREADY_CLAIMED: status.HTTP_409_CONFLICT,
    ErrorCode.EXPORT_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ClientError(Exception):
    """4xx error carrying a use case Error"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(base_error.message)
        self.base_error = base_error
        self.status_code = status_code


class ServerError(Exception):
    """5xx error; the message is not exposed to clients"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(base_error.message)
        self.base_error = base_error
        self.status_code = status_code


def raise_for_error(error: Error) -> NoReturn:
    """Raise the HTTP error matching a use case error code"""
    status_code = ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        raise ServerError(error, status_code=status_code)
    raise ClientError(error, status_code=status_code)
