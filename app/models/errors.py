"""
Error handling and exception classes for the Paged Resources Service.

This module provides custom exceptions and the structured error responses
returned by the HTTP layer.
"""

from typing import List, Optional

from fastapi import HTTPException, status
from pydantic import BaseModel, ConfigDict


class ErrorKind:
    """Error kinds reported in error responses."""
    INVALID_ROUTE = "InvalidRoute"
    INVALID_PARAMETERS = "InvalidParameters"
    INVALID_BASE_URI = "InvalidBaseUri"
    ILLEGAL_ARGUMENT = "IllegalArgument"
    NOT_FOUND = "NotFound"
    INTERNAL_SERVER_ERROR = "InternalServerError"


class ErrorDetail(BaseModel):
    """Individual error detail.

    Fields vary by error kind:
    - InvalidRoute: kind, method, route, message
    - InvalidParameters: kind, parameters, message, reason
    - InvalidBaseUri: kind, uri, message
    - IllegalArgument: kind, message, reason
    - NotFound: kind, entity, message, reason
    """

    model_config = ConfigDict(exclude_none=True)

    kind: str
    message: Optional[str] = None
    # InvalidRoute fields
    method: Optional[str] = None
    route: Optional[str] = None
    # InvalidParameters fields
    parameters: Optional[List[str]] = None
    # InvalidBaseUri fields
    uri: Optional[str] = None
    # NotFound fields
    entity: Optional[str] = None
    reason: Optional[str] = None


class ErrorsResponse(BaseModel):
    """Error response wrapping one or more error details."""
    model_config = ConfigDict(exclude_none=True)

    errors: List[ErrorDetail]


class PagingException(Exception):
    """Base exception for the Paged Resources Service."""

    def __init__(
        self,
        kind: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        method: Optional[str] = None,
        route: Optional[str] = None,
        parameters: Optional[List[str]] = None,
        uri: Optional[str] = None,
        entity: Optional[str] = None,
        message: Optional[str] = None,
        reason: Optional[str] = None
    ):
        """Initialize paging exception."""
        self.kind = kind
        self.status_code = status_code
        self.method = method
        self.route = route
        self.parameters = parameters or []
        self.uri = uri
        self.entity = entity
        self.message = message or self._generate_message()
        self.reason = reason
        super().__init__(self.message)

    def _generate_message(self) -> str:
        """Generate error message from error details."""
        if self.kind == ErrorKind.INVALID_ROUTE:
            return f"Invalid route: {self.method} {self.route}"
        elif self.kind == ErrorKind.INVALID_PARAMETERS:
            param_list = "', '".join(self.parameters) if self.parameters else ""
            return f"Invalid parameter{'s' if len(self.parameters) > 1 else ''} '{param_list}'"
        elif self.kind == ErrorKind.INVALID_BASE_URI:
            return f"Invalid base URI '{self.uri}'"
        elif self.kind == ErrorKind.NOT_FOUND:
            return f"{self.entity or 'Resource'} not found."
        else:
            return "An error occurred."

    def to_error_detail(self) -> ErrorDetail:
        """Convert exception to error detail."""
        return ErrorDetail(
            kind=self.kind,
            method=self.method,
            route=self.route,
            parameters=self.parameters if self.parameters else None,
            uri=self.uri,
            entity=self.entity,
            message=self.message,
            reason=self.reason
        )

    def to_http_exception(self) -> HTTPException:
        """Convert to FastAPI HTTPException."""
        return HTTPException(
            status_code=self.status_code,
            detail=ErrorsResponse(errors=[self.to_error_detail()]).model_dump(exclude_none=True)
        )


class InvalidBaseUriError(PagingException):
    """A base URI that cannot be used to build absolute pagination links."""

    def __init__(self, uri: Optional[str], message: Optional[str] = None):
        if message is None:
            if uri is None:
                message = "No base URI configured and no request context available."
            else:
                message = f"Base URI '{uri}' is not an absolute URI."
        super().__init__(
            kind=ErrorKind.INVALID_BASE_URI,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            uri=uri,
            message=message
        )


class IllegalArgumentError(PagingException, ValueError):
    """An argument violating the preconditions of an assembler operation."""

    def __init__(
        self,
        message: str,
        reason: Optional[str] = None,
        status_code: int = status.HTTP_400_BAD_REQUEST
    ):
        super().__init__(
            kind=ErrorKind.ILLEGAL_ARGUMENT,
            status_code=status_code,
            message=message,
            reason=reason
        )


class InvalidParametersError(PagingException):
    """Invalid query or path parameters error."""

    def __init__(
        self,
        parameters: List[str],
        message: Optional[str] = None,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        method: Optional[str] = None,
        route: Optional[str] = None,
        reason: Optional[str] = None
    ):
        if message is None:
            message = "Invalid query parameter(s) provided."
        if reason is None:
            reason = "The parameter value is invalid or incorrectly formatted."
        super().__init__(
            kind=ErrorKind.INVALID_PARAMETERS,
            status_code=status_code,
            parameters=parameters,
            method=method,
            route=route,
            message=message,
            reason=reason
        )


class NotFoundError(PagingException):
    """Entity not found error."""

    def __init__(
        self,
        entity: str,
        status_code: int = status.HTTP_404_NOT_FOUND,
        message: Optional[str] = None,
        reason: Optional[str] = None
    ):
        if message is None:
            message = f"{entity} not found."
        if reason is None:
            reason = "The requested resource does not exist."
        super().__init__(
            kind=ErrorKind.NOT_FOUND,
            status_code=status_code,
            entity=entity,
            message=message,
            reason=reason
        )


# Utility functions for common error scenarios

def create_pagination_error(
    page: Optional[str] = None,
    size: Optional[str] = None,
    page_parameter: str = "page",
    size_parameter: str = "size"
) -> InvalidParametersError:
    """Create a pagination parameter error naming the offending parameters."""
    parameters = []
    if page is not None:
        parameters.append(page_parameter)
    if size is not None:
        parameters.append(size_parameter)

    param_list = "', '".join(parameters) if parameters else f"{page_parameter} and {size_parameter}"
    reason = f"Invalid value for parameter{'s' if len(parameters) > 1 else ''} '{param_list}': unable to resolve the requested page."

    return InvalidParametersError(
        parameters=parameters or [page_parameter, size_parameter],
        message="Invalid query parameter(s) provided.",
        reason=reason
    )
