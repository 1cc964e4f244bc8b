"""Error body models for the OpenAPI schema.

Every failing request, matched route or not, answers with ErrorResponse.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "price",
                "message": "Price must be >= 0",
                "code": "INVALID_VALUE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Every error, from validation failures to unmatched routes, uses this body.

    Examples:
        Not found:
            {
                "error": "Item not found",
                "code": "NOT_FOUND",
                "status": 404,
                "path": "/api/items/999"
            }

        Validation error with the failing field:
            {
                "error": "Invalid item data. Name, category, and positive price are required.",
                "code": "VALIDATION_ERROR",
                "status": 400,
                "path": "/api/items",
                "errors": [
                    {"field": "price", "message": "Price must be >= 0", "code": "INVALID_VALUE"}
                ]
            }
    """

    error: str
    code: str | None = None
    status: int
    path: str
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error": "Item not found",
                    "code": "NOT_FOUND",
                    "status": 404,
                    "path": "/api/items/999",
                },
                {
                    "error": "Invalid ID parameter",
                    "code": "VALIDATION_ERROR",
                    "status": 400,
                    "path": "/api/items/abc",
                    "errors": [
                        {"field": "id", "message": "Must be an integer", "code": "INVALID_ID"}
                    ],
                },
            ]
        }
    )
