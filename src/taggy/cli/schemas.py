"""Pydantic schemas for JSON output validation.

This module defines the data structures for all JSON outputs from the CLI.
Pictures are serialized with their bytes base64 encoded.

Commands using Pydantic validation:
- read: TaggyFileResponse | ErrorResponse
- write: TaggyFileResponse | ErrorResponse
- remove: SuccessResponse | ErrorResponse
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from ..tag import TaggyFile

# ============================================================================
# Base Response Models
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code (e.g., "not_found", "parse_error")
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["not_found", "parse_error", "save_failed"],
    )
    message: str = Field(description="Human-readable error description")


class SuccessResponse(BaseModel):
    """Response for operations without a payload.

    Attributes:
        status: Always "success"
        path: Path of the file that was changed
        message: Optional human-readable summary
    """

    status: Literal["success"] = "success"
    path: str = Field(description="Path of the audio file")
    message: Optional[str] = Field(default=None, description="What was done")


# ============================================================================
# Read / Write Command Response
# ============================================================================


class TaggyFileResponse(BaseModel):
    """Response carrying a file snapshot.

    Attributes:
        status: Always "success"
        file: The file and its tags after the operation
    """

    status: Literal["success"] = "success"
    file: TaggyFile = Field(description="File snapshot")


# ============================================================================
# Type Unions for Each Command
# ============================================================================

ReadResponse = TaggyFileResponse | ErrorResponse
WriteResponse = TaggyFileResponse | ErrorResponse
RemoveResponse = SuccessResponse | ErrorResponse
