#!/usr/bin/env python3
"""
Base Pydantic Schemas for Type-Safe Results

This module provides the foundational Pydantic model shared by hardinspect
reports, ensuring type safety, validation, and a stable JSON shape.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalysisResultBase(BaseModel):
    """
    Base result model for all analyzers.

    Attributes:
        available: Whether the analyzer executed successfully
        error: Error message if analyzer failed
        execution_time: Execution time in seconds
        timestamp: When the analysis was performed
        analyzer_name: Name of the analyzer that produced this result

    Example:
        >>> result = AnalysisResultBase(
        ...     available=True,
        ...     execution_time=0.5,
        ...     analyzer_name="hardening"
        ... )
        >>> print(result.available)
        True
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    available: bool = Field(..., description="Whether the analyzer executed successfully")

    error: str | None = Field(None, description="Error message if analyzer failed")

    execution_time: float | None = Field(None, ge=0.0, description="Execution time in seconds")

    timestamp: datetime | None = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the analysis was performed",
    )

    analyzer_name: str | None = Field(
        None, description="Name of the analyzer that produced this result"
    )

    @field_validator("analyzer_name")
    @classmethod
    def validate_analyzer_name(cls, v: str | None) -> str | None:
        """Normalize analyzer name to lowercase"""
        if v is not None:
            return v.lower().strip()
        return v

    def model_dump_safe(self, **kwargs) -> dict[str, Any]:
        """
        Safely dump model to dict, handling None values appropriately.

        Args:
            **kwargs: Additional arguments to pass to model_dump

        Returns:
            Dictionary representation of the model
        """
        return self.model_dump(mode="json", exclude_none=True, **kwargs)

    def to_json(self, **kwargs) -> str:
        """
        Convert model to JSON string.

        Args:
            **kwargs: Additional arguments to pass to model_dump_json

        Returns:
            JSON string representation
        """
        return self.model_dump_json(exclude_none=True, **kwargs)
