"""
Data structures representing the output of the formatting pipeline.

This module defines the `FormatResult` Pydantic model, which encapsulates
the formatted code, whether it differs from the input, and any problems
encountered along the way.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class FormatResult(BaseModel):
  """
  Container for the result of formatting one source text.
  """

  path: Optional[str] = Field(default=None, description="File the source came from, if any.")
  code: str = Field(default="", description="The formatted source code.")
  changed: bool = Field(default=False, description="True if the formatted code differs from the input.")
  errors: List[str] = Field(default_factory=list, description="Fatal problems; no code was produced.")
  warnings: List[str] = Field(default_factory=list, description="Non-fatal notes, e.g. malformed regions.")
  success: bool = Field(default=True, description="True if formatting produced output.")

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0
