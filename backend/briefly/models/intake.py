"""Briefly Intake Model

The structured project form submitted by a client-facing caller.
Accepts both snake_case and the camelCase keys sent by the web form.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List, Optional, Union


class ProjectIntake(BaseModel):
    """Creative project intake form.

    Immutable once received. Only client_name and project_type are required;
    every other field has a canned fallback in the generated brief.
    """
    client_name: str
    client_email: Optional[str] = None
    project_type: str

    budget: Optional[Union[int, float]] = None
    timeline: Optional[str] = None

    # Free-text context
    goals: Optional[str] = None
    requirements: Optional[str] = None
    target_audience: Optional[str] = None
    brand_personality: Optional[str] = None

    model_config = {
        "extra": "ignore",
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
        "allow_inf_nan": False,
    }

    def missing_required_fields(self) -> List[str]:
        """Names of required fields that are blank."""
        missing = []
        if not self.client_name.strip():
            missing.append("client_name")
        if not self.project_type.strip():
            missing.append("project_type")
        return missing
