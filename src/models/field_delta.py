from typing import Any, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, Field


class FieldDelta(BaseModel):
    """Top-level fields to add or overwrite, and fields to remove."""

    model_config = ConfigDict(frozen=True)

    to_set: Dict[str, Any] = Field(default_factory=dict)
    to_unset: FrozenSet[str] = Field(default_factory=frozenset)

    def to_update_document(self) -> Dict[str, Any]:
        """MongoDB update operators for this delta, omitting empty ones."""
        update: Dict[str, Any] = {}
        if self.to_set:
            update["$set"] = dict(self.to_set)
        if self.to_unset:
            update["$unset"] = {key: "" for key in sorted(self.to_unset)}
        return update
