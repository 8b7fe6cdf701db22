from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from trimmed_asserts.constants import MAX_FRAMES, RUNTIME_QUALIFIERS, WRAPPER_METHOD


class TrimConfig(BaseModel):
    max_frames: int = Field(default=MAX_FRAMES, ge=1)
    wrapper_method: str = WRAPPER_METHOD
    runtime_qualifiers: frozenset[str] = RUNTIME_QUALIFIERS
    exclude: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)
