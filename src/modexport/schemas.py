from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


Visibility = Literal[
    "public",
    "private",
    "client",
]

SurfaceKind = Literal["plain", "constructible"]


class ExportManifest(BaseModel):
    kind: SurfaceKind = "plain"
    primary: Optional[str] = None
    public: List[str] = Field(default_factory=list)
    test: List[str] = Field(default_factory=list)
    client: List[str] = Field(default_factory=list)

    def names_for(self, visibility: Visibility) -> List[str]:
        if visibility == "public":
            return self.public
        if visibility == "private":
            return self.test
        return self.client
