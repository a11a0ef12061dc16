"""Schema naming entities."""

from __future__ import annotations

from dataclasses import dataclass

from .name_derivation import derive_response_name


@dataclass(frozen=True)
class ResponseSite:
    """Location of one JSON response schema inside `paths`."""

    path: str
    method: str
    operation_id: str
    status: str

    def response_name(self) -> str:
        return derive_response_name(self.path, self.method, self.operation_id, self.status)
