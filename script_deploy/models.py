from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class DeployStatus(str, Enum):
    SUCCESS = "success"
    SOURCE_UNAVAILABLE = "source_unavailable"
    DESTINATION_DIRECTORY_UNAVAILABLE = "destination_directory_unavailable"
    DESTINATION_UNAVAILABLE = "destination_unavailable"
    IO_FAILURE = "io_failure"
    CONFIGURATION_ERROR = "configuration_error"


class DeployResult(BaseModel):
    status: DeployStatus
    message: str
    sourcePath: Optional[str] = None
    targetPath: Optional[str] = None
    failedPath: Optional[str] = None
    linesWritten: int = 0
    mismatchedRegions: List[int] = []

    @property
    def ok(self) -> bool:
        return self.status == DeployStatus.SUCCESS
