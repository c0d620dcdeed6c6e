"""Version information of the command line tool."""

from __future__ import annotations

import json
import platform
import sys
from dataclasses import dataclass

VERSION = "latest"
BUILD_TIME = ""
GIT_COMMIT = ""


@dataclass(frozen=True)
class VersionInfo:
    """Build and runtime details printed by the version command."""

    version: str
    build_time: str
    git_commit: str
    python_version: str
    implementation: str
    platform: str

    def format(self) -> str:
        """Render the details as a single line."""
        fields = [
            ("version", self.version),
            ("buildTime", self.build_time),
            ("gitCommit", self.git_commit),
            ("pythonVersion", self.python_version),
            ("implementation", self.implementation),
            ("platform", self.platform),
        ]
        body = ", ".join(f"{name}:{json.dumps(value)}" for name, value in fields)
        return f"cmd.info{{{body}}}"


def current_version_info(
    version: str = VERSION, build_time: str = BUILD_TIME, git_commit: str = GIT_COMMIT
) -> VersionInfo:
    """Collect version details for the running interpreter."""
    return VersionInfo(
        version=version,
        build_time=build_time,
        git_commit=git_commit,
        python_version=platform.python_version(),
        implementation=platform.python_implementation(),
        platform=f"{sys.platform}/{platform.machine()}",
    )