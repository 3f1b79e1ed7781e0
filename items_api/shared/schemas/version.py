"""
Version Schemas
"""

from pydantic import BaseModel, Field


class VersionInfo(BaseModel):
    """API version and build information."""

    name: str = Field(examples=["items-api"])
    version: str = Field(examples=["0.12.0"])
    deploy_tag: str = Field(examples=["2024.02.14-100"])
    build_time: str = Field(examples=["2024-02-14_14:42:35"])
    branch: str = Field(examples=["main"])
    commit: str = Field(examples=["ee9ec805f61944653a56a7e429b2fad03232be49"])
    python_version: str = Field(examples=["3.12.4"])

    def to_string_pretty(self) -> str:
        """Multi-line rendering for the local console log."""
        return (
            "Version information:\n"
            f"  name: {self.name}\n"
            f"  version: {self.version}\n"
            f"  build time: {self.build_time}\n"
            f"  branch: {self.branch}\n"
            f"  commit: {self.commit}\n"
            f"  python version: {self.python_version}"
        )
