"""Pydantic models for JSON output schemas.

These models define the validated JSON shapes for commands that support
``--json`` output.
"""

from pydantic import BaseModel, ConfigDict


class SdkInfo(BaseModel):
    """One registered SDK in `javaver list --json`."""

    model_config = ConfigDict(strict=True)

    name: str
    path: str


class ListCommandResponse(BaseModel):
    """JSON response schema for the `javaver list` command.

    Attributes:
        registry_path: Location of the persisted registry file
        sdks: Registered SDKs in insertion order
    """

    model_config = ConfigDict(strict=True)

    registry_path: str
    sdks: list[SdkInfo]
