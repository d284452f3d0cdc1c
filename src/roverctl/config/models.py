"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, roverctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class SessionConfig(BaseModel):
    """[session] section — interactive input."""

    model_config = {"frozen": True}

    show_banner: bool = True
    prompt: str = "> "


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    show_heading: bool = True

