"""studygen configuration.

Typed settings for the generator. The defaults target the Sierra Chart
ACSIL base class; every value can be overridden from the environment so a
team can point the generator at its own base class or file naming scheme
without touching the study descriptions.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class GeneratorConfig(BaseModel):
    """Settings shared by the header and stub generators.

    Instances are created once by the CLI (usually via :meth:`from_env`) and
    passed to :class:`~studygen.scaffolder.generator.StudyGenerator`.
    """

    header_suffix: str = Field(default=".h", description="Extension of the generated header")
    source_suffix: str = Field(
        default=".cpp", description="Extension of the generated implementation stub"
    )
    base_class: str = Field(default="SCSFBase", description="C++ base class of every study")
    base_header: str = Field(
        default="SCSFBase.h", description="Header that declares the base class"
    )
    guard_prefix: str = Field(default="ACS_", description="Prefix of the include-guard macro")
    entry_prefix: str = Field(
        default="scsf_", description="Prefix of the exported entry-point function"
    )

    @field_validator("header_suffix", "source_suffix")
    @classmethod
    def _suffix_has_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"suffix must look like '.ext', got {value!r}")
        return value

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def header_path(self, config_path: str | Path) -> Path:
        """Sibling of *config_path* with the header extension."""
        return Path(config_path).with_suffix(self.header_suffix)

    def source_path(self, config_path: str | Path) -> Path:
        """Sibling of *config_path* with the implementation extension."""
        return Path(config_path).with_suffix(self.source_suffix)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            STUDYGEN_HEADER_SUFFIX, STUDYGEN_SOURCE_SUFFIX,
            STUDYGEN_BASE_CLASS, STUDYGEN_BASE_HEADER,
            STUDYGEN_GUARD_PREFIX, STUDYGEN_ENTRY_PREFIX.
        """
        kwargs: dict[str, Any] = {}
        for field_name in cls.model_fields:
            env_name = f"STUDYGEN_{field_name.upper()}"
            if os.environ.get(env_name):
                kwargs[field_name] = os.environ[env_name]
        return cls(**kwargs)
