# Copyright (c) Syntropy Systems
"""Shared Pydantic model helpers for fraudboard."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class FraudboardBaseModel(BaseModel):
    """Base model with shared config for fraudboard schemas."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )


class FrozenModel(FraudboardBaseModel):
    """Base model for values that must not change once constructed."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )
