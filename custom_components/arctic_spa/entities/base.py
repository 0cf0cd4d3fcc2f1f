"""Base classes for entity definitions."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class EntityDefinitionBase(BaseModel):
    """Base class for all entity definitions.

    Contains common fields shared by all entity types.

    Attributes:
        key: Field name in the /status payload (also the entity's id suffix).
        name: Display name for the entity (fallback if translation missing).
        translation_key: Key for i18n translations.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    key: str = Field(..., description="Field name in the /status payload")
    name: str = Field(..., description="Display name for the entity (fallback if translation missing)")
    translation_key: str = Field(..., description="Key for i18n translations")


class PumpDefinition(EntityDefinitionBase):
    """A pump, presented as a fan."""

    pump: Literal["1", "2", "3", "4", "5"] = Field(..., description="Pump selector for /pumps/{pump}")


class SwitchDefinition(EntityDefinitionBase):
    """A blower or a simple toggle, presented as a switch."""

    kind: Literal["blower", "toggle"] = Field(..., description="Which endpoint family the switch writes to")
    selector: str = Field(..., description="Blower number or toggle name")


class ChemistrySensorDefinition(EntityDefinitionBase):
    """A water chemistry reading with a qualitative status."""

    status_key: str = Field(..., description="Field carrying the textual status")
    enable_option: str = Field(..., description="Options flag enabling the sensor")
    unit: str | None = Field(default=None)
    device_class: str | None = Field(default=None)
    state_class: str | None = Field(default="measurement")
