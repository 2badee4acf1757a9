"""Pydantic models for the values exchanged between the two parties."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal


class PublicParameters(BaseModel):
    """Public DH parameters announced by the party that chose them."""
    model_config = ConfigDict(frozen=True)

    type: Literal["dh_params"] = "dh_params"
    p: int = Field(..., ge=2, description="Safe prime modulus")
    g: int = Field(2, ge=2, description="Generator (primitive root of p, or 2)")


class ModuloKeyMessage(BaseModel):
    """A party's public modulo key."""
    model_config = ConfigDict(frozen=True)

    type: Literal["dh_modulo_key"] = "dh_modulo_key"
    m: int = Field(..., description="Modulo key g^secret mod p")
