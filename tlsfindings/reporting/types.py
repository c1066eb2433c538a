from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class ReportMode(str, Enum):
    CONSOLIDATED = "consolidated"
    GROUPED = "grouped"


class ProtocolCategory(BaseModel):
    label: str = Field(description="Section header text, without the trailing colon")
    protocols: List[str] = Field(description="Protocol names this category is defined over")
    members: List[str] = Field(default_factory=list, description="Sorted host:port keys")


class ConsolidatedProtocols(BaseModel):
    label_protocols: List[str] = Field(default_factory=list, description="Protocols with at least one member, sorted")
    members: List[str] = Field(default_factory=list)


class GroupedProtocols(BaseModel):
    categories: List[ProtocolCategory] = Field(default_factory=list)


class ConsolidatedCiphers(BaseModel):
    ciphers: List[str] = Field(default_factory=list)
    hosts: List[str] = Field(default_factory=list)


class HostCiphers(BaseModel):
    key: str
    ciphers: List[str]


class GroupedCiphers(BaseModel):
    hosts: List[HostCiphers] = Field(default_factory=list)
