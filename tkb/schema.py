from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class ObjectKind(str, Enum):
    INSTANCE = "instance"
    CONCEPT = "concept"


# --- Gemini generateContent envelope ---
class Part(BaseModel):
    text: str


class Content(BaseModel):
    parts: List[Part] = Field(min_length=1)


class Candidate(BaseModel):
    content: Content


class GenerateContentResponse(BaseModel):
    candidates: List[Candidate] = Field(min_length=1)

    def answer_text(self) -> str:
        return self.candidates[0].content.parts[0].text


# --- Records returned to callers ---
class GeneratedObject(BaseModel):
    """
    One parsed object or concept.
    Concepts carry attribute names only, so their attrs values are None.
    attrs is a read-only mapping and behaviors a tuple, so a built record
    cannot be changed in place.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="objectName")
    class_name: str = Field(default="", alias="className")
    attrs: Dict[str, Optional[str]] = Field(default_factory=dict, validate_default=True)
    behaviors: Tuple[str, ...] = Field(default=(), alias="behaviorNames")
    kind: ObjectKind = Field(default=ObjectKind.INSTANCE, exclude=True)

    @field_validator("attrs")
    @classmethod
    def _freeze_attrs(cls, v):
        return MappingProxyType(dict(v))

    @field_serializer("attrs")
    def _dump_attrs(self, v) -> Dict[str, Optional[str]]:
        return dict(v)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class AlgoInfo(BaseModel):
    algo_name: str = Field(alias="algoName")
    rule: str


POWER_RULE = AlgoInfo(algoName="POWER RULE", rule="O.a = I.a * I.n, O.x = I.x, O.n = I.n - 1")
