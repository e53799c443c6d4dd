"""Schema definitions for parsed utility classes.

This module defines the Pydantic models produced by the parser (the AST and
the error result), the variant model, and the plugin table entries the parser
matches tokens against.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class VariantKind(str, Enum):
    """Kinds of variant prefixes"""
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    MEDIA = "media"
    DARK = "dark"
    GROUP = "group"
    PEER = "peer"
    ATTRIBUTE = "attribute"
    SUPPORTS = "supports"
    ARBITRARY = "arbitrary"


class Variant(BaseModel):
    """A recognized variant prefix such as ``hover`` or ``md``"""
    kind: VariantKind
    name: str = Field(..., description="Variant text as written in the token")
    value: str = Field(..., description="Selector or media condition")


@dataclass
class State:
    """Sign and importance flags stripped from the base token."""
    important: bool = False
    negative: bool = False


class NamedPlugin(BaseModel):
    """Utility with a fixed value, e.g. ``block`` or ``text-center``"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    ns: str
    value: str
    class_: List[str] = Field(default_factory=list, alias="class")


class FunctionalPlugin(BaseModel):
    """Utility root accepting a value, e.g. ``mt`` or ``bg``"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    scale_key: str = Field(..., description="Theme scale the value is looked up in")
    ns: str
    class_: List[str] = Field(default_factory=list, alias="class")
    type: str = Field(..., description="Value kind accepted for arbitrary values")


class Value(BaseModel):
    """Resolved value descriptor"""
    model_config = ConfigDict(populate_by_name=True)

    value: str
    class_: List[str] = Field(default_factory=list, alias="class")
    raw: str
    kind: str


class AST(BaseModel):
    """Successful parse of a utility class token"""
    root: str
    kind: Literal["named", "functional"]
    property: str
    value: str
    value_def: Value
    variants: List[Variant] = Field(default_factory=list)
    modifier: Optional[str] = None
    important: bool = False
    negative: bool = False
    arbitrary: bool = False


class ParseError(BaseModel):
    """Failed parse; returned, never raised"""
    root: str
    kind: Literal["error"] = "error"
    message: str
    suggestions: List[str] = Field(default_factory=list)


ParseResult = Union[AST, ParseError]
