from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from stylekit.components.breakpoints import DEFAULT_BREAKPOINTS, BreakpointTable
from stylekit.domain.units import Size, format_number


def _check_size(value: str) -> str:
    Size.parse(value)
    return value


def _breakpoint_text(value: object) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{format_number(value)}px"
    return _check_size(str(value))


class ImageRules(BaseModel):
    default_type: str = "png"
    retina: bool = True


class GridRules(BaseModel):
    small: str = "tablet"
    large: str = "desktop"
    gutter: str = "0"
    row_spacing: str = "0"

    @field_validator("gutter", "row_spacing", mode="before")
    @classmethod
    def _size_text(cls, value: object) -> str:
        return _check_size(str(value))


class OutputRules(BaseModel):
    style: Literal["expanded", "compressed"] = "expanded"
    indent: int = Field(default=2, ge=0, le=8)


class StyleRules(BaseModel):
    breakpoints: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_BREAKPOINTS))
    images: ImageRules = Field(default_factory=ImageRules)
    grid: GridRules = Field(default_factory=GridRules)
    output: OutputRules = Field(default_factory=OutputRules)

    @field_validator("breakpoints", mode="before")
    @classmethod
    def _breakpoint_sizes(cls, value: object) -> object:
        if not isinstance(value, dict):
            return value
        # YAML reads "768px" as text but a bare 768 as an int; bare numbers are px
        return {str(name): _breakpoint_text(size) for name, size in value.items()}

    @model_validator(mode="after")
    def _grid_breakpoints_defined(self) -> "StyleRules":
        for name in (self.grid.small, self.grid.large):
            if name not in self.breakpoints:
                raise ValueError(f"Grid breakpoint '{name}' is not defined in breakpoints")
        return self

    def breakpoint_table(self) -> BreakpointTable:
        return BreakpointTable(self.breakpoints)
