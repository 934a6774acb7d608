"""Configuration model for the markdown conversion pipeline."""

from pydantic import BaseModel, ConfigDict, Field


class HtmlConverterConfig(BaseModel):
    """Configuration for HTML preprocessing and markdown postprocessing."""

    model_config = ConfigDict(frozen=True)

    max_line_width: int = Field(
        default=120, ge=1, description="Advisory wrap width for converted markdown"
    )
    remove_scripts_styles: bool = Field(
        default=True, description="Remove <script> and <style> elements"
    )
    remove_navigation: bool = Field(
        default=True, description="Remove <nav> and nav-classed elements"
    )
    remove_sidebars: bool = Field(
        default=True, description="Remove <aside> and sidebar-classed elements"
    )
    remove_ads: bool = Field(
        default=True, description="Remove advertisement-classed elements"
    )
    max_blank_lines: int = Field(
        default=2, ge=0, description="Maximum consecutive blank lines retained"
    )
