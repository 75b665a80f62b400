"""Bloc HTML — markup brut injecté tel quel (entrée de confiance, aucune sanitization)."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockContent


class HtmlBlockContent(BlockContent):
    html_content: str = ""


class HtmlBlock(BaseBlock):
    type: Literal["html_block"] = "html_block"
    content: HtmlBlockContent = Field(default_factory=HtmlBlockContent)
