"""Bloc Banner — image pleine largeur, lien optionnel."""
from typing import Literal, Optional
from pydantic import Field
from .base import BaseBlock, BlockContent


class BannerContent(BlockContent):
    image: str = ""
    link: Optional[str] = None
    alt: Optional[str] = None


class BannerBlock(BaseBlock):
    type: Literal["banner"] = "banner"
    content: BannerContent = Field(default_factory=BannerContent)
