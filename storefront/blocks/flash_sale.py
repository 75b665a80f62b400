"""Bloc Vente flash — produits + fenêtre [start_time, end_time]."""
from datetime import datetime, timedelta
from typing import List, Literal
from pydantic import Field, field_validator
from ..core.clock import utcnow, as_utc
from .base import BaseBlock, BlockContent

FLASH_SALE_DEFAULT_DURATION = timedelta(hours=24)


class FlashSaleContent(BlockContent):
    products: List[str] = Field(default_factory=list)
    start_time: datetime = Field(default_factory=utcnow)
    end_time: datetime = Field(default_factory=lambda: utcnow() + FLASH_SALE_DEFAULT_DURATION)

    # Pas de contrôle end_time >= start_time : une fenêtre inversée reste représentable
    @field_validator("start_time", "end_time")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class FlashSaleBlock(BaseBlock):
    type: Literal["flash_sale"] = "flash_sale"
    content: FlashSaleContent = Field(default_factory=FlashSaleContent)
