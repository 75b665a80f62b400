"""
ORM — pages marketing + produits
SQLAlchemy 2 (DeclarativeBase) ; les listes/blocs sont stockés en JSON texte.
"""
from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class PageDB(Base):
    __tablename__ = "marketing_pages"
    id:            Mapped[str]                = mapped_column(sa.String, primary_key=True)
    title:         Mapped[str]                = mapped_column(sa.String, nullable=False)
    description:   Mapped[Optional[str]]      = mapped_column(sa.Text, nullable=True)
    status:        Mapped[str]                = mapped_column(sa.String, nullable=False, default="draft", index=True)
    start_date:    Mapped[Optional[datetime]] = mapped_column(sa.DateTime(timezone=True), nullable=True)
    end_date:      Mapped[Optional[datetime]] = mapped_column(sa.DateTime(timezone=True), nullable=True)
    is_flash_sale: Mapped[bool]               = mapped_column(sa.Boolean, default=False)
    blocks:        Mapped[str]                = mapped_column(sa.Text, default="[]")  # JSON list
    created_at:    Mapped[datetime]           = mapped_column(sa.DateTime(timezone=True), nullable=False)
    updated_at:    Mapped[datetime]           = mapped_column(sa.DateTime(timezone=True), nullable=False)


class ProductDB(Base):
    __tablename__ = "products"
    id:             Mapped[str]             = mapped_column(sa.String, primary_key=True)
    title:          Mapped[str]             = mapped_column(sa.String, nullable=False)
    description:    Mapped[str]             = mapped_column(sa.Text, default="")
    price:          Mapped[float]           = mapped_column(sa.Float, nullable=False)
    original_price: Mapped[Optional[float]] = mapped_column(sa.Float, nullable=True)
    discount:       Mapped[Optional[int]]   = mapped_column(sa.Integer, nullable=True)
    images:         Mapped[str]             = mapped_column(sa.Text, default="[]")  # JSON list
    category:       Mapped[str]             = mapped_column(sa.String, default="")
    tags:           Mapped[str]             = mapped_column(sa.Text, default="[]")  # JSON list
    stock:          Mapped[int]             = mapped_column(sa.Integer, default=0)
    status:         Mapped[str]             = mapped_column(sa.String, default="active")
    brand:          Mapped[Optional[str]]   = mapped_column(sa.String, nullable=True)
    rating:         Mapped[Optional[float]] = mapped_column(sa.Float, nullable=True)
    review_count:   Mapped[Optional[int]]   = mapped_column(sa.Integer, nullable=True)
    created_at:     Mapped[datetime]        = mapped_column(sa.DateTime(timezone=True), nullable=False)
    updated_at:     Mapped[datetime]        = mapped_column(sa.DateTime(timezone=True), nullable=False)
