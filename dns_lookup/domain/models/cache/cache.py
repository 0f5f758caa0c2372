from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel


class DNSCache(SQLModel, table=True):
    __tablename__ = "dns_cache"

    domain: str = Field(primary_key=True)
    data: str
    # naive UTC, see common.converter.DatetimeConverter
    last_updated: datetime = Field(sa_column=Column(DateTime, nullable=False))
