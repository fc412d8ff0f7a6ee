"""Auction house listings and sale history."""

from dataclasses import dataclass
from datetime import datetime

from df_client.models.common import ItemExt, parse_kst


@dataclass
class AuctionItem:
    no: int
    reg_date: datetime
    expire_date: datetime
    item: ItemExt
    adventure_fame: int
    count: int
    current_price: int
    unit_price: int
    average_price: int

    @classmethod
    def from_dict(cls, data: dict) -> "AuctionItem":
        return cls(
            no=data["auctionNo"],
            reg_date=parse_kst(data["regDate"]),
            expire_date=parse_kst(data["expireDate"]),
            item=ItemExt.from_dict(data),
            adventure_fame=data.get("adventureFame") or 0,
            count=data["count"],
            current_price=data["currentPrice"],
            unit_price=data["unitPrice"],
            average_price=data["averagePrice"],
        )


@dataclass
class AuctionSoldItem:
    sold_date: datetime
    item: ItemExt
    count: int
    price: int
    unit_price: int

    @classmethod
    def from_dict(cls, data: dict) -> "AuctionSoldItem":
        return cls(
            sold_date=parse_kst(data["soldDate"]),
            item=ItemExt.from_dict(data),
            count=data["count"],
            price=data["price"],
            unit_price=data["unitPrice"],
        )
