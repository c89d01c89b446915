from typing import Any
from app.db.base import Base
from sqlalchemy import String, Integer, BigInteger, JSON
from sqlalchemy.orm import Mapped, mapped_column


class BridgeTransaction(Base):
    # Written by the EVM-to-native bridge indexer; read-only here.
    __tablename__ = "e2n"

    tx_hash: Mapped[str] = mapped_column(String, primary_key=True)
    block_hash: Mapped[str] = mapped_column(String, nullable=False)

    sender: Mapped[str] = mapped_column(String, nullable=False, index=True)
    receiver: Mapped[str] = mapped_column(String, nullable=False, index=True)

    asset: Mapped[str] = mapped_column(String, nullable=False)
    # fixed-point: digits after the point are given by `decimal`
    amount: Mapped[str] = mapped_column(String, nullable=False)
    decimal: Mapped[int] = mapped_column(Integer, nullable=False)

    height: Mapped[int] = mapped_column(BigInteger, nullable=False)
    timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)

    value: Mapped[Any] = mapped_column(JSON, nullable=False)
