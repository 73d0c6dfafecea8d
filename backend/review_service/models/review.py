from sqlalchemy import BigInteger, Column, DateTime, Integer, Text, func

from review_service.models.base import Base


# 64-bit ids; SQLite only autoincrements a plain INTEGER primary key.
Id64 = BigInteger().with_variant(Integer, "sqlite")


class Review(Base):
    __tablename__ = "review"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Id64, primary_key=True, autoincrement=True)
    media_id = Column(Id64, nullable=False, index=True)
    user_id = Column(Id64, nullable=False, index=True)
    content = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
