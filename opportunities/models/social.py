
from sqlalchemy import Column, String, Boolean, DateTime, func, Integer, Text, UniqueConstraint, Index
from opportunities.db.session import Base


class Review(Base):
    __tablename__ = "reviews"
    # One review per user per listing is checked by the create path, not the schema
    __table_args__ = (Index("ix_reviews_listing", "listing_type", "listing_id"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    listing_type = Column(String(20), nullable=False)
    listing_id = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    rating = Column(Integer, nullable=False)  # 1-5
    content = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)


class ThumbsUp(Base):
    __tablename__ = "thumbs_up"
    __table_args__ = (
        UniqueConstraint("user_id", "listing_type", "listing_id", name="uq_thumbs_up_user_listing"),
        Index("ix_thumbs_up_listing", "listing_type", "listing_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False)
    listing_type = Column(String(20), nullable=False)
    listing_id = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Bookmark(Base):
    __tablename__ = "bookmarks"
    __table_args__ = (
        UniqueConstraint("user_id", "listing_type", "listing_id", name="uq_bookmarks_user_listing"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    listing_type = Column(String(20), nullable=False)
    listing_id = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Report(Base):
    __tablename__ = "reports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False)
    report_type = Column(String(20), nullable=False)  # listing, review
    item_type = Column(String(20), nullable=False)  # tutoring, camp, ...
    item_id = Column(Integer, nullable=False)
    reason = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    is_resolved = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class ViewTracking(Base):
    __tablename__ = "view_tracking"
    __table_args__ = (
        UniqueConstraint("tracking_id", "listing_type", "listing_id", name="uq_view_tracking_identity_listing"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    tracking_id = Column(String(100), nullable=False)  # user id or anon_<ip>
    listing_type = Column(String(20), nullable=False)
    listing_id = Column(Integer, nullable=False)
    last_viewed_at = Column(DateTime(timezone=True), nullable=False)
