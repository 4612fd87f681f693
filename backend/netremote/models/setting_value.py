from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from netremote.models import Base


class SettingValue(Base):
    __tablename__ = "settings"

    namespace: Mapped[str] = mapped_column(String, primary_key=True)
    key: Mapped[str] = mapped_column(String, primary_key=True)
    value: Mapped[str | None] = mapped_column(Text, nullable=True)  # JSON-encoded
