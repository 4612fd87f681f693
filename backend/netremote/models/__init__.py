from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


from netremote.models.setting_value import SettingValue

__all__ = ["Base", "SettingValue"]
