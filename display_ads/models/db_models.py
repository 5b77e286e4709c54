from typing import Any, Dict, Mapping, Optional
from sqlalchemy import Integer, Text, inspect
from sqlalchemy.dialects import sqlite
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.schema import CreateTable
from display_ads.models.schemas import DisplayAd

TABLE_NAME = "display_ads_table"

COLUMN_ID = "ID"
COLUMN_UUID = "uuid"
COLUMN_CREATIVE_INSTANCE_ID = "creative_instance_id"
COLUMN_POSITION = "position"
COLUMN_TAB_ID = "tab_id"
COLUMN_AD_TITLE = "ad_title"
COLUMN_AD_DESCRIPTION = "ad_description"
COLUMN_AD_CTA_TEXT = "cta_text"
COLUMN_AD_CTA_LINK = "cta_link"
COLUMN_AD_IMAGE = "ad_image"

class Base(DeclarativeBase):
    pass

class DisplayAdRecord(Base):
    """One display ad shown in a browser tab.

    Fields are plain attributes: no validation, no side effects. Use
    ``new_for_insert`` before the row exists and ``from_stored`` once it has
    been read back with its uuid.
    """
    __tablename__ = TABLE_NAME
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(COLUMN_ID, Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[Optional[str]] = mapped_column(COLUMN_UUID, Text)
    creative_instance_id: Mapped[Optional[str]] = mapped_column(COLUMN_CREATIVE_INSTANCE_ID, Text)
    position: Mapped[Optional[int]] = mapped_column(COLUMN_POSITION, Integer)
    tab_id: Mapped[Optional[int]] = mapped_column(COLUMN_TAB_ID, Integer)
    ad_title: Mapped[Optional[str]] = mapped_column(COLUMN_AD_TITLE, Text)
    ad_description: Mapped[Optional[str]] = mapped_column(COLUMN_AD_DESCRIPTION, Text)
    ad_cta_text: Mapped[Optional[str]] = mapped_column(COLUMN_AD_CTA_TEXT, Text)
    ad_cta_link: Mapped[Optional[str]] = mapped_column(COLUMN_AD_CTA_LINK, Text)
    ad_image: Mapped[Optional[str]] = mapped_column(COLUMN_AD_IMAGE, Text)

    @classmethod
    def new_for_insert(cls, creative_instance_id: str, position: int, tab_id: int,
                       ad_title: str, ad_cta_text: str, ad_cta_link: str,
                       ad_image: str) -> "DisplayAdRecord":
        # uuid and ad_description are left unset
        return cls(creative_instance_id=creative_instance_id,
                   position=position,
                   tab_id=tab_id,
                   ad_title=ad_title,
                   ad_cta_text=ad_cta_text,
                   ad_cta_link=ad_cta_link,
                   ad_image=ad_image)

    @classmethod
    def from_stored(cls, uuid: str, creative_instance_id: str, position: int,
                    tab_id: int, ad_title: str, ad_description: Optional[str],
                    ad_cta_text: str, ad_cta_link: str,
                    ad_image: str) -> "DisplayAdRecord":
        return cls(uuid=uuid,
                   creative_instance_id=creative_instance_id,
                   position=position,
                   tab_id=tab_id,
                   ad_title=ad_title,
                   ad_description=ad_description,
                   ad_cta_text=ad_cta_text,
                   ad_cta_link=ad_cta_link,
                   ad_image=ad_image)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DisplayAdRecord":
        """Build a record from a result row keyed by column name.

        Missing columns leave the matching field unset.
        """
        record = cls.from_stored(*(row.get(name) for name in DATA_COLUMNS))
        if row.get(COLUMN_ID) is not None:
            record.id = row[COLUMN_ID]
        return record

    def to_row(self) -> Dict[str, Any]:
        return {name: getattr(self, _ATTRIBUTE_FOR_COLUMN[name]) for name in DATA_COLUMNS}

    def to_json(self) -> str:
        return DisplayAd.model_validate(self).model_dump_json()

    def __repr__(self) -> str:
        return (f"DisplayAdRecord(uuid={self.uuid!r}, "
                f"creative_instance_id={self.creative_instance_id!r}, "
                f"position={self.position!r}, tab_id={self.tab_id!r})")


_ATTRIBUTE_FOR_COLUMN = {
    prop.columns[0].name: prop.key for prop in inspect(DisplayAdRecord).column_attrs
}

# data columns in declaration order, system key excluded
DATA_COLUMNS = tuple(
    c.name for c in DisplayAdRecord.__table__.columns if not c.primary_key
)

CREATE_TABLE = str(
    CreateTable(DisplayAdRecord.__table__, if_not_exists=True).compile(dialect=sqlite.dialect())
).strip()
