from pydantic import BaseModel, ConfigDict
from typing import Optional

class DisplayAd(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    uuid: Optional[str] = None
    creative_instance_id: Optional[str] = None
    position: Optional[int] = None
    tab_id: Optional[int] = None
    ad_title: Optional[str] = None
    ad_description: Optional[str] = None
    ad_cta_text: Optional[str] = None
    ad_cta_link: Optional[str] = None
    ad_image: Optional[str] = None
