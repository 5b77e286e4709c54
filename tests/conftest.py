import pytest
from sqlalchemy import create_engine

from display_ads.models.db_models import DisplayAdRecord


@pytest.fixture
def memory_engine():
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def short_record():
    return DisplayAdRecord.new_for_insert(
        creative_instance_id="abc123",
        position=2,
        tab_id=5,
        ad_title="Buy now",
        ad_cta_text="Shop",
        ad_cta_link="https://example.com",
        ad_image="img.png",
    )


@pytest.fixture
def stored_record():
    return DisplayAdRecord.from_stored(
        uuid="row-1",
        creative_instance_id="abc123",
        position=2,
        tab_id=5,
        ad_title="Buy now",
        ad_description="desc",
        ad_cta_text="Shop",
        ad_cta_link="https://example.com",
        ad_image="img.png",
    )
