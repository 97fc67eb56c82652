import pytest

from estemplate.config import get_settings
from estemplate.models import (
    EnabledFlag,
    IndexSettings,
    Property,
    Template,
    TypeMapping,
    keyword_property,
    nested_property,
    text_property,
)

MAPPINGS_JSON = (
    '{"_defualt_":{"_all":{"enabled":true}},"some_type":{"properties":{'
    '"@timestamp":{"type":"date","format":"yyyy-MM-dd\'T\'HH:mm:ssZ"},'
    '"count":{"type":"integer"},'
    '"location":{"type":"geo_point"},'
    '"object":{"type":"nested","properties":{"title":{"type":"keyword","ignore_above":256},'
    '"user":{"type":"nested","properties":{"age":{"type":"integer"},"first_name":{"type":"keyword"},'
    '"last_name":{"type":"keyword"}}}}},'
    '"word":{"type":"text","fielddata":true,"fields":{"keyword":{"type":"keyword","ignore_above":256}}}}}}'
)

TEMPLATE_JSON = (
    '{"template":"te*","settings":{"number_of_shards":1},"mappings":{"type1":{"_source":{"enabled":false},'
    '"properties":{"created_at":{"type":"date","format":"EEE MMM dd HH:mm:ss Z YYYY"},"host_name":{"type":"keyword"}}}}}'
)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Make sure every test starts from the default (compact) settings"""
    for var in ["ESTEMPLATE_JSON_INDENT", "ESTEMPLATE_ENSURE_ASCII", "ESTEMPLATE_ENV_FILE"]:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def mappings() -> dict[str, TypeMapping]:
    return {
        "_defualt_": TypeMapping(all=EnabledFlag(enabled=True)),
        "some_type": TypeMapping(
            properties={
                "@timestamp": Property(type="date", format="yyyy-MM-dd'T'HH:mm:ssZ"),
                "count": Property(type="integer"),
                "location": Property(type="geo_point"),
                "word": text_property(fielddata=True, keyword=keyword_property(ignore_above=256)),
                "object": nested_property(
                    title=keyword_property(ignore_above=256),
                    user=nested_property(
                        first_name=Property(type="keyword"),
                        last_name=Property(type="keyword"),
                        age=Property(type="integer"),
                    ),
                ),
            }
        ),
    }


@pytest.fixture()
def template() -> Template:
    return Template(
        template="te*",
        settings=IndexSettings(number_of_shards=1),
        mappings={
            "type1": TypeMapping(
                source=EnabledFlag(enabled=False),
                properties={
                    "host_name": Property(type="keyword"),
                    "created_at": Property(type="date", format="EEE MMM dd HH:mm:ss Z YYYY"),
                },
            )
        },
    )


@pytest.fixture()
def mappings_json() -> str:
    return MAPPINGS_JSON


@pytest.fixture()
def template_json() -> str:
    return TEMPLATE_JSON
