import pytest

from chain_config import CHAIN_CONFIGS, get_chain_config
from errors import ConfigurationError


def test_lookup_by_wormhole_chain_id():
    config = get_chain_config(10003)
    assert config.chain_id == 10003
    assert config.token_router_address == "0xe0418C44F06B0b0D7D1706E01706316DBB0B210E"


def test_every_config_is_keyed_by_its_own_chain_id():
    for chain_id, config in CHAIN_CONFIGS.items():
        assert config.chain_id == chain_id


def test_unknown_chain_raises():
    with pytest.raises(ConfigurationError):
        get_chain_config(1)
