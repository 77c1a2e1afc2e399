from envparams import catalog
from envparams.params import ConfigParam


def test_printed_params_order():
    names = [p.name for p in catalog.PRINTED_PARAMS]
    assert names[0] == "EPICS_TS_MIN_WEST"
    assert names[-1] == "EPICS_CA_SERVER_PORT"
    assert len(names) == 13
    assert len(set(names)) == 13


def test_channel_access_ports():
    assert catalog.EPICS_CA_SERVER_PORT.default == "5064"
    assert catalog.EPICS_CA_REPEATER_PORT.default == "5065"


def test_params_without_default():
    assert not catalog.EPICS_CA_ADDR_LIST.has_default
    assert not catalog.EPICS_CMD_PROTO_PORT.has_default


def test_site_defaults_reference_catalog_params():
    for param, value in catalog.SITE_DEFAULTS:
        assert param in catalog.PRINTED_PARAMS
        assert value


def test_find_known_and_unknown():
    assert catalog.find("EPICS_AR_PORT") is catalog.EPICS_AR_PORT
    assert catalog.find("NOT_A_PARAM") is None


def test_find_returns_config_param():
    assert isinstance(catalog.find("EPICS_CA_CONN_TMO"), ConfigParam)
