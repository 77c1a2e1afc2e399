"""EPICS environment parameters and their compiled-in defaults.

``SITE_DEFAULTS`` holds the per-site values applied by
``ConfigParamAccessor.apply_site_defaults``; edit them for a given site.
"""

from __future__ import annotations

from envparams.params import ConfigParam

EPICS_TS_MIN_WEST = ConfigParam("EPICS_TS_MIN_WEST", "360")
EPICS_CMD_PROTO_PORT = ConfigParam("EPICS_CMD_PROTO_PORT")
EPICS_AR_PORT = ConfigParam("EPICS_AR_PORT", "7002")
EPICS_IOC_LOG_INET = ConfigParam("EPICS_IOC_LOG_INET")
EPICS_IOC_LOG_PORT = ConfigParam("EPICS_IOC_LOG_PORT", "7004")
EPICS_IOC_LOG_FILE_LIMIT = ConfigParam("EPICS_IOC_LOG_FILE_LIMIT", "1000000")
EPICS_IOC_LOG_FILE_NAME = ConfigParam("EPICS_IOC_LOG_FILE_NAME")
EPICS_CA_ADDR_LIST = ConfigParam("EPICS_CA_ADDR_LIST")
EPICS_CA_CONN_TMO = ConfigParam("EPICS_CA_CONN_TMO", "30.0")
EPICS_CA_BEACON_PERIOD = ConfigParam("EPICS_CA_BEACON_PERIOD", "15.0")
EPICS_CA_AUTO_ADDR_LIST = ConfigParam("EPICS_CA_AUTO_ADDR_LIST", "YES")
EPICS_CA_REPEATER_PORT = ConfigParam("EPICS_CA_REPEATER_PORT", "5065")
EPICS_CA_SERVER_PORT = ConfigParam("EPICS_CA_SERVER_PORT", "5064")

# Print order of ``print_params``
PRINTED_PARAMS: tuple[ConfigParam, ...] = (
    EPICS_TS_MIN_WEST,
    EPICS_CMD_PROTO_PORT,
    EPICS_AR_PORT,
    EPICS_IOC_LOG_INET,
    EPICS_IOC_LOG_PORT,
    EPICS_IOC_LOG_FILE_LIMIT,
    EPICS_IOC_LOG_FILE_NAME,
    EPICS_CA_ADDR_LIST,
    EPICS_CA_CONN_TMO,
    EPICS_CA_BEACON_PERIOD,
    EPICS_CA_AUTO_ADDR_LIST,
    EPICS_CA_REPEATER_PORT,
    EPICS_CA_SERVER_PORT,
)

SITE_DEFAULTS: tuple[tuple[ConfigParam, str], ...] = (
    (EPICS_TS_MIN_WEST, "360"),
    (EPICS_AR_PORT, "7002"),
    (EPICS_IOC_LOG_INET, "127.0.0.1"),
    (EPICS_IOC_LOG_PORT, "7004"),
    (EPICS_IOC_LOG_FILE_LIMIT, "1000000"),
    (EPICS_IOC_LOG_FILE_NAME, "iocLog.txt"),
)

_BY_NAME = {param.name: param for param in PRINTED_PARAMS}


def find(name: str) -> ConfigParam | None:
    """Return the catalog parameter called *name*, if there is one."""
    return _BY_NAME.get(name)
