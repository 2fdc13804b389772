# SPDX-License-Identifier: MIT

from copy import deepcopy

from tableview.model.column import ColumnMetaData
from tableview.model.page import PageTemplate

CHANNELS_COLUMNS: list[ColumnMetaData] = [
    {"heading": "Peer Alias", "type": "AliasCell", "key": "peerAlias", "locked": True, "valueType": "string"},
    {"heading": "Active", "type": "BooleanCell", "key": "active", "valueType": "boolean", "locked": False},
    {"heading": "Balance", "type": "BalanceCell", "key": "balance", "valueType": "number"},
    {"heading": "Short Channel ID", "type": "LongTextCell", "key": "shortChannelId", "valueType": "string"},
    {"heading": "Remote Balance", "type": "NumericCell", "key": "remoteBalance", "valueType": "number"},
    {"heading": "Local Balance", "type": "NumericCell", "key": "localBalance", "valueType": "number"},
    {"heading": "Capacity", "type": "NumericCell", "key": "capacity", "valueType": "number"},
    {"heading": "Fee rate (PPM)", "type": "NumericDoubleCell", "key": "feeRateMilliMsat", "key2": "remoteFeeRateMilliMsat", "suffix": "ppm", "valueType": "number"},
    {"heading": "Base Fee Msat", "type": "NumericDoubleCell", "key": "feeBaseMsat", "key2": "remoteFeeBaseMsat", "suffix": "msat", "valueType": "number"},
    {"heading": "Minimum HTLC", "type": "NumericDoubleCell", "key": "minHtlcMsat", "key2": "remoteMinHtlcMsat", "suffix": "msat", "valueType": "number"},
    {"heading": "Maximum HTLC Amount", "type": "NumericDoubleCell", "key": "maxHtlcMsat", "key2": "remoteMaxHtlcMsat", "suffix": "sat", "valueType": "number"},
    {"heading": "Time Lock Delta", "type": "NumericCell", "key": "timeLockDelta", "valueType": "number"},
    {"heading": "LND Short Channel ID", "type": "LongTextCell", "key": "lndShortChannelId", "valueType": "string"},
    {"heading": "Funding Transaction", "type": "LongTextCell", "key": "fundingTransactionHash", "valueType": "string"},
    {"heading": "Unsettled Balance", "type": "NumericCell", "key": "unsettledBalance", "valueType": "number"},
    {"heading": "Satoshis Sent", "type": "NumericCell", "key": "totalSatoshisSent", "valueType": "number"},
    {"heading": "Satoshis Received", "type": "NumericCell", "key": "totalSatoshisReceived", "valueType": "number"},
    {"heading": "Pending Forwarding HTLCs count", "type": "NumericCell", "key": "pendingForwardingHTLCsCount", "valueType": "number"},
    {"heading": "Pending Forwarding HTLCs", "type": "NumericCell", "key": "pendingForwardingHTLCsAmount", "valueType": "number"},
    {"heading": "Pending Local HTLCs count", "type": "NumericCell", "key": "pendingLocalHTLCsCount", "valueType": "number"},
    {"heading": "Pending Local HTLCs", "type": "NumericCell", "key": "pendingLocalHTLCsAmount", "valueType": "number"},
    {"heading": "Total Pending HTLCs count", "type": "NumericCell", "key": "pendingTotalHTLCsCount", "valueType": "number"},
    {"heading": "Total Pending HTLCs", "type": "NumericCell", "key": "pendingTotalHTLCsAmount", "valueType": "number"},
    {"heading": "Commit Fee", "type": "NumericCell", "key": "commitFee", "valueType": "number"},
    {"heading": "Node Name", "type": "AliasCell", "key": "nodeName", "valueType": "string"},
    {"heading": "Mempool", "type": "LinkCell", "key": "mempoolSpace", "valueType": "link"},
    {"heading": "Amboss", "type": "LinkCell", "key": "ambossSpace", "valueType": "link"},
    {"heading": "1ML", "type": "LinkCell", "key": "oneMl", "valueType": "link"},
]


def get_channels_template() -> PageTemplate:
    return {
        "page": "channels",
        "default_title": "Draft View",
        "all_columns": deepcopy(CHANNELS_COLUMNS),
        "default_columns": [
            "peerAlias",
            "active",
            "balance",
            "feeRateMilliMsat",
            "feeBaseMsat",
            "minHtlcMsat",
            "maxHtlcMsat",
            "shortChannelId",
            "nodeName",
        ],
        "sortable_columns": [
            "active",
            "peerAlias",
            "shortChannelId",
            "feeRateMilliMsat",
            "remoteBalance",
            "localBalance",
            "capacity",
            "totalSatoshisSent",
            "totalSatoshisReceived",
            "unsettledBalance",
            "commitFee",
            "feeBaseMsat",
            "minHtlcMsat",
            "maxHtlcMsat",
            "nodeName",
        ],
        "filterable_columns": [
            column["key"]
            for column in CHANNELS_COLUMNS
            if column["valueType"] != "link"
        ],
        "filter_template": {
            "key": "capacity",
            "category": "number",
            "funcName": "gte",
            "parameter": 0,
        },
        "sort_template": {"key": "peerAlias", "direction": "asc"},
        "default_sort": [{"key": "peerAlias", "direction": "asc"}],
        "date_key": None,
    }
