# SPDX-License-Identifier: MIT

from copy import deepcopy

from tableview.model.column import ColumnMetaData
from tableview.model.page import PageTemplate

FORWARDS_COLUMNS: list[ColumnMetaData] = [
    {"heading": "Name", "type": "AliasCell", "key": "alias", "locked": True, "valueType": "string"},
    {"heading": "Revenue", "type": "BarCell", "key": "revenueOut", "valueType": "number"},
    {"heading": "Capacity", "type": "NumericCell", "key": "capacity", "valueType": "number"},
    {"heading": "Amount outbound", "type": "BarCell", "key": "amountOut", "valueType": "number"},
    {"heading": "Amount inbound", "type": "BarCell", "key": "amountIn", "valueType": "number"},
    {"heading": "Amount total", "type": "BarCell", "key": "amountTotal", "valueType": "number"},
    {"heading": "Turnover outbound", "type": "NumericCell", "key": "turnoverOut", "valueType": "number"},
    {"heading": "Turnover inbound", "type": "NumericCell", "key": "turnoverIn", "valueType": "number"},
    {"heading": "Turnover total", "type": "NumericCell", "key": "turnoverTotal", "valueType": "number"},
    {"heading": "Successful outbound", "type": "BarCell", "key": "countOut", "valueType": "number"},
    {"heading": "Successful inbound", "type": "BarCell", "key": "countIn", "valueType": "number"},
    {"heading": "Successful total", "type": "BarCell", "key": "countTotal", "valueType": "number"},
    {"heading": "Contributed revenue inbound", "type": "BarCell", "key": "revenueIn", "valueType": "number"},
    {"heading": "Contributed revenue total", "type": "BarCell", "key": "revenueTotal", "valueType": "number"},
    {"heading": "Public key", "type": "TextCell", "key": "pubKey", "valueType": "string"},
    {"heading": "Channel point", "type": "TextCell", "key": "channelPoint", "valueType": "string"},
    {"heading": "Channel short ID", "type": "TextCell", "key": "shortChannelId", "valueType": "string"},
    {"heading": "LND Channel short ID", "type": "TextCell", "key": "lndShortChannelId", "valueType": "string"},
    {"heading": "Open Channel", "type": "BooleanCell", "key": "open", "valueType": "boolean"},
    {"heading": "Date", "type": "DateCell", "key": "date", "valueType": "date"},
]


def get_forwards_template() -> PageTemplate:
    return {
        "page": "forwards",
        "default_title": "Untitled Table",
        "all_columns": deepcopy(FORWARDS_COLUMNS),
        "default_columns": [
            "alias",
            "revenueOut",
            "capacity",
            "amountOut",
            "amountIn",
            "turnoverTotal",
            "countTotal",
        ],
        "sortable_columns": [
            column["key"]
            for column in FORWARDS_COLUMNS
            if column["key"] not in ("channelPoint", "lndShortChannelId")
        ],
        "filterable_columns": [column["key"] for column in FORWARDS_COLUMNS],
        "filter_template": {
            "key": "revenueOut",
            "category": "number",
            "funcName": "gte",
            "parameter": 0,
        },
        "sort_template": {"key": "revenueOut", "direction": "desc"},
        "default_sort": [{"key": "revenueOut", "direction": "desc"}],
        "date_key": "date",
    }
