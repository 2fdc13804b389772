# SPDX-License-Identifier: MIT

from copy import deepcopy

from tableview.model.column import ColumnMetaData
from tableview.model.page import PageTemplate

INVOICES_COLUMNS: list[ColumnMetaData] = [
    {"key": "creationDate", "heading": "Creation Date", "type": "DateCell", "valueType": "date"},
    {"key": "settleDate", "heading": "Settle Date", "type": "DateCell", "valueType": "date"},
    {"key": "invoiceState", "heading": "State", "type": "TextCell", "valueType": "array"},
    {"key": "amtPaid", "heading": "Paid Amount", "type": "NumericCell", "valueType": "number"},
    {"key": "memo", "heading": "memo", "type": "TextCell", "valueType": "string"},
    {"key": "value", "heading": "Invoice Amount", "type": "NumericCell", "valueType": "number"},
    {"key": "isRebalance", "heading": "Rebalance", "type": "BooleanCell", "valueType": "boolean"},
    {"key": "isKeysend", "heading": "Keysend", "type": "BooleanCell", "valueType": "boolean"},
    {"key": "destinationPubKey", "heading": "Destination", "type": "TextCell", "valueType": "string"},
    {"key": "isAmp", "heading": "AMP", "type": "BooleanCell", "valueType": "boolean"},
    {"key": "fallbackAddr", "heading": "Fallback Address", "type": "TextCell", "valueType": "string"},
    {"key": "paymentAddr", "heading": "Payment Address", "type": "TextCell", "valueType": "string"},
    {"key": "paymentRequest", "heading": "Payment Request", "type": "TextCell", "valueType": "string"},
]


def get_invoices_template() -> PageTemplate:
    return {
        "page": "invoices",
        "default_title": "Draft View",
        "all_columns": deepcopy(INVOICES_COLUMNS),
        "default_columns": [
            "creationDate",
            "settleDate",
            "invoiceState",
            "amtPaid",
            "memo",
            "value",
            "isRebalance",
            "isKeysend",
        ],
        "sortable_columns": [column["key"] for column in INVOICES_COLUMNS],
        "filterable_columns": [column["key"] for column in INVOICES_COLUMNS],
        "filter_template": {
            "key": "value",
            "category": "number",
            "funcName": "gte",
            "parameter": 0,
        },
        "sort_template": {"key": "creationDate", "direction": "desc"},
        "default_sort": [{"key": "creationDate", "direction": "desc"}],
        "date_key": "creationDate",
    }
