"""NACHA record layouts (94-character records, blocking factor 10)."""

from enum import Enum

from payment_rails.ach.fields import RECORD_LENGTH, ConstantField, NumericField, RecordLayout, TextField

BLOCKING_FACTOR = 10
FILLER = "9" * RECORD_LENGTH


class RecordType(str, Enum):
    FILE_HEADER = "1"
    BATCH_HEADER = "5"
    ENTRY_DETAIL = "6"
    ADDENDA = "7"
    BATCH_CONTROL = "8"
    FILE_CONTROL = "9"


FILE_HEADER = RecordLayout(RecordType.FILE_HEADER.value, [
    ConstantField("record_type", 1, "1"),
    ConstantField("priority_code", 2, "01"),
    TextField("immediate_destination", 10),
    TextField("immediate_origin", 10),
    NumericField("file_creation_date", 6),
    NumericField("file_creation_time", 4),
    TextField("file_id_modifier", 1),
    ConstantField("record_size", 3, "094"),
    ConstantField("blocking_factor", 2, "10"),
    ConstantField("format_code", 1, "1"),
    TextField("immediate_destination_name", 23),
    TextField("immediate_origin_name", 23),
    TextField("reference_code", 8),
])

BATCH_HEADER = RecordLayout(RecordType.BATCH_HEADER.value, [
    ConstantField("record_type", 1, "5"),
    NumericField("service_class_code", 3),
    TextField("company_name", 16),
    TextField("company_discretionary_data", 20),
    TextField("company_identification", 10),
    TextField("standard_entry_class", 3),
    TextField("company_entry_description", 10),
    TextField("company_descriptive_date", 6),
    NumericField("effective_entry_date", 6),
    TextField("settlement_date", 3),  # assigned by the ACH operator
    ConstantField("originator_status_code", 1, "1"),
    NumericField("originating_dfi", 8),
    NumericField("batch_number", 7),
])

ENTRY_DETAIL = RecordLayout(RecordType.ENTRY_DETAIL.value, [
    ConstantField("record_type", 1, "6"),
    NumericField("transaction_code", 2),
    NumericField("receiving_dfi", 8),
    NumericField("check_digit", 1),
    TextField("dfi_account_number", 17),
    NumericField("amount", 10),
    TextField("individual_id", 15),
    TextField("individual_name", 22),
    TextField("discretionary_data", 2),
    NumericField("addenda_indicator", 1),
    NumericField("trace_number", 15),
])

ADDENDA = RecordLayout(RecordType.ADDENDA.value, [
    ConstantField("record_type", 1, "7"),
    ConstantField("addenda_type", 2, "05"),
    TextField("payment_related_information", 80),
    NumericField("addenda_sequence_number", 4),
    NumericField("entry_detail_sequence_number", 7),
])

BATCH_CONTROL = RecordLayout(RecordType.BATCH_CONTROL.value, [
    ConstantField("record_type", 1, "8"),
    NumericField("service_class_code", 3),
    NumericField("entry_addenda_count", 6),
    NumericField("entry_hash", 10),
    NumericField("total_debit_amount", 12),
    NumericField("total_credit_amount", 12),
    TextField("company_identification", 10),
    TextField("message_authentication_code", 19),
    ConstantField("reserved", 6, ""),
    NumericField("originating_dfi", 8),
    NumericField("batch_number", 7),
])

FILE_CONTROL = RecordLayout(RecordType.FILE_CONTROL.value, [
    ConstantField("record_type", 1, "9"),
    NumericField("batch_count", 6),
    NumericField("block_count", 6),
    NumericField("entry_addenda_count", 8),
    NumericField("entry_hash", 10),
    NumericField("total_debit_amount", 12),
    NumericField("total_credit_amount", 12),
    ConstantField("reserved", 39, ""),
])

LAYOUTS = {
    layout.record_type: layout
    for layout in (FILE_HEADER, BATCH_HEADER, ENTRY_DETAIL, ADDENDA, BATCH_CONTROL, FILE_CONTROL)
}
