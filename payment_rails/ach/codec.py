"""
NACHA ACH file encoder and decoder.

File structure (every record 94 characters, one per line):

    1  file header
    5  batch header          ┐
    6  entry detail          │ repeated per batch,
    7  addenda (optional)    │ 6/7 repeated per entry
    8  batch control         ┘
    9  file control
    9999...  filler lines up to a multiple of 10 records

Known limitation of decode(): a batch header only carries the first 8
digits of the originating routing number. The decoder does not guess the
check digit; every decoded batch takes the file header's immediate origin
as its originating routing code. Encoding a decoded file therefore
reproduces the batch ODFI field only when it matched the file origin.
"""

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Iterable, Optional, Union

from payment_rails.ach.fields import RECORD_LENGTH
from payment_rails.ach.records import (
    ADDENDA,
    BATCH_CONTROL,
    BATCH_HEADER,
    BLOCKING_FACTOR,
    ENTRY_DETAIL,
    FILE_CONTROL,
    FILE_HEADER,
    FILLER,
    LAYOUTS,
    RecordType,
)
from payment_rails.errors import AchParseError, InvalidRoutingCodeError
from payment_rails.models.enums import SecCode, TransactionCode
from payment_rails.models.identifiers import RoutingCode
from payment_rails.models.transfer import TransferBatch, TransferEntry, TransferFile
from payment_rails.models.transfer import compute_entry_hash as _compute_entry_hash

logger = logging.getLogger("payment_rails.ach")

DATE_FORMAT = "%y%m%d"
TIME_FORMAT = "%H%M"


def _split_lines(content: str) -> list[str]:
    return [line.rstrip("\r") for line in content.split("\n") if line.rstrip("\r")]


class AchCodec:
    """Encodes TransferFile values to NACHA text and back."""

    # ─── Encoding ───────────────────────────────────────────────────────

    def encode(self, file: TransferFile) -> str:
        lines = [self._file_header(file)]

        for index, batch in enumerate(file.batches):
            batch_number = batch.batch_number if batch.batch_number > 0 else index + 1
            lines.extend(self._batch_lines(batch, batch_number))

        lines.append(FILE_CONTROL.render({
            "batch_count": file.batch_count,
            "block_count": file.block_count,
            "entry_addenda_count": file.entry_count + file.addenda_count,
            "entry_hash": file.entry_hash,
            "total_debit_amount": file.total_debits,
            "total_credit_amount": file.total_credits,
        }))

        remainder = len(lines) % BLOCKING_FACTOR
        if remainder:
            lines.extend([FILLER] * (BLOCKING_FACTOR - remainder))

        logger.info(
            "Encoded ACH file: %d batch(es), %d entries, %d records (%d blocks)",
            file.batch_count,
            file.entry_count,
            len(lines),
            file.block_count,
        )
        return "\n".join(lines)

    def _file_header(self, file: TransferFile) -> str:
        return FILE_HEADER.render({
            "immediate_destination": " " + file.destination_routing.value,
            "immediate_origin": " " + file.origin_routing.value,
            "file_creation_date": file.created_at.strftime(DATE_FORMAT),
            "file_creation_time": file.created_at.strftime(TIME_FORMAT),
            "file_id_modifier": file.file_id_modifier,
            "immediate_destination_name": file.destination_name,
            "immediate_origin_name": file.origin_name,
            "reference_code": file.reference_code,
        })

    def _batch_lines(self, batch: TransferBatch, batch_number: int) -> list[str]:
        odfi = batch.originating_routing.prefix
        service_class = batch.service_class_code.value

        lines = [BATCH_HEADER.render({
            "service_class_code": service_class,
            "company_name": batch.originator_name,
            "company_discretionary_data": batch.discretionary_data,
            "company_identification": batch.originator_id,
            "standard_entry_class": SecCode(batch.sec_code).value,
            "company_entry_description": batch.entry_description,
            "company_descriptive_date": batch.descriptive_date.strftime(DATE_FORMAT) if batch.descriptive_date else "",
            "effective_entry_date": batch.effective_date.strftime(DATE_FORMAT),
            "settlement_date": "",
            "originating_dfi": odfi,
            "batch_number": batch_number,
        })]

        for sequence, entry in enumerate(batch.entries, start=1):
            trace_number = entry.trace_number or odfi + str(sequence).zfill(7)
            lines.append(ENTRY_DETAIL.render({
                "transaction_code": entry.transaction_code.value,
                "receiving_dfi": entry.routing_code.prefix,
                "check_digit": entry.routing_code.check_digit,
                "dfi_account_number": entry.account_number,
                "amount": entry.amount,
                "individual_id": entry.receiver_id,
                "individual_name": entry.receiver_name,
                "discretionary_data": entry.discretionary_data,
                "addenda_indicator": entry.addenda_indicator,
                "trace_number": trace_number,
            }))

            if entry.has_addenda:
                lines.append(ADDENDA.render({
                    "payment_related_information": entry.addenda,
                    "addenda_sequence_number": 1,
                    "entry_detail_sequence_number": sequence,
                }))

        lines.append(BATCH_CONTROL.render({
            "service_class_code": service_class,
            "entry_addenda_count": batch.entry_count + batch.addenda_count,
            "entry_hash": batch.entry_hash,
            "total_debit_amount": batch.total_debits,
            "total_credit_amount": batch.total_credits,
            "company_identification": batch.originator_id,
            "message_authentication_code": "",
            "originating_dfi": odfi,
            "batch_number": batch_number,
        }))
        return lines

    # ─── Decoding ───────────────────────────────────────────────────────

    def decode(self, content: str) -> TransferFile:
        """
        Parse NACHA text into a TransferFile.

        Raises:
            AchParseError: Content is empty, starts with anything but a file
                header, contains an unknown record type or a malformed
                date, routing number or entry, or has no file control.
        """
        lines = [line for line in _split_lines(content or "") if line != FILLER]
        if not lines:
            raise AchParseError("NACHA content is empty.")

        if lines[0][0] != RecordType.FILE_HEADER.value:
            raise AchParseError("Missing file header record.", line_number=1)

        header = FILE_HEADER.parse(lines[0])
        origin = self._routing(header["immediate_origin"], "immediate origin", 1)
        destination = self._routing(header["immediate_destination"], "immediate destination", 1)
        created_at = self._timestamp(header["file_creation_date"] + header["file_creation_time"], 1)

        batches: list[TransferBatch] = []
        current: Optional[TransferBatch] = None
        terminated = False

        for number, line in enumerate(lines[1:], start=2):
            record_type = line[0]

            if record_type == RecordType.BATCH_HEADER.value:
                if current is not None:
                    # Batch never closed by a control record
                    batches.append(current)
                current = self._batch(BATCH_HEADER.parse(line), origin, number)

            elif record_type == RecordType.ENTRY_DETAIL.value:
                if current is None:
                    logger.debug("Ignoring entry detail outside a batch at record %d", number)
                    continue
                current = current.with_entry(self._entry(ENTRY_DETAIL.parse(line), number))

            elif record_type == RecordType.ADDENDA.value:
                if current is None or not current.entries:
                    logger.debug("Ignoring addenda without an entry at record %d", number)
                    continue
                text = ADDENDA.parse(line)["payment_related_information"]
                last = current.entries[-1]
                current = replace(current, entries=current.entries[:-1] + (last.with_addenda(text),))

            elif record_type == RecordType.BATCH_CONTROL.value:
                if current is not None:
                    batches.append(current)
                    current = None

            elif record_type == RecordType.FILE_CONTROL.value:
                terminated = True
                break

            else:
                raise AchParseError(f"Unknown record type '{record_type}'", line_number=number)

        if not terminated:
            raise AchParseError("Missing file control record.")

        if current is not None:
            batches.append(current)

        modifier = header["file_id_modifier"] or "A"
        try:
            file = TransferFile(
                origin_routing=origin,
                destination_routing=destination,
                created_at=created_at,
                batches=tuple(batches),
                file_id_modifier=modifier,
                origin_name=header["immediate_origin_name"],
                destination_name=header["immediate_destination_name"],
                reference_code=header["reference_code"],
            )
        except ValueError as exc:
            raise AchParseError(str(exc), line_number=1) from exc

        logger.info("Decoded ACH file: %d batch(es), %d entries", file.batch_count, file.entry_count)
        return file

    def _batch(self, fields: dict, origin: RoutingCode, number: int) -> TransferBatch:
        try:
            sec_code = SecCode(fields["standard_entry_class"])
        except ValueError as exc:
            raise AchParseError(f"Unknown SEC code '{fields['standard_entry_class']}'", line_number=number) from exc

        descriptive = fields["company_descriptive_date"]
        return TransferBatch(
            originator_name=fields["company_name"],
            originator_id=fields["company_identification"],
            entry_description=fields["company_entry_description"],
            effective_date=self._date(fields["effective_entry_date"], number),
            sec_code=sec_code,
            # ODFI field holds 8 digits only; see module docstring
            originating_routing=origin,
            discretionary_data=fields["company_discretionary_data"],
            descriptive_date=self._optional_date(descriptive),
            batch_number=int(fields["batch_number"]) if fields["batch_number"].isdigit() else 0,
        )

    def _entry(self, fields: dict, number: int) -> TransferEntry:
        try:
            code = TransactionCode(fields["transaction_code"])
        except ValueError as exc:
            raise AchParseError(
                f"Unknown transaction code '{fields['transaction_code']}'", line_number=number
            ) from exc

        routing = self._routing(fields["receiving_dfi"] + fields["check_digit"], "receiving DFI", number)

        amount_raw = fields["amount"]
        if not amount_raw.isdigit():
            raise AchParseError("Entry amount is not numeric", line_number=number)

        trace_number = fields["trace_number"].strip()
        try:
            return TransferEntry(
                routing_code=routing,
                account_number=fields["dfi_account_number"],
                amount=int(amount_raw),
                receiver_name=fields["individual_name"],
                account_type=code.account_type,
                is_debit=code.is_debit,
                receiver_id=fields["individual_id"],
                trace_number=trace_number or None,
                discretionary_data=fields["discretionary_data"],
                is_prenote=code.is_prenote,
            )
        except (TypeError, ValueError) as exc:
            raise AchParseError(f"Invalid entry detail: {exc}", line_number=number) from exc

    @staticmethod
    def _routing(raw: str, label: str, number: int) -> RoutingCode:
        try:
            return RoutingCode.of(raw)
        except InvalidRoutingCodeError as exc:
            raise AchParseError(f"Invalid {label} routing number: {exc.reason}", line_number=number) from exc

    @staticmethod
    def _timestamp(raw: str, number: int) -> datetime:
        try:
            return datetime.strptime(raw, DATE_FORMAT + TIME_FORMAT)
        except ValueError as exc:
            raise AchParseError(f"Invalid file creation date/time '{raw}'", line_number=number) from exc

    @staticmethod
    def _date(raw: str, number: int) -> date:
        try:
            return datetime.strptime(raw, DATE_FORMAT).date()
        except ValueError as exc:
            raise AchParseError(f"Invalid effective entry date '{raw}'", line_number=number) from exc

    @staticmethod
    def _optional_date(raw: str) -> Optional[date]:
        # Free-form descriptive dates ("SEP 25") are allowed and dropped
        try:
            return datetime.strptime(raw, DATE_FORMAT).date() if raw else None
        except ValueError:
            return None

    # ─── Validation ─────────────────────────────────────────────────────

    def validate_format(self, content: str) -> list[str]:
        """Structural checks only; never raises and never decodes."""
        lines = _split_lines(content or "")
        if not lines:
            return ["NACHA content is empty."]

        errors = []
        has_file_control = False

        for number, line in enumerate(lines, start=1):
            if len(line) != RECORD_LENGTH:
                errors.append(f"Record {number} is not {RECORD_LENGTH} characters.")

            record_type = line[0]
            if record_type not in LAYOUTS:
                errors.append(f"Record {number} has invalid record type: {record_type}")

            if record_type == RecordType.FILE_CONTROL.value and line != FILLER:
                has_file_control = True

        if not has_file_control:
            errors.append("Missing file control record.")

        return errors

    @staticmethod
    def compute_entry_hash(routing_codes: Iterable[Union[str, RoutingCode]]) -> str:
        return _compute_entry_hash(str(code) for code in routing_codes)
