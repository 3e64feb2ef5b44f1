"""
Pre-submission validation of transactions against a payment rail.

Checks run in a fixed order and every violation is collected, so a caller
sees the whole picture in one pass:

  1. Beneficiary name present and within the field length
  2. Amount (currency supported, within rail limits)
  3. Beneficiary bank account, when supplied
  4. Routing number, when supplied
  5. Sanctions screening (static country blocklist)
  6. Rail availability
  7. Rail-specific rules (SEC code for ACH, payee address for checks, ...)

The validator is pure. Apart from debug logging it has no side effects,
and nothing it logs contains an unmasked routing number.
"""

import logging
from typing import Optional

from payment_rails.config import Settings, settings as default_settings
from payment_rails.engine.checksums import is_valid_iban, is_valid_swift_code, validate_routing_code
from payment_rails.errors import ValidationFailedError, WireValidationError
from payment_rails.models.capabilities import RailCapabilities
from payment_rails.models.enums import RailType, WireType
from payment_rails.models.money import Money
from payment_rails.models.requests import BankAccount, TransferRequest, WireInstruction
from payment_rails.rails.base import PaymentRail

logger = logging.getLogger("payment_rails.validator")

ACCOUNT_NUMBER_MIN_LENGTH = 4
ACCOUNT_NUMBER_MAX_LENGTH = 17


def validate_amount(amount: Money, capabilities: RailCapabilities, rail_type: Optional[RailType] = None) -> list[str]:
    """Currency support and min/max limits of a rail."""
    errors = []
    label = rail_type.value if rail_type else "this"

    if not capabilities.supports_currency(amount.currency):
        errors.append(f"Currency {amount.currency} is not supported by {label} rail.")

    if amount.amount < capabilities.minimum_amount:
        errors.append(
            "Amount is below minimum of $%.2f for %s rail." % (capabilities.minimum_amount / 100, label)
        )

    if capabilities.maximum_amount is not None and amount.amount > capabilities.maximum_amount:
        errors.append(
            "Amount exceeds maximum of $%.2f for %s rail." % (capabilities.maximum_amount / 100, label)
        )

    return errors


class RailValidator:
    """Validates transfer requests, bank accounts and wire instructions."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or default_settings

    # ─── Format checks ──────────────────────────────────────────────────

    @staticmethod
    def validate_routing_code(code: Optional[str]) -> list[str]:
        return validate_routing_code(code)

    @staticmethod
    def is_valid_swift_code(code: Optional[str]) -> bool:
        return is_valid_swift_code(code)

    @staticmethod
    def is_valid_iban(code: Optional[str]) -> bool:
        return is_valid_iban(code)

    def validate_amount(
        self,
        amount: Money,
        capabilities: RailCapabilities,
        rail_type: Optional[RailType] = None,
    ) -> list[str]:
        return validate_amount(amount, capabilities, rail_type)

    # ─── Transaction validation ─────────────────────────────────────────

    def validate_transaction(self, request: TransferRequest, rail: PaymentRail) -> None:
        """
        Validate a transfer request for a rail.

        Raises:
            ValidationFailedError: Carries every violation found.
        """
        errors = self.collect_errors(request, rail)
        if errors:
            logger.info(
                "Transaction rejected for %s rail: %d error(s)",
                rail.rail_type.value,
                len(errors),
            )
            raise ValidationFailedError(errors, rail_type=rail.rail_type.value)

    def is_valid(self, request: TransferRequest, rail: PaymentRail) -> bool:
        return not self.collect_errors(request, rail)

    def collect_errors(self, request: TransferRequest, rail: PaymentRail) -> list[str]:
        rail_type = rail.rail_type
        max_name = self._settings.beneficiary_name_max_length
        errors: list[str] = []

        if not request.beneficiary_name:
            errors.append("Beneficiary name is required.")
        elif len(request.beneficiary_name) > max_name:
            errors.append(f"Beneficiary name exceeds maximum length ({max_name} characters).")

        errors.extend(self.validate_amount(request.amount, rail.capabilities, rail_type))

        if request.beneficiary_account is not None:
            errors.extend(self.validate_bank_account(request.beneficiary_account, rail_type))

        if request.routing_code is not None:
            errors.extend(validate_routing_code(request.routing_code))

        errors.extend(self.screen_sanctions(request.beneficiary_country))

        if not rail.is_available():
            errors.append(f"{rail_type.value} rail is currently unavailable.")

        errors.extend(self._rail_rules(request, rail_type))

        logger.debug("Validated %s request: %d error(s)", rail_type.value, len(errors))
        return errors

    def validate_bank_account(self, account: BankAccount, rail_type: RailType) -> list[str]:
        errors = []
        account_number = account.account_number or ""

        if len(account_number) < ACCOUNT_NUMBER_MIN_LENGTH:
            errors.append("Account number is too short.")
        if len(account_number) > ACCOUNT_NUMBER_MAX_LENGTH:
            errors.append("Account number exceeds maximum length.")

        if rail_type == RailType.ACH:
            if account.routing_code is None:
                errors.append("Routing number is required for ACH transactions.")
            else:
                errors.extend(validate_routing_code(account.routing_code))

        elif rail_type == RailType.WIRE:
            # International wires may route by SWIFT instead
            if account.routing_code is None and account.swift_code is None:
                errors.append("Either routing number or SWIFT code is required for wire transfers.")
            if account.swift_code is not None and not is_valid_swift_code(account.swift_code):
                errors.append("Invalid SWIFT/BIC code format.")
            if account.iban is not None and not is_valid_iban(account.iban):
                errors.append("Invalid IBAN format.")

        return errors

    def screen_sanctions(self, country: Optional[str]) -> list[str]:
        """
        Static country blocklist check.

        Placeholder for a real sanctions screening service; it only knows the
        configured ``sanctioned_countries``.
        """
        if not country:
            return []
        code = country.strip().upper()
        if code in self._settings.sanctioned_countries:
            logger.warning("Sanctions screen blocked beneficiary country %s", code)
            return [f"Transactions to {code} are not permitted due to sanctions."]
        return []

    def _rail_rules(self, request: TransferRequest, rail_type: RailType) -> list[str]:
        metadata = request.metadata or {}
        errors = []

        if rail_type == RailType.ACH:
            domestic = self._settings.domestic_currency
            if request.amount.currency != domestic:
                errors.append(f"ACH transactions must be in {domestic}.")
            if not metadata.get("sec_code"):
                errors.append("SEC code is required for ACH transactions.")

        elif rail_type == RailType.WIRE:
            if request.is_international and not request.purpose_of_payment:
                errors.append("Purpose of payment is required for international wires.")
            if request.is_international and not request.beneficiary_address:
                errors.append("Beneficiary address is required for international wires.")

        elif rail_type == RailType.CHECK:
            max_memo = self._settings.check_memo_max_length
            if not request.beneficiary_address:
                errors.append("Payee address is required for check issuance.")
            if request.memo is not None and len(request.memo) > max_memo:
                errors.append(f"Check memo exceeds maximum length ({max_memo} characters).")

        elif rail_type == RailType.RTGS:
            minimum = self._settings.rtgs_minimum_cents
            if request.amount.amount < minimum:
                errors.append(f"RTGS is for high-value transactions only (minimum ${minimum // 100:,}).")

        elif rail_type == RailType.VIRTUAL_CARD:
            if not metadata.get("vendor_id"):
                errors.append("Vendor ID is required for virtual card issuance.")

        return errors

    # ─── Wire instructions ──────────────────────────────────────────────

    def validate_wire_instruction(self, instruction: WireInstruction) -> None:
        """
        Check a wire instruction is complete enough to transmit.

        Raises:
            WireValidationError: Carries every missing or invalid detail.
        """
        errors = [f"Missing required field: {name}" for name in instruction.missing_fields()]

        if instruction.wire_type == WireType.INTERNATIONAL:
            capabilities = RailCapabilities.for_international_wire()
            if not instruction.beneficiary_address:
                errors.append("Beneficiary address is required for international wires.")
            if not instruction.purpose_of_payment:
                errors.append("Purpose of payment is required for international wires.")
        else:
            capabilities = RailCapabilities.for_domestic_wire()

        if instruction.wire_type != WireType.BOOK_TRANSFER:
            errors.extend(validate_amount(instruction.amount, capabilities, RailType.WIRE))

        if errors:
            logger.info("Wire instruction rejected: %d error(s)", len(errors))
            raise WireValidationError(errors)
