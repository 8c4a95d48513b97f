from datetime import date, timedelta

from charter.availability.domain import SlotAvailabilityResolver
from charter.booking.domain.entity import BookingDraft
from charter.booking.domain.enum import BookingChannel
from charter.fleet.domain import Asset
from charter.pricing.domain import PricingEngine

MAX_ADVANCE_DAYS = 90


class StepValidator:
    """各ステップを先に進める前の入力チェック

    戻り値はフィールド名 -> メッセージ（空なら問題なし）。
    """

    def __init__(
        self,
        resolver: SlotAvailabilityResolver,
        pricing_engine: PricingEngine,
        max_advance_days: int = MAX_ADVANCE_DAYS,
    ) -> None:
        self._resolver = resolver
        self._pricing_engine = pricing_engine
        self._max_advance_days = max_advance_days

    def validate_details(self, draft: BookingDraft) -> dict[str, str]:
        return draft.contact.validation_errors()

    def validate_datetime(
        self, draft: BookingDraft, asset: Asset, today: date
    ) -> dict[str, str]:
        errors: dict[str, str] = {}
        rules = self._pricing_engine.rule_set_for(draft.category)

        day_is_valid = False
        if draft.day is None:
            errors["date"] = "Please select a date"
        else:
            earliest = today if draft.channel == BookingChannel.ADMIN else today + timedelta(days=1)
            latest = today + timedelta(days=self._max_advance_days)
            if draft.day < earliest:
                errors["date"] = (
                    "Date cannot be in the past"
                    if draft.channel == BookingChannel.ADMIN
                    else "Bookings must be made at least 1 day in advance"
                )
            elif draft.day > latest:
                errors["date"] = (
                    f"Bookings can be made up to {self._max_advance_days} days in advance"
                )
            elif not any(
                slot.is_available
                for slot in self._resolver.get_available_slots(draft.asset_id, draft.day)
            ):
                errors["date"] = "No time slots available for the selected date"
            else:
                day_is_valid = True

        if draft.duration_hours is None:
            errors["duration_hours"] = "Please select a duration"
        elif draft.duration_hours not in rules.allowed_durations:
            allowed = ", ".join(str(hours) for hours in rules.allowed_durations)
            errors["duration_hours"] = f"Duration must be one of: {allowed} hours"

        guest_error = self.guest_count_error(draft, asset)
        if guest_error:
            errors["guest_count"] = guest_error

        if draft.start_hour is None:
            errors["start_hour"] = "Please select a time slot"
        elif day_is_valid and "duration_hours" not in errors:
            if not self._resolver.is_window_available(
                draft.asset_id, draft.day, draft.start_hour, draft.duration_hours
            ):
                errors["start_hour"] = "Selected time slot is no longer available"

        return errors

    def validate_extras(self, draft: BookingDraft, asset: Asset) -> dict[str, str]:
        errors: dict[str, str] = {}
        rules = self._pricing_engine.rule_set_for(draft.category)
        unknown = [addon_id for addon_id in draft.addon_ids if rules.find_addon(addon_id) is None]
        if unknown:
            errors["addon_ids"] = f"Unknown add-ons: {', '.join(unknown)}"
        guest_error = self.guest_count_error(draft, asset)
        if guest_error:
            errors["guest_count"] = guest_error
        return errors

    def guest_count_error(self, draft: BookingDraft, asset: Asset) -> str | None:
        """ゲスト数の上限はルールセットと機体定員の小さい方"""
        rules = self._pricing_engine.rule_set_for(draft.category)
        ceiling = min(rules.max_guests, asset.max_capacity)
        if draft.guest_count < 1:
            return "At least 1 guest is required"
        if draft.guest_count > ceiling:
            return f"Maximum {ceiling} guests allowed"
        return None
