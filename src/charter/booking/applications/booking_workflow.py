from datetime import timedelta

from charter.booking.domain import (
    BookingChannel,
    BookingDraft,
    DraftExpiredException,
    DraftId,
    DraftNotFoundException,
    SessionStore,
    StepValidator,
    WorkflowStep,
)
from charter.fleet.domain import Asset, AssetId, AssetNotFoundException, AssetRepository
from charter.pricing.domain import PricingEngine
from charter.shared.domain import InvalidInputException, InvalidTransitionException
from charter.shared.utils import Clock, get_logger

logger = get_logger("booking-workflow")

DEFAULT_DRAFT_TIMEOUT = timedelta(minutes=30)


class BookingWorkflow:
    """予約ワークフロー（状態機械）ユースケース

    Details -> DateTime -> Extras -> Payment -> Confirmation

    - 進めるのは次のステップのみ（検証あり）、戻れるのは直前のステップのみ（検証なし）
    - Payment からの前進はチェックアウト経由のみ
    - 状態が変わるたびにスナップショットをセッションストアへ保存する
    """

    def __init__(
        self,
        asset_repository: AssetRepository,
        validator: StepValidator,
        pricing_engine: PricingEngine,
        session_store: SessionStore,
        clock: Clock,
        draft_timeout: timedelta = DEFAULT_DRAFT_TIMEOUT,
    ) -> None:
        self._asset_repository = asset_repository
        self._validator = validator
        self._pricing_engine = pricing_engine
        self._session_store = session_store
        self._clock = clock
        self._draft_timeout = draft_timeout

    def start(
        self, asset_id: AssetId, channel: BookingChannel = BookingChannel.CUSTOMER
    ) -> BookingDraft:
        """新しいドラフトを Details ステップで開始する"""
        asset = self._require_asset(asset_id)
        draft = BookingDraft(
            id=DraftId.generate(),
            asset_id=asset.id,
            category=asset.category,
            channel=channel,
            updated_at=self._clock(),
        )
        self._save(draft)
        logger.info(
            "Draft started",
            extra={"draft_id": str(draft.id), "asset_id": str(asset_id), "channel": channel.value},
        )
        return draft

    def resume(self, draft_id: DraftId) -> BookingDraft:
        """保存済みのドラフトを読み込む（放置されたドラフトは破棄する）"""
        snapshot = self._session_store.load(draft_id)
        if snapshot is None:
            raise DraftNotFoundException(f"Draft not found: {draft_id}")
        draft = BookingDraft.from_snapshot(snapshot)
        if self._clock() - draft.updated_at > self._draft_timeout:
            self._session_store.discard(draft_id)
            logger.info("Draft expired", extra={"draft_id": str(draft_id)})
            raise DraftExpiredException(f"Draft expired: {draft_id}")
        return draft

    def transition_to(self, draft: BookingDraft, step: WorkflowStep) -> BookingDraft:
        current = draft.step
        if current.is_terminal:
            raise InvalidTransitionException("Booking is already confirmed")

        if step == current.previous:
            self._go_back(draft, step)
        elif step == current.next:
            if current == WorkflowStep.PAYMENT:
                raise InvalidTransitionException(
                    "Payment step can only be completed through checkout"
                )
            self._go_forward(draft, step)
        else:
            raise InvalidTransitionException(
                f"Cannot move from {current.value} to {step.value}"
            )

        logger.info(
            "Draft moved",
            extra={"draft_id": str(draft.id), "from": current.value, "to": step.value},
        )
        return draft

    def complete(self, draft: BookingDraft) -> None:
        """チェックアウト成功後に Confirmation へ進める"""
        if draft.step != WorkflowStep.PAYMENT:
            raise InvalidTransitionException(
                f"Cannot confirm a draft on the {draft.step.value} step"
            )
        draft.move_to(WorkflowStep.CONFIRMATION, self._clock())
        self._save(draft)

    def reopen_datetime(self, draft: BookingDraft) -> None:
        """枠が埋まった場合に DateTime へ強制的に戻す"""
        if draft.step.is_terminal:
            raise InvalidTransitionException("Booking is already confirmed")
        draft.clear_payment_attempt()
        draft.clear_price()
        draft.move_to(WorkflowStep.DATETIME, self._clock())
        self._save(draft)

    def save(self, draft: BookingDraft) -> None:
        """ステップを変えずに入力内容を保存する"""
        draft.touch(self._clock())
        self._save(draft)

    def _go_forward(self, draft: BookingDraft, step: WorkflowStep) -> None:
        asset = self._require_asset(draft.asset_id)
        if draft.step == WorkflowStep.DETAILS:
            errors = self._validator.validate_details(draft)
        elif draft.step == WorkflowStep.DATETIME:
            errors = self._validator.validate_datetime(draft, asset, self._clock().date())
        else:
            errors = self._validator.validate_extras(draft, asset)
        if errors:
            raise InvalidInputException(
                f"Invalid {draft.step.value} step input", errors
            )

        if step in (WorkflowStep.EXTRAS, WorkflowStep.PAYMENT):
            draft.attach_price(self._price_for(draft))

        draft.move_to(step, self._clock())
        self._save(draft)

    def _go_back(self, draft: BookingDraft, step: WorkflowStep) -> None:
        if draft.step == WorkflowStep.EXTRAS:
            draft.clear_price()
        elif draft.step == WorkflowStep.PAYMENT:
            draft.clear_payment_attempt()
        draft.move_to(step, self._clock())
        self._save(draft)

    def _price_for(self, draft: BookingDraft):
        return self._pricing_engine.compute_price(
            category=draft.category,
            day=draft.day,
            duration_hours=draft.duration_hours,
            guest_count=draft.guest_count,
            addon_ids=draft.addon_ids,
        )

    def _require_asset(self, asset_id: AssetId) -> Asset:
        asset = self._asset_repository.find_by_id(asset_id)
        if asset is None or not asset.is_active:
            raise AssetNotFoundException(f"Asset not found: {asset_id}")
        return asset

    def _save(self, draft: BookingDraft) -> None:
        self._session_store.save(
            draft.id, draft.to_snapshot(), draft.updated_at + self._draft_timeout
        )
