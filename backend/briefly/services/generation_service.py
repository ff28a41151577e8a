"""Briefly Generation Service

Credit-gated brief generation.

Per request:
1. Authenticate (user id or bearer credentials)
2. Validate the intake (before any debit)
3. Debit the ledger atomically
4. Compose the brief, attach owner and timestamp, persist it
5. On any failure after step 3, refund exactly the debited amount, then raise

A debit therefore always ends in either a stored brief or a refund.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional, Union
import asyncio
import logging

from pydantic import ValidationError

from briefly.errors import BrieflyError, CompositionFailure, InvalidIntake, StoreError, Unauthorized
from briefly.models.brief import Brief
from briefly.models.credits import GENERATION_CREDIT_COST
from briefly.models.intake import ProjectIntake
from briefly.services.brief_composer import BriefComposer, utc_now
from briefly.services.brief_store import BriefStore
from briefly.services.credit_ledger import CreditLedger

logger = logging.getLogger(__name__)

IntakeInput = Union[ProjectIntake, Mapping[str, Any]]


@dataclass(frozen=True)
class GenerationResult:
    """Committed generation: stored brief and balance after the debit"""
    brief: Brief
    credits_remaining: int


def parse_intake(intake: Optional[IntakeInput]) -> ProjectIntake:
    """Validate raw form data into a ProjectIntake, or raise InvalidIntake."""
    if isinstance(intake, ProjectIntake):
        parsed = intake
    else:
        try:
            parsed = ProjectIntake.model_validate(intake or {})
        except ValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise InvalidIntake(f"Invalid intake: {', '.join(fields)}", fields=fields) from e

    missing = parsed.missing_required_fields()
    if missing:
        raise InvalidIntake(f"Missing required fields: {', '.join(missing)}", fields=missing)
    return parsed


class GenerationGateway:
    """Owns the debit/refund transaction boundary around brief composition."""

    def __init__(
        self,
        ledger: CreditLedger,
        store: BriefStore,
        composer: Optional[BriefComposer] = None,
        identity=None,
        credit_cost: int = GENERATION_CREDIT_COST,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.ledger = ledger
        self.store = store
        self.composer = composer or BriefComposer()
        self.identity = identity
        self.credit_cost = credit_cost
        self.clock = clock

    async def handle_request(
        self,
        authorization: Optional[str],
        intake: Optional[IntakeInput],
    ) -> GenerationResult:
        """Resolve bearer credentials through the identity collaborator, then generate."""
        if self.identity is None:
            raise Unauthorized("No identity provider configured")
        user_id = self.identity.resolve_user_id(authorization)
        return await self.generate_brief(user_id, intake)

    async def generate_brief(
        self,
        user_id: Optional[str],
        intake: Optional[IntakeInput],
    ) -> GenerationResult:
        """Generate and store a brief for user_id.

        Raises:
            Unauthorized: no user id (ledger untouched)
            InvalidIntake: missing required fields (ledger untouched)
            InsufficientCredit: balance too low (ledger untouched)
            CompositionFailure / StoreError: after refund of the debit
        """
        if not user_id:
            raise Unauthorized("Authentication required")

        project_intake = parse_intake(intake)

        logger.info(
            f"Brief generation attempt for user {user_id}: "
            f"{project_intake.client_name} - {project_intake.project_type}"
        )

        credits_remaining = await self.ledger.check_and_debit(
            user_id,
            self.credit_cost,
            reason=f"Brief generation: {project_intake.project_type}",
        )

        try:
            brief = self._compose(user_id, project_intake)
            await self._persist(brief)
        except asyncio.CancelledError:
            await self._rollback(user_id, "cancelled")
            raise
        except BrieflyError as e:
            await self._rollback(user_id, e.error_code)
            raise
        except Exception as e:
            await self._rollback(user_id, type(e).__name__)
            raise CompositionFailure("Brief generation failed. Please try again.") from e

        logger.info(
            f"Brief {brief.brief_id} generated for user {user_id}. "
            f"Credits remaining: {credits_remaining}"
        )
        return GenerationResult(brief=brief, credits_remaining=credits_remaining)

    def _compose(self, user_id: str, intake: ProjectIntake) -> Brief:
        brief = self.composer.compose(intake)
        return brief.model_copy(update={"user_id": user_id, "created_at": self.clock()})

    async def _persist(self, brief: Brief) -> None:
        try:
            await self.store.append(brief)
        except StoreError:
            raise
        except Exception as e:
            logger.error(f"Brief store rejected {brief.brief_id}: {e}")
            raise StoreError(f"Brief storage unavailable: {e}") from e

    async def _rollback(self, user_id: str, cause: str) -> None:
        logger.error(f"Brief generation failed for user {user_id} ({cause}); refunding {self.credit_cost} credit(s)")
        try:
            await self.ledger.refund(
                user_id,
                self.credit_cost,
                reason=f"Refund for failed generation ({cause})",
            )
        except Exception:
            logger.exception(
                f"Refund failed for user {user_id}; {self.credit_cost} credit(s) need manual restoration"
            )
            raise

    async def list_briefs(self, user_id: Optional[str]) -> List[Brief]:
        if not user_id:
            raise Unauthorized("Authentication required")
        briefs = await self.store.list_by_user(user_id)
        logger.info(f"Briefs retrieved for user {user_id}: {len(briefs)} briefs")
        return briefs

    async def get_brief(self, user_id: Optional[str], brief_id: str) -> Optional[Brief]:
        if not user_id:
            raise Unauthorized("Authentication required")
        return await self.store.get(user_id, brief_id)

    async def get_balance(self, user_id: Optional[str]) -> int:
        if not user_id:
            raise Unauthorized("Authentication required")
        return await self.ledger.get_balance(user_id)
