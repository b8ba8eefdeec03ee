# =============================================================================
# core/models/signup.py - Signup Flow State and Results
# =============================================================================
# The signup flow walks a fixed sequence of stages:
#
#   IDLE -> VALIDATING -> CREATING_ACCOUNT -> (UPLOADING_AVATAR)
#        -> PROVISIONING_INDEX -> WRITING_PROFILE -> DONE
#
# Each stage after account creation is best-effort. Its outcome is recorded
# in a StepOutcome so partial failures are visible in the result instead of
# disappearing.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field

from .auth import AuthSession, Notice


class SignupStage(str, Enum):
    """Stages of the signup flow, in order."""
    IDLE = "idle"
    VALIDATING = "validating"
    CREATING_ACCOUNT = "creating_account"
    UPLOADING_AVATAR = "uploading_avatar"
    PROVISIONING_INDEX = "provisioning_index"
    WRITING_PROFILE = "writing_profile"
    DONE = "done"


class StepStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


class StepOutcome(BaseModel):
    """Result of one stage of the signup flow."""

    stage: SignupStage
    status: StepStatus
    detail: str | None = None


class SignupResult(BaseModel):
    """
    Everything a completed signup produced.

    `steps` lists each stage that ran (or was skipped) in order.
    """

    stage: SignupStage = SignupStage.DONE
    user_id: str | None = None
    email: str
    avatar_url: str | None = None
    pinecone_index: str | None = None
    profile_saved: bool = False
    steps: list[StepOutcome] = Field(default_factory=list)
    notice: Notice
    redirect_to: str | None = None
    session: AuthSession | None = None

    def outcome(self, stage: SignupStage) -> StepOutcome | None:
        """Return the recorded outcome for a stage, if it ran."""
        return next((step for step in self.steps if step.stage == stage), None)
