"""
Data models for the video translation pipeline.
"""

import base64
import uuid
from dataclasses import dataclass, field
from enum import Enum


class JobState(str, Enum):
    """Lifecycle of one translation job."""

    CREATED = "created"
    STAGED = "staged"
    AUDIO_EXTRACTED = "audio_extracted"
    TRANSCRIBED = "transcribed"
    TRANSLATED = "translated"
    SYNTHESIZED = "synthesized"
    REMUXED = "remuxed"
    COMPLETED = "completed"
    FAILED = "failed"


# Forward order of the non-failure states.
STATE_ORDER = [
    JobState.CREATED,
    JobState.STAGED,
    JobState.AUDIO_EXTRACTED,
    JobState.TRANSCRIBED,
    JobState.TRANSLATED,
    JobState.SYNTHESIZED,
    JobState.REMUXED,
    JobState.COMPLETED,
]

TERMINAL_STATES = {JobState.COMPLETED, JobState.FAILED}


@dataclass
class Job:
    """A single request-scoped translation job."""

    source_language: str
    target_language: str
    job_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    state: JobState = JobState.CREATED
    history: list[JobState] = field(default_factory=lambda: [JobState.CREATED])
    error: str | None = None

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def advance(self, new_state: JobState) -> None:
        """Move one step forward; skipping or leaving a terminal state is an error."""
        if self.finished:
            raise RuntimeError(f"Job {self.job_id} is already {self.state.value}")
        expected = STATE_ORDER[STATE_ORDER.index(self.state) + 1]
        if new_state != expected:
            raise RuntimeError(
                f"Invalid transition {self.state.value} -> {new_state.value} "
                f"(expected {expected.value})"
            )
        self.state = new_state
        self.history.append(new_state)

    def fail(self, reason: str) -> JobState:
        """Mark the job failed; returns the state it failed in."""
        last = self.state
        if not self.finished:
            self.state = JobState.FAILED
            self.history.append(JobState.FAILED)
            self.error = reason
        return last


@dataclass
class TranslationResult:
    """Final dubbed video plus the texts that produced it."""

    video: bytes
    mime_type: str
    source_language: str
    target_language: str
    transcript: str
    translated_text: str
    duration_ms: int

    @property
    def url(self) -> str:
        """Self-contained data URL of the output video."""
        payload = base64.b64encode(self.video).decode("ascii")
        return f"data:{self.mime_type};base64,{payload}"
