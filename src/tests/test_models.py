"""
Tests for the job state machine and result payload.
"""

import base64

import pytest

from vidtranslate.models import STATE_ORDER, Job, JobState, TranslationResult


def test_job_walks_all_states():
    job = Job(source_language="en", target_language="hi")
    for state in STATE_ORDER[1:]:
        job.advance(state)
    assert job.state == JobState.COMPLETED
    assert job.history == STATE_ORDER
    assert job.finished


def test_job_cannot_skip_states():
    job = Job(source_language="en", target_language="hi")
    with pytest.raises(RuntimeError):
        job.advance(JobState.TRANSCRIBED)


def test_failed_is_terminal():
    """Failure records the state it happened in and absorbs further transitions."""
    job = Job(source_language="en", target_language="hi")
    job.advance(JobState.STAGED)
    assert job.fail("boom") == JobState.STAGED
    assert job.state == JobState.FAILED
    assert job.error == "boom"
    with pytest.raises(RuntimeError):
        job.advance(JobState.AUDIO_EXTRACTED)


def test_result_url_is_data_url():
    result = TranslationResult(
        video=b"\x00\x01video",
        mime_type="video/mp4",
        source_language="en",
        target_language="hi",
        transcript="hello",
        translated_text="नमस्ते",
        duration_ms=1000,
    )
    prefix = "data:video/mp4;base64,"
    assert result.url.startswith(prefix)
    assert base64.b64decode(result.url[len(prefix):]) == b"\x00\x01video"
