"""Tests for the gh-copy entry point."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import click
import pytest

import gh_copy
import prompts


def test_cancelled_prompt_exits_cleanly(monkeypatch, capsys) -> None:
    monkeypatch.setattr(prompts.click, 'prompt', MagicMock(side_effect=click.Abort()))

    with pytest.raises(SystemExit) as excinfo:
        gh_copy.main([])

    assert excinfo.value.code == 0
    assert capsys.readouterr().err == ''


def test_blank_interactive_answers_are_a_usage_error(monkeypatch, capsys) -> None:
    """An empty location that slips past the prompt is still rejected."""
    monkeypatch.setattr(prompts.click, 'prompt', MagicMock(return_value=''))
    monkeypatch.setattr(prompts.click, 'confirm', MagicMock(return_value=False))

    with pytest.raises(SystemExit) as excinfo:
        gh_copy.main([])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert 'source and destination are required' in err
    assert 'usage: gh-copy' in err


@patch('gh_copy.CopyOrchestrator')
def test_push_failure_exit_code_is_propagated(mock_orchestrator: MagicMock) -> None:
    mock_orchestrator.return_value.run.return_value = 1

    with pytest.raises(SystemExit) as excinfo:
        gh_copy.main(['src.git', 'dst.git'])

    assert excinfo.value.code == 1
    cfg = mock_orchestrator.call_args.args[0]
    assert cfg.request.source == 'src.git'
    assert cfg.request.destination == 'dst.git'
