"""Smoke tests for the Gradio handlers."""

import random

import pytest

gr = pytest.importorskip("gradio")

from subnetdrill.core import format_address
from subnetdrill.session import PracticeSession
from subnetdrill.ui import ANSWER_HEADERS, check_answers, create_interface, new_question


def test_create_interface():
    assert isinstance(create_interface(), gr.Blocks)


def test_new_question_and_check():
    session = PracticeSession(rng=random.Random(3))
    question, rows, result, session = new_question("medium", session)

    assert "Assigned block" in question
    assert len(rows) == len(session.puzzle.requirements)
    assert all(len(row) == len(ANSWER_HEADERS) for row in rows)
    assert result == ""

    for row, info in zip(rows, session.puzzle.allocations):
        row[2:] = [
            format_address(info.mask),
            str(info.prefix),
            format_address(info.network),
            format_address(info.broadcast),
            format_address(info.gateway),
            format_address(info.last_usable),
        ]
    result, streak, session = check_answers(rows, session)
    assert "All subnets correct" in result
    assert "Streak: **1**" in streak


def test_check_before_question():
    result, streak, session = check_answers([], None)
    assert result.startswith("❌")
    assert session.puzzle is None
